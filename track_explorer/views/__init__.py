from .parallel_coordinates_view import ParallelCoordinatesView
from .track_details import TrackTooltip, describe_track, visible_tracks_frame

__all__ = ["ParallelCoordinatesView", "TrackTooltip", "describe_track", "visible_tracks_frame"]
