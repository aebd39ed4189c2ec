class TrackExplorerError(Exception):
    """Base exception for all track_explorer errors"""
    pass

class IngestionError(TrackExplorerError):
    """Track file is missing, unreadable or has no rows"""
    pass

class ConfigError(TrackExplorerError):
    """
    Invalid or inconsistent global.json / dimension declarations,
    e.g. a dimension whose name does not resolve on the loaded records
    """
    pass

class ScaleError(TrackExplorerError):
    """A scale could not be built for a dimension"""
    pass
