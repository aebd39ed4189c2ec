from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        BRUSH_STATE = "brush-state"

    class Control:
        # Scalar filters
        POPULARITY_SLIDER = "popularity-slider"
        POPULARITY_VALUE = "popularity-value"
        PLATFORMS_SELECT = "platforms-filter"
        GENRE_SELECT = "genre-filter"
        RESET_BTN = "reset-button"
        PLATFORMS_ALERT = "platforms-alert"

        # Chart
        MAIN_GRAPH = "main-graph"
        CLEAR_BRUSHES_BTN = "clear-brushes-btn"
        ACTIVE_AXES = "active-axes"

        # Counts
        SONG_COUNT = "song-count"
        UNDRAWABLE_NOTE = "undrawable-note"

        # Track table + tooltip
        TRACK_TABLE = "track-table"
        TRACK_TOOLTIP = "track-tooltip"
