"""
Top-level package for the track explorer.

This package exposes the core architecture (filter engine, views, UI adapters).
Most code should import from submodules such as:
    track_explorer.core
    track_explorer.views
    track_explorer.ui
"""

__all__: list[str] = []
