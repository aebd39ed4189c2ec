from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import dash
from dash import Input, Output, State

from track_explorer.ui.helpers import session_from_stores
from track_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from track_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    defaults = ctx.global_config.defaults

    # ---------------------------------------------------------
    # Scalar controls -> filter-state store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Control.POPULARITY_SLIDER, "value"),
        Output(IDs.Control.PLATFORMS_SELECT, "value"),
        Output(IDs.Control.GENRE_SELECT, "value"),
        Output(IDs.Control.PLATFORMS_ALERT, "children"),
        Output(IDs.Control.PLATFORMS_ALERT, "is_open"),
        Input(IDs.Control.POPULARITY_SLIDER, "value"),
        Input(IDs.Control.PLATFORMS_SELECT, "value"),
        Input(IDs.Control.GENRE_SELECT, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
    )
    def update_filter_state(
        popularity: Optional[float],
        platforms: Optional[int],
        genre: Optional[str],
        _reset_clicks: Optional[int],
        fs_data: Optional[Dict[str, Any]],
    ):
        triggered = dash.ctx.triggered_id
        session = session_from_stores(ctx, fs_data, None)
        warning = ""

        if triggered == IDs.Control.RESET_BTN:
            session.reset()
        elif triggered == IDs.Control.PLATFORMS_SELECT and platforms is not None:
            requested = int(platforms)
            if not session.set_min_platforms(requested):
                warning = (
                    f"No tracks found with {requested} or more platforms. "
                    f"Resetting to {defaults.min_platforms}."
                )
        elif triggered == IDs.Control.GENRE_SELECT:
            session.set_genre(genre)
        elif triggered == IDs.Control.POPULARITY_SLIDER and popularity is not None:
            session.set_popularity_threshold(popularity)

        filters = session.filters
        logger.info(
            "filters_updated",
            extra={"trigger": triggered, "filters": filters.to_dict()},
        )
        return (
            filters.to_dict(),
            filters.min_popularity,
            filters.min_platforms,
            filters.selected_genre,
            warning,
            bool(warning),
        )

    @app.callback(
        Output(IDs.Control.POPULARITY_VALUE, "children"),
        Input(IDs.Control.POPULARITY_SLIDER, "value"),
    )
    def update_popularity_label(popularity: Optional[float]):
        value = defaults.min_popularity if popularity is None else popularity
        return f"Current: {value:g}"
