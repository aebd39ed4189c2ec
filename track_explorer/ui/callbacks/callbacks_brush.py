from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import dash
from dash import Input, Output, State

from track_explorer.core.brush_state import BrushStore
from track_explorer.ui.helpers import parse_constraint_restyle
from track_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from track_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_brush_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    registry = ctx.dataset.registry
    height = ctx.dataset.axis_height

    # ---------------------------------------------------------
    # Axis brushing / clear-all / reset -> brush-state store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.BRUSH_STATE, "data"),
        Input(IDs.Control.MAIN_GRAPH, "restyleData"),
        Input(IDs.Control.CLEAR_BRUSHES_BTN, "n_clicks"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        State(IDs.Store.BRUSH_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_brush_state(
        restyle_data: Optional[List[Any]],
        _clear_clicks: Optional[int],
        _reset_clicks: Optional[int],
        bs_data: Optional[Dict[str, Any]],
    ):
        triggered = dash.ctx.triggered_id
        brushes = BrushStore.from_dict(bs_data)

        if triggered in (IDs.Control.CLEAR_BRUSHES_BTN, IDs.Control.RESET_BTN):
            brushes.clear_all()
            return brushes.to_dict()

        changes = parse_constraint_restyle(restyle_data, registry, height)
        if not changes:
            return dash.no_update

        for name, selection in changes.items():
            brushes.set(name, selection)

        logger.info(
            "brushes_updated",
            extra={"changed": sorted(changes), "actives": brushes.actives()},
        )
        return brushes.to_dict()
