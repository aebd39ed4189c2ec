from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output, State

from track_explorer.ui.helpers import active_axes_text, session_from_stores, tooltip_children
from track_explorer.ui.ids import IDs
from track_explorer.views.track_details import describe_track, visible_tracks_frame

if TYPE_CHECKING:
    from track_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering the chart.", details)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    registry = ctx.dataset.registry

    # ---------------------------------------------------------
    # Stores -> chart, counts, active axes, track table
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MAIN_GRAPH, "figure"),
        Output(IDs.Control.SONG_COUNT, "children"),
        Output(IDs.Control.UNDRAWABLE_NOTE, "children"),
        Output(IDs.Control.ACTIVE_AXES, "children"),
        Output(IDs.Control.TRACK_TABLE, "data"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Store.BRUSH_STATE, "data"),
    )
    def update_chart(fs_data: Optional[Dict[str, Any]], bs_data: Optional[Dict[str, Any]]):
        try:
            session = session_from_stores(ctx, fs_data, bs_data)
            outcome = session.outcome

            data = ctx.view.compute_data(session)
            figure = ctx.view.render_figure(data, session)
            table = visible_tracks_frame(session).to_dict("records")
        except Exception:
            logger.exception(
                "Error in update_chart",
                extra={"filter_state": fs_data, "brush_state": bs_data},
            )
            return (
                _error_figure(
                    "The app hit an unexpected error. "
                    "If this keeps happening, grab the logs and open an issue."
                ),
                "-",
                "",
                "",
                [],
            )

        undrawable = data.attrs.get("n_undrawable", 0)
        note = f"{undrawable} tracks not drawn (missing values)" if undrawable else ""

        logger.info(
            "render_done",
            extra={"visible_count": outcome.visible_count, "actives": list(outcome.actives)},
        )
        return (
            figure,
            str(outcome.visible_count),
            note,
            active_axes_text(outcome.actives, registry),
            table,
        )

    # ---------------------------------------------------------
    # Track table row -> tooltip card
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TRACK_TOOLTIP, "children"),
        Input(IDs.Control.TRACK_TABLE, "active_cell"),
        State(IDs.Control.TRACK_TABLE, "derived_viewport_data"),
        prevent_initial_call=True,
    )
    def show_track_tooltip(active_cell: Optional[Dict[str, Any]], rows: Optional[List[Dict[str, Any]]]):
        if not active_cell or not rows:
            return dash.no_update

        row_idx = active_cell.get("row")
        if row_idx is None or row_idx >= len(rows):
            return dash.no_update

        record = ctx.dataset.records[int(rows[row_idx]["record_index"])]
        return tooltip_children(describe_track(record, registry))
