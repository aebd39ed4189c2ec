from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from track_explorer.ui.ids import IDs
from track_explorer.ui.layout.build_filter_panel import build_filter_panel
from track_explorer.ui.layout.build_navbar import build_navbar
from track_explorer.ui.layout.build_plot_panel import build_plot_panel
from track_explorer.ui.layout.build_tracks_panel import build_tracks_panel

if TYPE_CHECKING:
    from track_explorer.ui.config import AppConfig


def build_error_layout(ctx: AppConfig) -> dbc.Container:
    """Shown instead of the chart when the track data could not be loaded."""
    return dbc.Container(
        fluid=True,
        className="te-root",
        children=[
            html.H2(ctx.global_config.ui_title, className="mt-4"),
            dbc.Alert(
                [
                    html.P(f"Sorry, there was an error loading the data: {ctx.load_error}"),
                    html.P(
                        f"Please check that {ctx.global_config.data_file} exists and is accessible.",
                        className="mb-0",
                    ),
                ],
                color="danger",
                className="error-message",
            ),
        ],
    )


def build_layout(ctx: AppConfig) -> dbc.Container:
    if ctx.dataset is None:
        return build_error_layout(ctx)

    return dbc.Container(
        fluid=True,
        className="te-root",
        children=[
            build_navbar(ctx.global_config, len(ctx.dataset)),

            # Per-browser filter state
            dcc.Store(
                id=IDs.Store.FILTER_STATE,
                storage_type="session",
                data=ctx.global_config.defaults.to_dict(),
            ),
            dcc.Store(id=IDs.Store.BRUSH_STATE, storage_type="session", data={}),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(ctx.dataset, ctx.global_config), md=3),
                    dbc.Col(
                        [
                            build_plot_panel(),
                            build_tracks_panel(),
                        ],
                        md=9,
                    ),
                ],
                className="mt-3",
            ),
        ],
    )
