from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from track_explorer.config.model import GlobalConfig
from track_explorer.ui.ids import IDs


def build_navbar(global_config: GlobalConfig, n_tracks: int) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: visible-track counter
                html.Div(
                    [
                        html.Div("Tracks shown", className="navbar-count-title"),
                        html.Div(
                            [
                                html.Span("-", id=IDs.Control.SONG_COUNT, className="navbar-count"),
                                html.Span(f" / {n_tracks}", className="text-muted"),
                            ]
                        ),
                        html.Small(id=IDs.Control.UNDRAWABLE_NOTE, className="text-muted"),
                    ],
                    className="ms-auto text-end",
                ),
            ],
        ),
        dark=True,
        color="dark",
        className="shadow-sm te-navbar",
    )
