from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from track_explorer.ui.ids import IDs


def build_plot_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Audio features"),
                        dbc.Button(
                            "Clear axis filters",
                            id=IDs.Control.CLEAR_BRUSHES_BTN,
                            color="secondary",
                            size="sm",
                            className="ms-auto",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dcc.Loading(
                        id="main-graph-loading",
                        type="default",
                        children=dcc.Graph(
                            id=IDs.Control.MAIN_GRAPH,
                            style={"height": "560px"},
                            config={"responsive": True, "displaylogo": False},
                        ),
                    ),
                    html.Div(
                        id=IDs.Control.ACTIVE_AXES,
                        className="brush-help text-center text-muted mt-2",
                    ),
                ],
                className="te-main-body",
            ),
        ],
        className="te-maincard",
    )
