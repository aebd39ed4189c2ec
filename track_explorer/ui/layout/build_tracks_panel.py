from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dash_table, html

from track_explorer.ui.ids import IDs

_COLUMNS = [
    ("track_name", "Track"),
    ("artists", "Artist"),
    ("track_genre", "Genre"),
    ("popularity", "Popularity"),
    ("platform_hit_count", "Platforms"),
]


def build_tracks_panel(page_size: int = 15) -> dbc.Card:
    table = dash_table.DataTable(
        id=IDs.Control.TRACK_TABLE,
        data=[],
        columns=[{"name": label, "id": col} for col, label in _COLUMNS],
        style_table={"overflowX": "auto"},
        style_as_list_view=True,
        style_cell={
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "maxWidth": "260px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
            "backgroundColor": "#181818",
            "color": "#E0E0E0",
        },
        style_header={
            "fontWeight": "600",
            "backgroundColor": "#242424",
            "borderBottom": "1px solid #2A2A2A",
        },
        page_size=page_size,
        sort_action="native",
    )

    return dbc.Card(
        [
            dbc.CardHeader("Visible tracks", className="fw-semibold"),
            dbc.CardBody(
                dbc.Row(
                    [
                        dbc.Col(table, md=8),
                        dbc.Col(
                            html.Div(
                                "Select a track to see its audio features.",
                                id=IDs.Control.TRACK_TOOLTIP,
                                className="tooltip-card",
                            ),
                            md=4,
                        ),
                    ]
                )
            ),
        ],
        className="te-tracks-card mt-3",
    )
