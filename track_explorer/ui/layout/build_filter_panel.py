from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from track_explorer.config.model import GlobalConfig
from track_explorer.core.dataset import TrackDataset
from track_explorer.ui.ids import IDs


def build_filter_panel(dataset: TrackDataset, global_config: GlobalConfig) -> dbc.Card:
    defaults = global_config.defaults
    pop_min, pop_max = global_config.popularity_range

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div(
                        [
                            html.Label("Minimum popularity", className="form-label"),
                            dcc.Slider(
                                id=IDs.Control.POPULARITY_SLIDER,
                                min=pop_min,
                                max=pop_max,
                                step=1,
                                value=defaults.min_popularity,
                                marks=None,
                                tooltip={"placement": "bottom"},
                            ),
                            html.Small(
                                f"Current: {defaults.min_popularity:g}",
                                id=IDs.Control.POPULARITY_VALUE,
                                className="text-muted",
                            ),
                        ],
                        className="mb-3",
                    ),
                    html.Div(
                        [
                            html.Label("Minimum platforms", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.PLATFORMS_SELECT,
                                options=[
                                    {"label": str(n), "value": n}
                                    for n in global_config.platform_choices
                                ],
                                value=defaults.min_platforms,
                                clearable=False,
                            ),
                            dbc.Alert(
                                id=IDs.Control.PLATFORMS_ALERT,
                                color="warning",
                                is_open=False,
                                dismissable=True,
                                className="mt-2 mb-0 py-2",
                            ),
                        ],
                        className="mb-3",
                    ),
                    html.Div(
                        [
                            html.Label("Genre", className="form-label"),
                            dcc.Dropdown(
                                id=IDs.Control.GENRE_SELECT,
                                options=[{"label": g, "value": g} for g in dataset.genres()],
                                value=defaults.selected_genre,
                                clearable=False,
                            ),
                        ],
                        className="mb-3",
                    ),
                    dbc.Button(
                        "Reset filters",
                        id=IDs.Control.RESET_BTN,
                        color="secondary",
                        className="w-100",
                    ),
                ]
            ),
        ],
        className="te-sidebar",
    )
