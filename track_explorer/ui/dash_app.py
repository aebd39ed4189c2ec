from __future__ import annotations

import logging
import socket
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from track_explorer.config.loader import load_global_config
from track_explorer.core.dataset_loader import load_dataset
from track_explorer.core.exceptions import IngestionError
from track_explorer.views.parallel_coordinates_view import ParallelCoordinatesView
from track_explorer.ui.layout.build_layout import build_layout
from track_explorer.ui.callbacks.callbacks_brush import register_brush_callbacks
from track_explorer.ui.callbacks.callbacks_filters import register_filter_callbacks
from track_explorer.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def find_free_port(start_port: int, host: str = "localhost", attempts: int = 100) -> int:
    """First port from `start_port` nothing is listening on; `start_port` if all are taken."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex((host, port)) != 0:
                return port
    return start_port


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load config
    global_config = load_global_config(config_root)

    # 2) Load tracks; ingestion failures get an error page, config errors propagate
    ctx = AppConfig(config_root=config_root, global_config=global_config)
    try:
        dataset = load_dataset(
            global_config.data_file,
            registry=global_config.dimension_registry(),
            axis_height=global_config.axis_height,
        )
    except IngestionError as e:
        logger.error(
            "Error loading the track data",
            extra={"data_file": str(global_config.data_file), "error": str(e)},
        )
        ctx.load_error = str(e)
    else:
        ctx.dataset = dataset
        ctx.view = ParallelCoordinatesView(dataset)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.DARKLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    if ctx.dataset is None:
        return app

    ctx.validate()

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_brush_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app
