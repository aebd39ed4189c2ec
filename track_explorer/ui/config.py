from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from track_explorer.config.model import GlobalConfig
from track_explorer.core.dataset import TrackDataset
from track_explorer.views.parallel_coordinates_view import ParallelCoordinatesView


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    dataset: Optional[TrackDataset] = None
    view: Optional[ParallelCoordinatesView] = None
    load_error: Optional[str] = None

    def validate(self) -> None:
        """Ensure the dataset and view are attached before callbacks are registered."""
        if self.dataset is None:
            raise RuntimeError("AppConfig.dataset must be initialized.")
        if self.view is None:
            raise RuntimeError("AppConfig.view must be initialized.")
