from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from track_explorer.core.dimensions import DimensionRegistry
from track_explorer.core.filter_state import ScalarFilters
from track_explorer.core.scales import DEFAULT_AXIS_HEIGHT


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - data_file: track CSV, already resolved against the config root
    - defaults: scalar filters applied at startup and on reset
    - dimensions: raw dimension entries; None means the built-in axis list
    """
    data_file: Path
    ui_title: str = "Track Explorer"
    subtitle: str = "Audio features of popular tracks"
    axis_height: float = DEFAULT_AXIS_HEIGHT
    defaults: ScalarFilters = field(default_factory=ScalarFilters)
    platform_choices: List[int] = field(default_factory=lambda: list(range(1, 8)))
    popularity_range: Tuple[float, float] = (0.0, 100.0)
    dimensions: Optional[List[Dict[str, Any]]] = None

    def dimension_registry(self) -> DimensionRegistry:
        return DimensionRegistry.from_config(self.dimensions)
