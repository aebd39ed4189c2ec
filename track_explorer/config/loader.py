from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from track_explorer.config.model import GlobalConfig
from track_explorer.core.exceptions import ConfigError
from track_explorer.core.filter_state import ScalarFilters
from track_explorer.core.scales import DEFAULT_AXIS_HEIGHT

logger = logging.getLogger(__name__)


def _resolve_path(root: Path, raw: str) -> Path:
    """Absolute paths are used as-is; relative ones hang off the config root."""
    path = Path(raw)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config root directory.

    Expected structure:

        root/
            global.json

    Recognised keys in global.json:

    - data_file (required): track CSV, relative to root unless absolute
    - ui_title, subtitle: navbar text
    - axis_height: pixel height of every axis
    - defaults: {"min_popularity", "min_platforms", "selected_genre"}
    - platform_choices: options of the platforms dropdown
    - popularity_range: [min, max] of the popularity slider
    - dimensions: optional list overriding the built-in axes

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is malformed.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw: Dict[str, Any] = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if "data_file" not in raw:
        raise ConfigError(f"'data_file' missing from {global_path}")

    popularity_range = raw.get("popularity_range", [0, 100])
    if len(popularity_range) != 2 or popularity_range[0] > popularity_range[1]:
        raise ConfigError(f"Invalid popularity_range {popularity_range!r}")

    dimensions = raw.get("dimensions")
    if dimensions is not None and not isinstance(dimensions, list):
        raise ConfigError("'dimensions' must be a list of dimension entries")

    config = GlobalConfig(
        data_file=_resolve_path(root, raw["data_file"]),
        ui_title=raw.get("ui_title", "Track Explorer"),
        subtitle=raw.get("subtitle", "Audio features of popular tracks"),
        axis_height=float(raw.get("axis_height", DEFAULT_AXIS_HEIGHT)),
        defaults=ScalarFilters.from_dict(raw.get("defaults")),
        platform_choices=[int(v) for v in raw.get("platform_choices", range(1, 8))],
        popularity_range=(float(popularity_range[0]), float(popularity_range[1])),
        dimensions=dimensions,
    )

    logger.info(
        "Global config loaded",
        extra={
            "data_file": str(config.data_file),
            "custom_dimensions": dimensions is not None,
        },
    )
    return config
