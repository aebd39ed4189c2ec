from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from track_explorer.core.dataset import TrackDataset
from track_explorer.core.dimensions import DimensionRegistry
from track_explorer.core.exceptions import IngestionError
from track_explorer.core.records import normalize_frame
from track_explorer.core.scales import DEFAULT_AXIS_HEIGHT

logger = logging.getLogger(__name__)


def read_tracks_csv(path: Path) -> pd.DataFrame:
    """
    Read a track CSV with every cell kept as text.

    :raises IngestionError: if the file is missing, unreadable or empty
    """
    if not path.is_file():
        raise IngestionError(f"Track file not found at {path}")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        raise IngestionError(f"No data found in track file {path}")
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        raise IngestionError(f"Could not read track file {path}: {e}") from e

    if df.empty:
        raise IngestionError(f"No data found in track file {path}")

    logger.info("Track CSV loaded", extra={"path": str(path), "n_rows": len(df)})
    return df


def load_dataset(
    path: Path,
    registry: Optional[DimensionRegistry] = None,
    axis_height: float = DEFAULT_AXIS_HEIGHT,
    name: Optional[str] = None,
) -> TrackDataset:
    """
    Read, normalise and index a track CSV.

    :raises IngestionError: on missing/unreadable/empty files
    :raises ConfigError: if a declared dimension is absent from the data
    """
    path = Path(path)
    df = read_tracks_csv(path)
    records = normalize_frame(df)

    ds = TrackDataset(
        name=name or path.stem,
        records=records,
        registry=registry,
        axis_height=axis_height,
        file_path=path,
    )

    logger.info(
        "Track dataset ready",
        extra={
            "dataset": ds.name,
            "n_records": len(ds),
            "n_dimensions": len(ds.registry),
            "n_genres": len(ds.genres()) - 1,
        },
    )
    return ds
