from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from track_explorer.core.dimensions import DimensionRegistry
from track_explorer.core.exceptions import IngestionError
from track_explorer.core.filter_state import ALL_GENRES
from track_explorer.core.records import TrackRecord, records_to_frame
from track_explorer.core.scales import DEFAULT_AXIS_HEIGHT, Scale, build_scales


class TrackDataset:
    """
    Track records plus everything derived from them once per session.

    Includes:
    - the immutable record set
    - the dimension registry, validated against the records
    - one scale per dimension, built from the full record set
    - cached genre list and flat DataFrame for the UI
    """

    def __init__(
        self,
        name: str,
        records: Sequence[TrackRecord],
        registry: Optional[DimensionRegistry] = None,
        axis_height: float = DEFAULT_AXIS_HEIGHT,
        file_path: Optional[Path] = None,
    ) -> None:
        if not records:
            raise IngestionError(f"Dataset '{name}' has no records")

        self.name = name
        self.records: Tuple[TrackRecord, ...] = tuple(records)
        self.registry = registry or DimensionRegistry()
        self.axis_height = float(axis_height)
        self.file_path = file_path

        # Fatal: a dimension that does not resolve is a maintenance bug
        self.registry.validate_against(self.records)

        self.scales: Dict[str, Scale] = build_scales(self.registry, self.records, self.axis_height)

        self._genres: Optional[List[str]] = None
        self._frame: Optional[pd.DataFrame] = None

    def __len__(self) -> int:
        return len(self.records)

    def genres(self) -> List[str]:
        """Sentinel first, then the distinct genres sorted."""
        if self._genres is None:
            self._genres = [ALL_GENRES] + sorted({rec.track_genre for rec in self.records})
        return self._genres

    def count_with_platforms(self, min_platforms: int) -> int:
        return sum(1 for rec in self.records if rec.platform_hit_count >= min_platforms)

    @property
    def frame(self) -> pd.DataFrame:
        """Records as a DataFrame, index aligned with `records`."""
        if self._frame is None:
            self._frame = records_to_frame(self.records)
        return self._frame
