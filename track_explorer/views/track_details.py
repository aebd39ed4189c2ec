from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

import pandas as pd

from track_explorer.core.dimensions import DimensionRegistry
from track_explorer.core.records import TrackRecord
from track_explorer.core.session import ExplorerSession

TABLE_COLUMNS = ["record_index", "track_name", "artists", "track_genre", "popularity", "platform_hit_count"]


@dataclass(frozen=True)
class TrackTooltip:
    title: str
    artist: str
    genre: str
    popularity: str
    features: List[Tuple[str, str]]


def _fmt(value: float) -> str:
    return "n/a" if math.isnan(value) else f"{value:.2f}"


def describe_track(record: TrackRecord, registry: DimensionRegistry) -> TrackTooltip:
    """Tooltip content: identity, popularity and every axis value to 2 decimals."""
    popularity = record.popularity
    return TrackTooltip(
        title=record.track_name,
        artist=record.artists,
        genre=record.track_genre,
        popularity="n/a" if math.isnan(popularity) else f"{popularity:g}",
        features=[(dim.label, _fmt(record.value(dim.name))) for dim in registry],
    )


def visible_tracks_frame(session: ExplorerSession, limit: int = 200) -> pd.DataFrame:
    """Visible tracks, most popular first, capped at `limit` rows."""
    rows = [
        {
            "record_index": idx,
            "track_name": rec.track_name,
            "artists": rec.artists,
            "track_genre": rec.track_genre,
            "popularity": rec.popularity,
            "platform_hit_count": rec.platform_hit_count,
        }
        for idx, (rec, keep) in enumerate(zip(session.dataset.records, session.outcome.visible))
        if keep
    ]
    df = pd.DataFrame(rows, columns=TABLE_COLUMNS)
    if df.empty:
        return df
    return df.sort_values("popularity", ascending=False, kind="stable").head(limit)
