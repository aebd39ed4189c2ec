from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from track_explorer.core.exceptions import IngestionError

logger = logging.getLogger(__name__)

NUMERIC_FIELDS: Tuple[str, ...] = (
    "danceability",
    "energy",
    "key",
    "loudness",
    "mode",
    "speechiness",
    "acousticness",
    "instrumentalness",
    "liveness",
    "valence",
    "tempo_x",
    "time_signature",
    "spectral_centroid",
    "spectral_bandwidth",
    "spectral_rolloff",
    "zero_crossing_rate",
    "chroma_stft",
    "beat_strength",
    "harmonic_to_percussive_ratio",
    "speech_to_music_ratio",
)

REQUIRED_COLUMNS: Tuple[str, ...] = (
    "track_name",
    "artists",
    "track_genre",
    "popularity",
    "Track_Score",
) + NUMERIC_FIELDS

PLATFORM_SUFFIX = "_Hit"
TRUE_MARKER = "True"
UNKNOWN_GENRE = "Unknown"


@dataclass(frozen=True)
class TrackRecord:
    """
    One track, typed and immutable after ingestion.

    Fields:

    - track_name / artists / track_genre: identifying text
    - popularity: numeric popularity (NaN when unparseable)
    - track_score: numeric score, backfilled from popularity when the column is absent
    - features: read-only mapping of numeric audio features (NaN when unparseable)
    - platform_hits: platforms whose ``<Platform>_Hit`` column equals "True"
    - platform_hit_count: len(platform_hits), fixed at ingestion
    """

    track_name: str
    artists: str
    track_genre: str
    popularity: float
    track_score: float
    features: Mapping[str, float] = field(default_factory=dict)
    platform_hits: FrozenSet[str] = frozenset()

    @property
    def platform_hit_count(self) -> int:
        return len(self.platform_hits)

    def value(self, name: str) -> float:
        """
        Resolve a numeric field by name.

        Raises:
            KeyError: if the record carries no such field
        """
        if name == "popularity":
            return self.popularity
        if name == "track_score":
            return self.track_score
        return self.features[name]

    def has_field(self, name: str) -> bool:
        return name in ("popularity", "track_score") or name in self.features


def to_float(raw: Any) -> float:
    """Coerce a raw cell to float; anything unparseable becomes NaN."""
    if raw is None:
        return math.nan
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def platform_columns(columns: Iterable[str]) -> List[str]:
    """Return the ``*_Hit`` columns of a header, in header order."""
    return [c for c in columns if c.endswith(PLATFORM_SUFFIX)]


def platform_name(column: str) -> str:
    return column[: -len(PLATFORM_SUFFIX)]


def missing_columns(columns: Iterable[str]) -> List[str]:
    present = set(columns)
    return [c for c in REQUIRED_COLUMNS if c not in present]


def normalize_row(
    row: Mapping[str, Any],
    numeric_fields: Sequence[str],
    hit_columns: Sequence[str],
    has_track_score: bool = True,
) -> TrackRecord:
    """
    Build a TrackRecord from one raw row.

    `numeric_fields` and `hit_columns` come from the header, so no key
    scanning happens per row.
    """
    popularity = to_float(row.get("popularity"))
    track_score = to_float(row.get("Track_Score")) if has_track_score else popularity

    features = {name: to_float(row.get(name)) for name in numeric_fields}
    hits = frozenset(
        platform_name(col) for col in hit_columns if row.get(col) == TRUE_MARKER
    )

    genre = row.get("track_genre")
    if genre is None or (isinstance(genre, float) and math.isnan(genre)) or str(genre) == "":
        genre = UNKNOWN_GENRE

    return TrackRecord(
        track_name=str(row.get("track_name") or ""),
        artists=str(row.get("artists") or ""),
        track_genre=str(genre),
        popularity=popularity,
        track_score=track_score,
        features=MappingProxyType(features),
        platform_hits=hits,
    )


def normalize_rows(
    rows: Sequence[Mapping[str, Any]],
    columns: Optional[Sequence[str]] = None,
) -> Tuple[TrackRecord, ...]:
    """
    Normalise raw string rows into TrackRecords.

    :param rows: string-keyed, string-valued rows (e.g. csv.DictReader output)
    :param columns: header; defaults to the keys of the first row
    :return: tuple of records, in input order
    :raises IngestionError: if there are no rows
    """
    if not rows:
        raise IngestionError("No data found in track file")

    header: List[str] = list(columns) if columns is not None else list(rows[0].keys())

    missing = missing_columns(header)
    if missing:
        logger.warning("Missing columns in track data", extra={"missing_columns": missing})
        if "Track_Score" in missing:
            logger.warning("Creating Track_Score from popularity as a fallback")

    numeric_fields = [name for name in NUMERIC_FIELDS if name in header]
    hit_columns = platform_columns(header)
    has_track_score = "Track_Score" in header

    records = tuple(
        normalize_row(row, numeric_fields, hit_columns, has_track_score=has_track_score)
        for row in rows
    )

    logger.info(
        "Track rows normalised",
        extra={
            "n_records": len(records),
            "n_numeric_fields": len(numeric_fields),
            "platform_columns": hit_columns,
        },
    )
    return records


def normalize_frame(df: pd.DataFrame) -> Tuple[TrackRecord, ...]:
    """
    Normalise a DataFrame read with ``dtype=str``.

    Empty cells should be kept as empty strings (``keep_default_na=False``)
    so that "True"/"False" markers are compared verbatim.
    """
    if df.empty:
        raise IngestionError("No data found in track file")
    rows: List[Dict[str, Any]] = df.to_dict("records")
    return normalize_rows(rows, columns=[str(c) for c in df.columns])


def records_to_frame(records: Sequence[TrackRecord]) -> pd.DataFrame:
    """Flatten records into a DataFrame (one column per numeric feature)."""
    data = []
    for rec in records:
        row: Dict[str, Any] = {
            "track_name": rec.track_name,
            "artists": rec.artists,
            "track_genre": rec.track_genre,
            "popularity": rec.popularity,
            "track_score": rec.track_score,
            "platform_hit_count": rec.platform_hit_count,
        }
        row.update(rec.features)
        data.append(row)
    return pd.DataFrame(data)
