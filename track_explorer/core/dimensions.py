from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from track_explorer.core.exceptions import ConfigError
from track_explorer.core.records import TrackRecord

logger = logging.getLogger(__name__)


class ScaleType(str, Enum):
    LINEAR = "linear"
    LOG = "log"
    ORDINAL = "ordinal"

    @classmethod
    def parse(cls, raw: str) -> "ScaleType":
        aliases = {"logarithmic": cls.LOG}
        key = str(raw).lower()
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ConfigError(f"Unknown scale type '{raw}'")


@dataclass(frozen=True)
class Dimension:
    """
    One axis of the parallel-coordinates chart.

    :param name: numeric record field the axis reads
    :param label: display text
    :param type: scale kind
    :param values: explicit value sequence for ordinal axes
    :param cap: upper domain cap for log axes; a capped axis also clamps
    """
    name: str
    label: str
    type: ScaleType = ScaleType.LINEAR
    values: Optional[Tuple[float, ...]] = None
    cap: Optional[float] = None

    @property
    def is_ordinal(self) -> bool:
        return self.type is ScaleType.ORDINAL

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Dimension":
        try:
            name = str(data["name"])
        except KeyError:
            raise ConfigError(f"Dimension entry without a name: {dict(data)!r}")

        values = data.get("values")
        cap = data.get("cap")
        return cls(
            name=name,
            label=str(data.get("label", name)),
            type=ScaleType.parse(data.get("type", "linear")),
            values=tuple(float(v) for v in values) if values is not None else None,
            cap=float(cap) if cap is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "label": self.label, "type": self.type.value}
        if self.values is not None:
            out["values"] = list(self.values)
        if self.cap is not None:
            out["cap"] = self.cap
        return out


DEFAULT_DIMENSIONS: Tuple[Dimension, ...] = (
    Dimension("danceability", "Danceability"),
    Dimension("energy", "Energy"),
    Dimension("valence", "Valence"),
    Dimension("acousticness", "Acousticness"),
    Dimension("instrumentalness", "Instrumentalness", ScaleType.LOG, cap=0.9),
    Dimension("tempo_x", "Tempo"),
    Dimension("loudness", "Loudness"),
    Dimension("speechiness", "Speechiness"),
    Dimension("liveness", "Liveness"),
    Dimension("beat_strength", "Beat Strength"),
    Dimension("time_signature", "Time Signature", ScaleType.ORDINAL, values=(3.0, 4.0, 5.0)),
    Dimension("spectral_centroid", "Spectral Centroid"),
    Dimension("spectral_bandwidth", "Spectral Bandwidth"),
    Dimension("spectral_rolloff", "Spectral Rolloff"),
    Dimension("zero_crossing_rate", "Zero Crossing Rate"),
    Dimension("chroma_stft", "Chroma STFT"),
    Dimension("harmonic_to_percussive_ratio", "Harm-Percus Ratio"),
    Dimension("speech_to_music_ratio", "Speech-Music Ratio"),
)


class DimensionRegistry:
    """
    Ordered, read-only registry of chart dimensions.

    Design Notes:
    - order is the left-to-right axis order
    - each dimension 'name' is unique across the registry
    - lookups by name are dict-backed
    """

    def __init__(self, dimensions: Iterable[Dimension] = DEFAULT_DIMENSIONS):
        self._dimensions: Tuple[Dimension, ...] = tuple(dimensions)
        self._by_name: Dict[str, Dimension] = {}
        self._index: Dict[str, int] = {}

        for idx, dim in enumerate(self._dimensions):
            if dim.name in self._by_name:
                raise ConfigError(f"Dimension '{dim.name}' declared twice")
            self._by_name[dim.name] = dim
            self._index[dim.name] = idx

    @classmethod
    def from_config(cls, raw: Optional[Sequence[Mapping[str, Any]]]) -> "DimensionRegistry":
        if not raw:
            return cls()
        return cls(Dimension.from_dict(entry) for entry in raw)

    def __iter__(self) -> Iterator[Dimension]:
        return iter(self._dimensions)

    def __len__(self) -> int:
        return len(self._dimensions)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def names(self) -> List[str]:
        return [d.name for d in self._dimensions]

    def get(self, name: str) -> Dimension:
        """
        :raises KeyError: if no dimension with the given name exists
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"Dimension '{name}' not found")

    def index_of(self, name: str) -> int:
        return self._index[name]

    def validate_against(self, records: Sequence[TrackRecord]) -> None:
        """
        Check that every dimension resolves on every record.

        :raises ConfigError: listing the dimensions that are missing
        """
        missing = sorted(
            {dim.name for dim in self._dimensions for rec in records if not rec.has_field(dim.name)}
        )
        if missing:
            logger.error(
                "Declared dimensions are absent from the track data",
                extra={"missing_dimensions": missing},
            )
            raise ConfigError(f"Dimensions not present in data: {missing}")
