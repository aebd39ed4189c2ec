from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from track_explorer.core.dimensions import Dimension, DimensionRegistry, ScaleType
from track_explorer.core.exceptions import ScaleError
from track_explorer.core.records import TrackRecord

logger = logging.getLogger(__name__)

LOG_FLOOR = 1e-5
DEFAULT_AXIS_HEIGHT = 420.0
FALLBACK_DOMAIN = (0.0, 1.0)


def _is_number(value: float) -> bool:
    return value is not None and not math.isnan(value)


class Scale(ABC):
    """
    Value <-> axis-position mapping for one dimension.

    Positions are pixels along the axis; the range runs from the bottom of
    the axis (`height`) to the top (0), so larger values sit higher.
    """

    kind: ScaleType
    invertible: bool = True

    def __init__(self, domain: Tuple[float, float], height: float, clamp: bool = False):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(height), 0.0)
        self.clamp = clamp

    @property
    def height(self) -> float:
        return self.range[0]

    @abstractmethod
    def forward(self, value: float) -> float:
        """Map a raw value to an axis position."""
        raise NotImplementedError()

    @abstractmethod
    def invert(self, position: float) -> float:
        """Map an axis position back to a raw value."""
        raise NotImplementedError()

    @abstractmethod
    def ticks(self, count: int = 5) -> List[Tuple[float, str]]:
        """(position, label) pairs for drawing the axis."""
        raise NotImplementedError()

    def _t_to_range(self, t: float) -> float:
        if self.clamp:
            t = min(1.0, max(0.0, t))
        r0, r1 = self.range
        return r0 + t * (r1 - r0)

    def _range_to_t(self, position: float) -> float:
        r0, r1 = self.range
        if r1 == r0:
            return 0.5
        t = (position - r0) / (r1 - r0)
        if self.clamp:
            t = min(1.0, max(0.0, t))
        return t

    def __repr__(self) -> str:
        return f"{type(self).__name__}(domain={self.domain}, range={self.range}, clamp={self.clamp})"


class LinearScale(Scale):
    kind = ScaleType.LINEAR

    def forward(self, value: float) -> float:
        if not _is_number(value):
            return math.nan
        d0, d1 = self.domain
        if d1 == d0:
            return self._t_to_range(0.5)
        return self._t_to_range((value - d0) / (d1 - d0))

    def invert(self, position: float) -> float:
        d0, d1 = self.domain
        return d0 + self._range_to_t(position) * (d1 - d0)

    def ticks(self, count: int = 5) -> List[Tuple[float, str]]:
        d0, d1 = self.domain
        if d0 == d1:
            return [(self.forward(d0), _format_tick(d0))]
        return [(self.forward(v), _format_tick(v)) for v in np.linspace(d0, d1, count)]


class LogScale(Scale):
    """
    Log-interpolated scale over a strictly positive domain.

    Non-positive or NaN inputs sit on the domain floor.
    """

    kind = ScaleType.LOG

    def __init__(self, domain: Tuple[float, float], height: float, clamp: bool = False):
        if domain[0] <= 0 or domain[1] <= 0:
            raise ScaleError(f"Log domain must be strictly positive, got {domain}")
        super().__init__(domain, height, clamp=clamp)

    @property
    def floor(self) -> float:
        return self.domain[0]

    def substitute(self, value: float) -> float:
        if not _is_number(value) or value <= 0:
            return self.floor
        return value

    def forward(self, value: float) -> float:
        value = self.substitute(value)
        l0, l1 = math.log(self.domain[0]), math.log(self.domain[1])
        if l1 == l0:
            return self._t_to_range(0.5)
        return self._t_to_range((math.log(value) - l0) / (l1 - l0))

    def invert(self, position: float) -> float:
        l0, l1 = math.log(self.domain[0]), math.log(self.domain[1])
        return math.exp(l0 + self._range_to_t(position) * (l1 - l0))

    def ticks(self, count: int = 5) -> List[Tuple[float, str]]:
        d0, d1 = self.domain
        if d0 == d1:
            return [(self.forward(d0), _format_tick(d0))]
        return [(self.forward(v), _format_tick(v)) for v in np.geomspace(d0, d1, count)]


class OrdinalScale(Scale):
    """
    Point scale: each category sits at an evenly spaced position.

    A single category sits mid-axis; unknown values map to NaN.
    """

    kind = ScaleType.ORDINAL
    invertible = False

    def __init__(self, values: Sequence[float], height: float):
        if not values:
            raise ScaleError("Ordinal scale needs at least one value")
        self.values: Tuple[float, ...] = tuple(float(v) for v in values)
        super().__init__((self.values[0], self.values[-1]), height)

        n = len(self.values)
        if n == 1:
            positions = [self.height / 2.0]
        else:
            step = self.height / (n - 1)
            positions = [self.height - step * i for i in range(n)]
        self._positions: Dict[float, float] = dict(zip(self.values, positions))

    def forward(self, value: float) -> float:
        if not _is_number(value):
            return math.nan
        return self._positions.get(float(value), math.nan)

    def invert(self, position: float) -> float:
        raise TypeError("Ordinal scales cannot be inverted; compare positions instead")

    def ticks(self, count: int = 5) -> List[Tuple[float, str]]:
        return [(self._positions[v], _format_tick(v)) for v in self.values]


def _format_tick(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.3g}"


# -----------------------------------------------------------------------------
# Builders
# -----------------------------------------------------------------------------
def _column(dimension: Dimension, records: Sequence[TrackRecord]) -> np.ndarray:
    return np.array([rec.value(dimension.name) for rec in records], dtype=float)


def _linear_scale(dimension: Dimension, values: np.ndarray, height: float) -> LinearScale:
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        raise ScaleError(f"No numeric values for '{dimension.name}'")
    return LinearScale((float(finite.min()), float(finite.max())), height)


def _log_scale(dimension: Dimension, values: np.ndarray, height: float) -> LogScale:
    # zero and NaN count as the floor when looking for the minimum
    floored = np.where(np.isnan(values) | (values == 0), LOG_FLOOR, values)
    floor = max(LOG_FLOOR, float(floored.min()))

    if dimension.cap is not None:
        observed = values[~np.isnan(values)]
        if observed.size == 0:
            raise ScaleError(f"No numeric values for '{dimension.name}'")
        ceiling = min(dimension.cap, float(observed.max()))
        clamp = True
    else:
        ceiling = float(np.maximum(floored, floor).max())
        clamp = False

    if ceiling < floor:
        raise ScaleError(
            f"Log domain for '{dimension.name}' is empty: floor {floor} > ceiling {ceiling}"
        )
    return LogScale((floor, ceiling), height, clamp=clamp)


def _ordinal_scale(dimension: Dimension, values: np.ndarray, height: float) -> OrdinalScale:
    if dimension.values is not None:
        categories = list(dimension.values)
    else:
        categories = sorted(set(values[np.isfinite(values)].tolist()))
    return OrdinalScale(categories, height)


_BUILDERS = {
    ScaleType.LINEAR: _linear_scale,
    ScaleType.LOG: _log_scale,
    ScaleType.ORDINAL: _ordinal_scale,
}


def build_scale(
    dimension: Dimension,
    records: Sequence[TrackRecord],
    height: float = DEFAULT_AXIS_HEIGHT,
) -> Scale:
    """
    Build the scale for one dimension from the full record set.

    A dimension whose scale cannot be built gets a linear [0, 1] fallback so
    the rest of the chart still renders.
    """
    try:
        scale = _BUILDERS[dimension.type](dimension, _column(dimension, records), height)
    except (ScaleError, ValueError) as e:
        logger.error(
            "Error building scale; falling back to linear [0, 1]",
            extra={"dimension": dimension.name, "error": str(e)},
        )
        return LinearScale(FALLBACK_DOMAIN, height)

    logger.debug(
        "Scale built",
        extra={
            "dimension": dimension.name,
            "kind": scale.kind.value,
            "domain": list(scale.domain),
            "clamp": scale.clamp,
        },
    )
    return scale


def build_scales(
    registry: DimensionRegistry,
    records: Sequence[TrackRecord],
    height: float = DEFAULT_AXIS_HEIGHT,
) -> Dict[str, Scale]:
    return {dim.name: build_scale(dim, records, height) for dim in registry}


def position_of(scale: Scale, value: Optional[float]) -> float:
    """Forward-map a value, returning NaN instead of raising."""
    try:
        return scale.forward(value if value is not None else math.nan)
    except (TypeError, ValueError):
        return math.nan
