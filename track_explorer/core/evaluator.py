from __future__ import annotations

from typing import Mapping, Sequence, Tuple

from track_explorer.core.dimensions import DimensionRegistry, ScaleType
from track_explorer.core.filter_state import ScalarFilters
from track_explorer.core.records import TrackRecord
from track_explorer.core.scales import LogScale, Scale

Extent = Tuple[float, float]


def passes_scalar_filters(record: TrackRecord, filters: ScalarFilters) -> bool:
    """Popularity, genre and platform checks, cheapest first."""
    if not record.popularity >= filters.min_popularity:
        return False
    if filters.genre_constrained and record.track_genre != filters.selected_genre:
        return False
    if record.platform_hit_count < filters.min_platforms:
        return False
    return True


def within_extent(
    record: TrackRecord,
    name: str,
    extent: Extent,
    registry: DimensionRegistry,
    scales: Mapping[str, Scale],
) -> bool:
    """
    Check one active dimension.

    Ordinal axes compare the mapped position against a position-space extent;
    log axes move non-positive or NaN values onto the scale floor first.
    """
    dim = registry.get(name)
    scale = scales[name]
    value = record.value(name)

    if dim.type is ScaleType.ORDINAL:
        value = scale.forward(value)
    elif isinstance(scale, LogScale):
        value = scale.substitute(value)

    return extent[0] <= value <= extent[1]


def is_visible(
    record: TrackRecord,
    extents: Mapping[str, Extent],
    actives: Sequence[str],
    filters: ScalarFilters,
    registry: DimensionRegistry,
    scales: Mapping[str, Scale],
) -> bool:
    """
    Decide whether a record is drawn under the current filters and brushes.

    Pure: nothing passed in is mutated.
    """
    if not passes_scalar_filters(record, filters):
        return False
    return all(
        within_extent(record, name, extents[name], registry, scales) for name in actives
    )
