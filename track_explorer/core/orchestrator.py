from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple

from track_explorer.core.brush_state import BrushStore
from track_explorer.core.dimensions import DimensionRegistry
from track_explorer.core.evaluator import Extent, is_visible
from track_explorer.core.filter_state import ScalarFilters
from track_explorer.core.records import TrackRecord
from track_explorer.core.scales import Scale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterResult:
    """
    Brush state translated for the evaluator.

    - extents: dimension name -> (low, high); raw values for linear/log axes,
      axis positions for ordinal axes
    - actives: brushed dimension names, in axis order
    """
    extents: Dict[str, Extent] = field(default_factory=dict)
    actives: Tuple[str, ...] = ()


def selection_to_extent(selection: Tuple[float, float], scale: Scale) -> Extent:
    """Convert a pixel selection into an ordered extent."""
    if scale.invertible:
        lo, hi = scale.invert(selection[0]), scale.invert(selection[1])
    else:
        lo, hi = selection
    if lo > hi:
        lo, hi = hi, lo
    return lo, hi


def recompute(
    brushes: BrushStore,
    filters: ScalarFilters,
    registry: DimensionRegistry,
    scales: Mapping[str, Scale],
) -> FilterResult:
    """
    Rebuild actives and extents from scratch.

    `filters` is not consulted here; scalar changes trigger a recompute so the
    visible set is re-evaluated against fresh extents.
    """
    extents: Dict[str, Extent] = {}
    actives: List[str] = []

    for name in brushes.actives():
        if name not in registry:
            logger.warning("Ignoring brush on unknown dimension", extra={"dimension": name})

    for dim in registry:
        selection = brushes.selection(dim.name)
        if selection is None:
            continue
        actives.append(dim.name)
        extents[dim.name] = selection_to_extent(selection, scales[dim.name])

    return FilterResult(extents=extents, actives=tuple(actives))


def visible_mask(
    records: Sequence[TrackRecord],
    result: FilterResult,
    filters: ScalarFilters,
    registry: DimensionRegistry,
    scales: Mapping[str, Scale],
) -> Tuple[bool, ...]:
    return tuple(
        is_visible(rec, result.extents, result.actives, filters, registry, scales)
        for rec in records
    )
