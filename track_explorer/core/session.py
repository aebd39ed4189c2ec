from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from track_explorer.core.brush_state import BrushStore
from track_explorer.core.dataset import TrackDataset
from track_explorer.core.evaluator import Extent
from track_explorer.core.filter_state import ALL_GENRES, ScalarFilters
from track_explorer.core.orchestrator import recompute, visible_mask
from track_explorer.core.records import TrackRecord

logger = logging.getLogger(__name__)

RECOMPUTE_TRIGGERS: Tuple[str, ...] = (
    "brush",
    "clear_brush",
    "clear_all_brushes",
    "popularity",
    "platforms",
    "genre",
    "reset",
)


@dataclass(frozen=True)
class ExplorerOutcome:
    """
    Result of one full recompute.

    - extents / actives: as produced by the orchestrator
    - visible: one flag per dataset record, same order
    - visible_count: number of visible records
    """
    extents: Dict[str, Extent] = field(default_factory=dict)
    actives: Tuple[str, ...] = ()
    visible: Tuple[bool, ...] = ()
    visible_count: int = 0


class ExplorerSession:
    """
    Filter state for one user, over a shared read-only TrackDataset.

    Every mutation recomputes extents, actives and visibility from scratch
    before returning.
    """

    def __init__(
        self,
        dataset: TrackDataset,
        filters: Optional[ScalarFilters] = None,
        brushes: Optional[BrushStore] = None,
        defaults: Optional[ScalarFilters] = None,
    ) -> None:
        self.dataset = dataset
        self.defaults = defaults or ScalarFilters()
        base = filters if filters is not None else self.defaults
        self.filters = ScalarFilters(**base.to_dict())
        self.brushes = brushes if brushes is not None else BrushStore()
        self.last_trigger: Optional[str] = None
        self._outcome = self.recompute()

    # ------------------------------------------------------------------
    # Recompute
    # ------------------------------------------------------------------
    def recompute(self, trigger: Optional[str] = None) -> ExplorerOutcome:
        ds = self.dataset
        result = recompute(self.brushes, self.filters, ds.registry, ds.scales)
        mask = visible_mask(ds.records, result, self.filters, ds.registry, ds.scales)

        self.last_trigger = trigger
        self._outcome = ExplorerOutcome(
            extents=dict(result.extents),
            actives=result.actives,
            visible=mask,
            visible_count=sum(mask),
        )

        logger.debug(
            "Filters recomputed",
            extra={
                "trigger": trigger,
                "actives": list(result.actives),
                "visible_count": self._outcome.visible_count,
            },
        )
        return self._outcome

    @property
    def outcome(self) -> ExplorerOutcome:
        return self._outcome

    @property
    def visible_count(self) -> int:
        return self._outcome.visible_count

    @property
    def actives(self) -> Tuple[str, ...]:
        return self._outcome.actives

    def visible_records(self) -> List[TrackRecord]:
        return [rec for rec, keep in zip(self.dataset.records, self._outcome.visible) if keep]

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------
    def set_popularity_threshold(self, value: float) -> ExplorerOutcome:
        self.filters.min_popularity = float(value)
        return self.recompute("popularity")

    def set_min_platforms(self, value: int) -> bool:
        """
        Set the minimum platform-hit count.

        If no track qualifies, the threshold falls back to the default and
        False is returned so the caller can warn the user.
        """
        value = int(value)
        accepted = self.dataset.count_with_platforms(value) > 0
        if not accepted:
            logger.warning(
                "No tracks found with enough platforms; resetting threshold",
                extra={"requested": value, "fallback": self.defaults.min_platforms},
            )
            value = self.defaults.min_platforms
        self.filters.min_platforms = value
        self.recompute("platforms")
        return accepted

    def set_genre(self, name: Optional[str]) -> ExplorerOutcome:
        self.filters.selected_genre = name or ALL_GENRES
        return self.recompute("genre")

    def set_brush(self, name: str, selection: Optional[Sequence[float]]) -> ExplorerOutcome:
        """
        :raises KeyError: if the dimension is not registered
        """
        self.dataset.registry.get(name)
        self.brushes.set(name, selection)
        return self.recompute("brush")

    def clear_brush(self, name: str) -> ExplorerOutcome:
        self.brushes.clear(name)
        return self.recompute("clear_brush")

    def clear_all_brushes(self) -> ExplorerOutcome:
        self.brushes.clear_all()
        return self.recompute("clear_all_brushes")

    def reset(self) -> ExplorerOutcome:
        """Restore the default filters (72 / 5 / all genres unless configured) and drop all brushes."""
        self.filters = ScalarFilters(**self.defaults.to_dict())
        self.brushes.clear_all()
        return self.recompute("reset")
