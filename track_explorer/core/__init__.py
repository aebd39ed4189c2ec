"""
Core domain layer: track records, dimension registry, scales, brush state,
and the filter engine that decides which tracks are visible
"""

from .brush_state import BrushStore
from .dataset import TrackDataset
from .dimensions import Dimension, DimensionRegistry, ScaleType
from .evaluator import is_visible
from .filter_state import ScalarFilters
from .orchestrator import FilterResult, recompute
from .records import TrackRecord
from .session import ExplorerOutcome, ExplorerSession

__all__ = [
    "BrushStore",
    "TrackDataset",
    "Dimension",
    "DimensionRegistry",
    "ScaleType",
    "is_visible",
    "ScalarFilters",
    "FilterResult",
    "recompute",
    "TrackRecord",
    "ExplorerOutcome",
    "ExplorerSession",
]
