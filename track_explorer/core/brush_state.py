from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

Selection = Tuple[float, float]


def _as_selection(raw: Optional[Sequence[float]]) -> Optional[Selection]:
    """Return a (start, end) pair, or None for an empty/zero-width brush."""
    if raw is None:
        return None
    if len(raw) != 2:
        raise ValueError(f"A brush selection needs exactly two positions, got {list(raw)!r}")
    start, end = float(raw[0]), float(raw[1])
    if start == end:
        return None
    return start, end


class BrushStore:
    """
    Active per-axis brush selections, keyed by dimension name.

    Selections are stored as captured by the UI, in axis pixel space and in
    drag order (start may be greater than end). A dimension is present iff
    its brush is non-empty.
    """

    def __init__(self, selections: Optional[Mapping[str, Sequence[float]]] = None):
        self._selections: Dict[str, Selection] = {}
        for name, raw in (selections or {}).items():
            self.set(name, raw)

    def set(self, name: str, selection: Optional[Sequence[float]]) -> None:
        """Set or update a brush; None or a zero-width range clears it."""
        sel = _as_selection(selection)
        if sel is None:
            self._selections.pop(name, None)
        else:
            self._selections[name] = sel

    def clear(self, name: str) -> None:
        self._selections.pop(name, None)

    def clear_all(self) -> None:
        self._selections.clear()

    def selection(self, name: str) -> Optional[Selection]:
        return self._selections.get(name)

    def actives(self) -> List[str]:
        return list(self._selections)

    def items(self) -> Iterator[Tuple[str, Selection]]:
        return iter(list(self._selections.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._selections

    def __len__(self) -> int:
        return len(self._selections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BrushStore):
            return NotImplemented
        return self._selections == other._selections

    def copy(self) -> "BrushStore":
        return BrushStore(self._selections)

    def to_dict(self) -> Dict[str, List[float]]:
        return {name: list(sel) for name, sel in self._selections.items()}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "BrushStore":
        return cls({str(k): v for k, v in (data or {}).items()})
