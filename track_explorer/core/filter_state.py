from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

ALL_GENRES = "All Genres"
DEFAULT_MIN_POPULARITY = 72.0
DEFAULT_MIN_PLATFORMS = 5


@dataclass
class ScalarFilters:
    """
    Represents the scalar (non-brush) filters chosen by the user.

    Fields:

    - min_popularity: tracks below this popularity are hidden
    - min_platforms: tracks that are hits on fewer platforms are hidden
    - selected_genre: exact genre to keep, or ALL_GENRES for no genre constraint
    """

    min_popularity: float = DEFAULT_MIN_POPULARITY
    min_platforms: int = DEFAULT_MIN_PLATFORMS
    selected_genre: str = ALL_GENRES

    @property
    def genre_constrained(self) -> bool:
        return self.selected_genre != ALL_GENRES

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(
        cls,
        data: Optional[Dict[str, Any]],
        defaults: Optional[ScalarFilters] = None,
    ) -> ScalarFilters:
        base = defaults or cls()
        data = data or {}
        return cls(
            min_popularity=float(data.get("min_popularity", base.min_popularity)),
            min_platforms=int(data.get("min_platforms", base.min_platforms)),
            selected_genre=str(data.get("selected_genre") or base.selected_genre),
        )
