from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from dash import html

from track_explorer.core.brush_state import BrushStore
from track_explorer.core.dimensions import DimensionRegistry
from track_explorer.core.filter_state import ScalarFilters
from track_explorer.core.session import ExplorerSession
from track_explorer.views.parallel_coordinates_view import constraint_to_selection
from track_explorer.views.track_details import TrackTooltip

if TYPE_CHECKING:
    from track_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)

_CONSTRAINT_KEY = re.compile(r"^dimensions\[(\d+)\]\.constraintrange$")


def session_from_stores(
    ctx: AppConfig,
    filter_data: Optional[Dict[str, Any]],
    brush_data: Optional[Dict[str, Any]],
) -> ExplorerSession:
    """Rebuild the per-browser session from the dcc.Store payloads."""
    defaults = ctx.global_config.defaults
    return ExplorerSession(
        ctx.dataset,
        filters=ScalarFilters.from_dict(filter_data, defaults=defaults),
        brushes=BrushStore.from_dict(brush_data),
        defaults=defaults,
    )


def _unwrap(value: Any) -> Any:
    # restyleData wraps each value in a per-trace list
    while isinstance(value, list) and len(value) == 1 and (value[0] is None or isinstance(value[0], list)):
        value = value[0]
    return value


def _as_range(value: Any) -> Optional[Tuple[float, float]]:
    value = _unwrap(value)
    if value is None or value == []:
        return None
    if isinstance(value[0], list):
        # multiselect ranges; the chart allows one range per axis
        value = value[0]
    return float(value[0]), float(value[1])


def parse_constraint_restyle(
    restyle_data: Optional[List[Any]],
    registry: DimensionRegistry,
    height: float,
) -> Dict[str, Optional[Tuple[float, float]]]:
    """
    Extract brush changes from a Parcoords ``restyleData`` event.

    :return: dimension name -> pixel selection, or None for a cleared brush.
        Keys unrelated to constraint ranges are ignored.
    """
    if not restyle_data:
        return {}

    changes = restyle_data[0] or {}
    names = registry.names
    out: Dict[str, Optional[Tuple[float, float]]] = {}

    for key, value in changes.items():
        match = _CONSTRAINT_KEY.match(key)
        if match is None:
            continue
        idx = int(match.group(1))
        if idx >= len(names):
            logger.warning("Constraint range for unknown axis index", extra={"axis_index": idx})
            continue

        constraint = _as_range(value)
        out[names[idx]] = None if constraint is None else constraint_to_selection(constraint, height)

    return out


def tooltip_children(tooltip: TrackTooltip) -> List[Any]:
    return [
        html.Div(tooltip.title, className="song-title"),
        html.Div(f"Artist: {tooltip.artist}"),
        html.Div(f"Genre: {tooltip.genre}"),
        html.Div(f"Popularity: {tooltip.popularity}"),
        html.Div("Audio Features", className="section-title"),
        html.Div(
            [
                html.Div(
                    [html.Span(f"{label}:", className="feature-label"), f" {value}"],
                    className="feature-item",
                )
                for label, value in tooltip.features
            ],
            className="feature-grid",
        ),
    ]


def active_axes_text(actives: Tuple[str, ...], registry: DimensionRegistry) -> str:
    if not actives:
        return "Drag along an axis to filter; click an active range to clear it."
    labels = [registry.get(name).label for name in actives]
    return "Filtering on: " + ", ".join(labels)
