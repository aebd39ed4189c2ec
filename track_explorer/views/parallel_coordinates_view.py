from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objs as go

from track_explorer.core.scales import Scale, position_of
from track_explorer.core.session import ExplorerSession
from track_explorer.views.base_view import BaseView

logger = logging.getLogger(__name__)

POPULARITY_COLORSCALE = [
    [0.0, "#2EFA74"],
    [0.5, "#70B5FF"],
    [1.0, "#F230AA"],
]
POPULARITY_RANGE = (70, 100)
BACKGROUND = "#121212"
ACTIVE_MARK = "● "


# -----------------------------------------------------------------------------
# Pixel space <-> plotted values
# -----------------------------------------------------------------------------
# Axis positions are pixels from the top (0) to the bottom (height); Parcoords
# draws larger values higher, so plotted value = height - pixel.
def pixel_to_plot(position: float, height: float) -> float:
    return height - position


def constraint_to_selection(constraint: Sequence[float], height: float) -> Tuple[float, float]:
    """Convert a Parcoords constraint range into a pixel selection."""
    return pixel_to_plot(constraint[1], height), pixel_to_plot(constraint[0], height)


def selection_to_constraint(selection: Sequence[float], height: float) -> List[float]:
    lo, hi = sorted(pixel_to_plot(p, height) for p in selection)
    return [lo, hi]


class ParallelCoordinatesView(BaseView):
    """
    Parallel-coordinates chart of the tracks the session leaves visible.

    - one axis per registered dimension, in registry order
    - values are drawn in pixel space so brush ranges come back as pixels
    - active brushes are restored as constraint ranges
    - lines are coloured by popularity
    """

    def compute_data(self, session: ExplorerSession) -> pd.DataFrame:
        ds = self.dataset
        height = ds.axis_height
        names = ds.registry.names

        rows: List[Dict[str, Any]] = []
        undrawable = 0

        # Only tracks the engine leaves visible are drawn
        visible = session.outcome.visible
        for idx, rec in enumerate(ds.records):
            if not visible[idx]:
                continue

            positions = [position_of(ds.scales[name], rec.value(name)) for name in names]
            # Records we cannot place on every axis are left out of the drawing
            if any(math.isnan(p) for p in positions):
                undrawable += 1
                continue

            row: Dict[str, Any] = {
                "record_index": idx,
                "track_name": rec.track_name,
                "popularity": rec.popularity,
            }
            for name, pos in zip(names, positions):
                row[name] = pixel_to_plot(pos, height)
            rows.append(row)

        if undrawable:
            logger.warning(
                "Tracks left out of the chart: value cannot be placed on an axis",
                extra={"n_undrawable": undrawable},
            )

        data = pd.DataFrame(rows, columns=["record_index", "track_name", "popularity"] + names)
        data.attrs["n_undrawable"] = undrawable
        return data

    def _dimension_entry(
        self,
        name: str,
        scale: Scale,
        values: np.ndarray,
        selection: Optional[Tuple[float, float]],
    ) -> Dict[str, Any]:
        height = self.dataset.axis_height
        dim = self.dataset.registry.get(name)
        ticks = scale.ticks()

        axis: Dict[str, Any] = {
            "label": (ACTIVE_MARK + dim.label) if selection is not None else dim.label,
            "values": values,
            "range": [0.0, height],
            "tickvals": [pixel_to_plot(pos, height) for pos, _ in ticks],
            "ticktext": [text for _, text in ticks],
            "multiselect": False,
        }
        if selection is not None:
            axis["constraintrange"] = selection_to_constraint(selection, height)
        return axis

    def render_figure(self, data: pd.DataFrame, session: ExplorerSession) -> go.Figure:
        if data.empty:
            return self.empty_figure("No tracks match the current filters")

        ds = self.dataset
        dimensions = [
            self._dimension_entry(
                name,
                ds.scales[name],
                data[name].to_numpy(),
                session.brushes.selection(name),
            )
            for name in ds.registry.names
        ]

        fig = go.Figure(
            go.Parcoords(
                line=dict(
                    color=data["popularity"].to_numpy(),
                    colorscale=POPULARITY_COLORSCALE,
                    cmin=POPULARITY_RANGE[0],
                    cmax=POPULARITY_RANGE[1],
                    showscale=True,
                    colorbar=dict(title="Popularity"),
                ),
                dimensions=dimensions,
                labelangle=-30,
                labelfont=dict(color="#FFFFFF", size=12),
                tickfont=dict(color="#E0E0E0", size=10),
                rangefont=dict(color=BACKGROUND),
            )
        )
        fig.update_layout(
            paper_bgcolor=BACKGROUND,
            plot_bgcolor=BACKGROUND,
            font=dict(color="#E0E0E0"),
            margin=dict(l=60, r=120, t=80, b=40),
            uirevision=ds.name,
        )
        return fig
