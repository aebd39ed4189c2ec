from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import plotly.graph_objs as go

from track_explorer.core.dataset import TrackDataset
from track_explorer.core.session import ExplorerSession


class BaseView(ABC):
    """
    Abstract base class for chart views.

    Defines the contract that every view in the app must follow
    - implement 'compute_data' - the data to draw for the current ExplorerSession
    - implement 'render_figure' - the Plotly figure for that data
    """

    def __init__(self, dataset: TrackDataset):
        self.dataset = dataset

    @abstractmethod
    def compute_data(self, session: ExplorerSession) -> Any:
        """
        Compute the data given the current session
        :param session: the {@link ExplorerSession} holding the user's filters and brushes
        :return: data: a dataframe with what the view draws
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, session: ExplorerSession) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param session: the {@link ExplorerSession} holding the user's filters and brushes
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
