"""Indicator widgets written by the score propagator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from seo_sync.types import AnalysisDimension, ScoreIndicator


class StatusLight(Protocol):
    def update(self, indicator: ScoreIndicator) -> None:
        """Show the indicator on the compact status light."""


class StatusBar(Protocol):
    def update(self, dimension: AnalysisDimension, indicator: ScoreIndicator) -> None:
        """Show the indicator in the global status bar slot for `dimension`."""


class SavePanel(Protocol):
    def update_score(self, dimension: AnalysisDimension, display_class: str) -> None:
        """Set the save-panel badge for `dimension`."""


class InMemoryStatusLight:
    def __init__(self) -> None:
        self.current: ScoreIndicator | None = None
        self.history: list[ScoreIndicator] = []

    def update(self, indicator: ScoreIndicator) -> None:
        self.current = indicator
        self.history.append(indicator)


class InMemoryStatusBar:
    def __init__(self) -> None:
        self.slots: dict[AnalysisDimension, ScoreIndicator] = {}

    def update(self, dimension: AnalysisDimension, indicator: ScoreIndicator) -> None:
        self.slots[dimension] = indicator


class InMemorySavePanel:
    def __init__(self) -> None:
        self.badges: dict[AnalysisDimension, str] = {}

    def update_score(self, dimension: AnalysisDimension, display_class: str) -> None:
        self.badges[dimension] = display_class


@dataclass(slots=True)
class WidgetSet:
    """The widgets every published indicator fans out to."""

    status_light: StatusLight = field(default_factory=InMemoryStatusLight)
    status_bar: StatusBar = field(default_factory=InMemoryStatusBar)
    save_panel: SavePanel = field(default_factory=InMemorySavePanel)
