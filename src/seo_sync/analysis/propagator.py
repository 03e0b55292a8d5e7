"""Fans one computed indicator out to every subscribed widget."""

from __future__ import annotations

from collections.abc import Mapping

from seo_sync.analysis.indicator import indicator_for_score
from seo_sync.types import AnalysisDimension, ScoreIndicator
from seo_sync.ui.widgets import WidgetSet


class ScorePropagator:
    """Publishes indicators synchronously to the status light, bar and badge.

    The status light is a single widget, so only the session's primary
    dimension drives it.
    """

    def __init__(
        self,
        widgets: WidgetSet,
        *,
        primary_dimension: AnalysisDimension | None,
        strings: Mapping[str, str] | None = None,
    ) -> None:
        self._widgets = widgets
        self._primary = primary_dimension
        self._strings = strings

    def publish(self, dimension: AnalysisDimension, raw_score: object) -> ScoreIndicator:
        indicator = indicator_for_score(raw_score, self._strings)
        if dimension is self._primary:
            self._widgets.status_light.update(indicator)
        self._widgets.status_bar.update(dimension, indicator)
        self._widgets.save_panel.update_score(dimension, indicator.display_class)
        return indicator
