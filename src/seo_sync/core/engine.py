"""Contract between the orchestrator and the external scoring engine."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from seo_sync.editor.markers import MarkerCallback
from seo_sync.preview.reconciler import PreviewReconciler
from seo_sync.types import DocumentSnapshot, ScoreReport

ReportCallback = Callable[[ScoreReport], None]


@dataclass(slots=True)
class EngineCallbacks:
    get_data: Callable[[], DocumentSnapshot]
    save_scores: ReportCallback | None = None
    save_content_score: ReportCallback | None = None


@dataclass(slots=True)
class EngineArgs:
    """Everything the engine is constructed with.

    `get_data` must be called synchronously to obtain the snapshot to score.
    Results come back later through `save_scores` / `save_content_score`,
    which are only present for enabled dimensions. `marker` paints marks on
    demand and is ``None`` when marking is unavailable.
    """

    element_targets: list[str]
    targets: dict[str, str]
    callbacks: EngineCallbacks
    locale: str
    snippet_preview: PreviewReconciler
    content_analysis_active: bool
    keyword_analysis_active: bool
    marker: MarkerCallback | None = None
    translations: dict[str, Any] | None = field(default=None)


class ScoringEngine(Protocol):
    def refresh(self) -> None:
        """Pull a snapshot through `get_data` and start scoring it."""


EngineFactory = Callable[[EngineArgs], ScoringEngine]
