from __future__ import annotations

from typing import Any

import pytest

from seo_sync.config import AnalysisConfig, DebounceConfig
from seo_sync.core.engine import EngineArgs
from seo_sync.core.orchestrator import Orchestrator
from seo_sync.core.session import EditingSession
from seo_sync.editor.adapter import InMemoryEditorAdapter, InMemoryEditorHandle
from seo_sync.types import AnalysisDimension, DocumentSnapshot, MarkSet, ScoreReport
from seo_sync.ui.form import InMemoryForm


class RecordingEngine:
    """Stands in for the scoring engine; tests decide when results arrive."""

    def __init__(self, args: EngineArgs) -> None:
        self.args = args
        self.snapshots: list[DocumentSnapshot] = []

    def refresh(self) -> None:
        self.snapshots.append(self.args.callbacks.get_data())

    def report(
        self,
        dimension: AnalysisDimension,
        raw_score: Any,
        marks: MarkSet = (),
        snapshot: DocumentSnapshot | None = None,
    ) -> None:
        snap = snapshot or self.snapshots[-1]
        if dimension is AnalysisDimension.KEYWORD:
            callback = self.args.callbacks.save_scores
        else:
            callback = self.args.callbacks.save_content_score
        assert callback is not None
        callback(ScoreReport(dimension, snap.snapshot_id, raw_score, marks))


@pytest.fixture
def form() -> InMemoryForm:
    return InMemoryForm(
        {
            "title": "Hello",
            "content": "raw body",
            "excerpt": "short",
            "yoast_wpseo_focuskw_text_input": "hello",
            "yoast_wpseo_metadesc": "A greeting.",
        }
    )


@pytest.fixture
def build(form: InMemoryForm):
    def _build(
        *,
        editor_content: str | None = "Hello world body text",
        editor_present: bool = True,
        **config_values: Any,
    ) -> tuple[Orchestrator, EditingSession, list[RecordingEngine]]:
        editor = InMemoryEditorAdapter()
        if editor_content is not None:
            editor.attach("content", InMemoryEditorHandle(editor_content))
        config_values.setdefault("debounce", DebounceConfig(delay_seconds=0.01))
        engines: list[RecordingEngine] = []

        def _factory(args: EngineArgs) -> RecordingEngine:
            engine = RecordingEngine(args)
            engines.append(engine)
            return engine

        session = EditingSession(
            config=AnalysisConfig(**config_values),
            form=form,
            editor=editor,
            engine_factory=_factory,
            editor_present=editor_present,
        )
        return Orchestrator(session), session, engines

    return _build
