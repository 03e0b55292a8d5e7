"""Explicit context object shared by every component of one editing session."""

from __future__ import annotations

from dataclasses import dataclass, field

from seo_sync.config import AnalysisConfig
from seo_sync.core.engine import EngineFactory
from seo_sync.editor.adapter import EditorAdapter
from seo_sync.obs.tracing import CycleTraceStore
from seo_sync.preview.reconciler import InMemoryPreviewWidget, PreviewWidget
from seo_sync.ui.form import FormFields
from seo_sync.ui.widgets import WidgetSet


@dataclass(slots=True)
class EditingSession:
    """Collaborators for one post being edited.

    `editor_present` says whether the rich-text editor integration exists on
    the page at all; the editor instance itself may load later.
    """

    config: AnalysisConfig
    form: FormFields
    editor: EditorAdapter
    engine_factory: EngineFactory
    widgets: WidgetSet = field(default_factory=WidgetSet)
    preview_widget: PreviewWidget = field(default_factory=InMemoryPreviewWidget)
    editor_present: bool = True
    traces: CycleTraceStore = field(default_factory=CycleTraceStore)
