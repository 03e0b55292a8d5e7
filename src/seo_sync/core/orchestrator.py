"""Wires snapshot collection, scoring results, markers and the preview together."""

from __future__ import annotations

from time import perf_counter

from seo_sync.analysis.collector import DocumentSnapshotCollector
from seo_sync.analysis.propagator import ScorePropagator
from seo_sync.analysis.tabs import TabStateManager
from seo_sync.config import CONTENT_TARGET, KEYWORD_TARGET
from seo_sync.core.debounce import Debouncer
from seo_sync.core.engine import EngineArgs, EngineCallbacks, ScoringEngine
from seo_sync.core.events import Signal
from seo_sync.core.inbox import ResultInbox
from seo_sync.core.session import EditingSession
from seo_sync.editor.markers import MarkerPipeline
from seo_sync.errors import MissingTargetError
from seo_sync.obs.log import get_logger
from seo_sync.obs.tracing import APPLIED, DROPPED_STALE
from seo_sync.preview.permalink import CompletedRequest, PermalinkWatcher
from seo_sync.preview.reconciler import PreviewHandle, PreviewReconciler
from seo_sync.types import (
    AnalysisDimension,
    AnalysisMode,
    DocumentSnapshot,
    MarkSet,
    ScoreReport,
    SnippetFields,
)

logger = get_logger(__name__)

_TARGET_KEYS = {
    AnalysisDimension.KEYWORD: KEYWORD_TARGET,
    AnalysisDimension.CONTENT: CONTENT_TARGET,
}


class Orchestrator:
    """Top-level driver for one editing session.

    `start()` performs the one-time startup sequence and emits `ready` with
    the orchestrator as payload so plugins can attach. Afterwards the host
    feeds it field changes, completed requests and form submits; the engine
    feeds it `ScoreReport`s through the result inbox.

    Only the report for the most recently issued snapshot is applied; any
    report tagged with an older snapshot is dropped.
    """

    def __init__(self, session: EditingSession) -> None:
        self.session = session
        self.ready: Signal[Orchestrator] = Signal("ready")
        self._inbox = ResultInbox(self._handle_report)
        self._latest_snapshot: DocumentSnapshot | None = None
        self._started = False

        config = session.config
        self.mode = AnalysisMode.from_flags(
            keyword=config.keyword_analysis_active,
            content=config.content_analysis_active,
        )
        self.trigger_targets = config.field_ids.trigger_targets()

        self.tab_manager: TabStateManager | None = None
        self.collector: DocumentSnapshotCollector | None = None
        self.preview: PreviewReconciler | None = None
        self.preview_handle: PreviewHandle | None = None
        self.markers: MarkerPipeline | None = None
        self.propagator: ScorePropagator | None = None
        self.engine_args: EngineArgs | None = None
        self.engine: ScoringEngine | None = None
        self.permalinks: PermalinkWatcher | None = None
        self.debouncer: Debouncer | None = None

    @property
    def latest_snapshot_id(self) -> int | None:
        if self._latest_snapshot is None:
            return None
        return self._latest_snapshot.snapshot_id

    def start(self) -> "Orchestrator":
        if self._started:
            raise RuntimeError("Orchestrator already started")
        session = self.session
        config = session.config

        self.tab_manager = TabStateManager(
            keyword_enabled=config.keyword_analysis_active,
            content_enabled=config.content_analysis_active,
            strict=config.strict,
        )
        self.tab_manager.set_keyword_from_element(
            session.form.get(config.field_ids.focus_keyword_input)
        )
        self.collector = DocumentSnapshotCollector(
            form=session.form,
            editor=session.editor,
            fields=config.field_ids,
        )
        self.preview = PreviewReconciler(session.preview_widget)
        self.preview_handle = self.preview.initialize(
            self.collector.snippet_fields(),
            self._save_snippet_data,
        )
        self.markers = MarkerPipeline(
            editor=session.editor,
            editor_id=config.field_ids.editor,
            show_markers=config.show_markers,
            editor_present=session.editor_present,
        )
        self.propagator = ScorePropagator(
            session.widgets,
            primary_dimension=self.mode.dimensions[0] if self.mode.dimensions else None,
            strings=config.indicator_strings,
        )

        self.engine_args = self._build_engine_args()
        self.engine = session.engine_factory(self.engine_args)

        for dimension in self.mode.dimensions:
            self._initialize_dimension(dimension)

        if self.mode.includes(AnalysisDimension.KEYWORD):
            self.tab_manager.activate_keyword_tab()
        else:
            self.tab_manager.hide_add_keyword()
        if self.mode is AnalysisMode.CONTENT_ONLY:
            self.tab_manager.activate_content_tab()

        self.permalinks = PermalinkWatcher(
            title=lambda: session.form.get(config.field_ids.title),
            on_slug=self._on_server_slug,
            post_id=config.post_id,
        )
        self.debouncer = Debouncer(config.debounce.delay_seconds, self.refresh)
        self._started = True

        self.ready.emit(self)

        if self.mode is AnalysisMode.NEITHER:
            self.preview.isolate()
        return self

    def on_field_changed(self, field_id: str) -> bool:
        """Schedule a debounced re-analysis if `field_id` is tracked."""
        self._require_started()
        if field_id == self.session.config.field_ids.focus_keyword_input:
            self.tab_manager.set_keyword_from_element(self.session.form.get(field_id))
        if field_id not in self.trigger_targets:
            return False
        if self.mode is AnalysisMode.NEITHER:
            return False
        self.debouncer.trigger()
        return True

    def refresh(self) -> None:
        """Ask the engine to score the current document now."""
        self._require_started()
        if self.mode is AnalysisMode.NEITHER:
            return
        self.engine.refresh()

    def on_request_completed(self, request: CompletedRequest) -> str | None:
        self._require_started()
        return self.permalinks.on_request_completed(request)

    def on_submit(self) -> bool:
        """Copy the visible focus keyword into the hidden field before submit."""
        self._require_started()
        config = self.session.config
        if not config.keyword_analysis_active or config.multi_keyword:
            return False
        field_id = config.field_ids.focus_keyword_input
        self.tab_manager.set_keyword_from_element(self.session.form.get(field_id))
        return self.collector.sync_focus_keyword(self.tab_manager.keyword_from_element)

    def post_report(self, report: ScoreReport) -> None:
        self._inbox.post(report)

    def close(self) -> None:
        if self.debouncer is not None:
            self.debouncer.cancel()

    def _build_engine_args(self) -> EngineArgs:
        config = self.session.config
        targets: dict[str, str] = {}
        for dimension in self.mode.dimensions:
            key = _TARGET_KEYS[dimension]
            target = config.targets.get(key, "")
            if not target:
                message = f"No output target configured for {dimension.value} analysis"
                if config.strict:
                    raise MissingTargetError(message)
                logger.error(message)
                continue
            targets[key] = target

        callbacks = EngineCallbacks(get_data=self._get_data)
        if self.mode.includes(AnalysisDimension.KEYWORD):
            callbacks.save_scores = self.post_report
        if self.mode.includes(AnalysisDimension.CONTENT):
            callbacks.save_content_score = self.post_report

        return EngineArgs(
            element_targets=list(self.trigger_targets),
            targets=targets,
            callbacks=callbacks,
            locale=config.locale,
            snippet_preview=self.preview,
            content_analysis_active=config.content_analysis_active,
            keyword_analysis_active=config.keyword_analysis_active,
            marker=self._on_demand_marker if self.markers.marker() else None,
            translations=config.usable_translations(),
        )

    def _initialize_dimension(self, dimension: AnalysisDimension) -> None:
        config = self.session.config
        if dimension is AnalysisDimension.KEYWORD:
            saved = config.saved_keyword_score
        else:
            saved = config.saved_content_score
        self.propagator.publish(dimension, saved)

    def _get_data(self) -> DocumentSnapshot:
        snapshot = self.collector.collect()
        self._latest_snapshot = snapshot
        return snapshot

    def _handle_report(self, report: ScoreReport) -> None:
        latest = self.latest_snapshot_id
        if not self.mode.includes(report.dimension):
            logger.error("Dropping %s report: dimension is disabled", report.dimension.value)
            return
        if latest is None or report.snapshot_id != latest:
            logger.debug(
                "Dropping stale %s report for snapshot %d (latest %s)",
                report.dimension.value,
                report.snapshot_id,
                latest,
            )
            self.session.traces.record(
                dimension=report.dimension,
                snapshot_id=report.snapshot_id,
                latest_snapshot_id=latest or 0,
                outcome=DROPPED_STALE,
            )
            return

        start = perf_counter()
        self.collector.persist_score(report.dimension, report.raw_score)
        indicator = self.propagator.publish(report.dimension, report.raw_score)
        # A report without marks leaves the other dimension's highlights alone.
        if report.marks:
            self.markers.apply_marks(self._latest_snapshot, report.marks)
        latency_ms = (perf_counter() - start) * 1000.0

        self.session.traces.record(
            dimension=report.dimension,
            snapshot_id=report.snapshot_id,
            latest_snapshot_id=latest,
            outcome=APPLIED,
            display_class=indicator.display_class,
            latency_ms=latency_ms,
        )

    def _on_demand_marker(self, snapshot: DocumentSnapshot, marks: MarkSet) -> None:
        if snapshot.snapshot_id != self.latest_snapshot_id:
            logger.debug("Ignoring marks for stale snapshot %d", snapshot.snapshot_id)
            return
        self.markers.apply_marks(snapshot, marks)

    def _save_snippet_data(self, data: SnippetFields) -> None:
        if self.preview.url_state.is_user_edited:
            # A hand-edited url always belongs in the post name.
            self.collector.leave_post_name_untouched = False
        self.collector.save_snippet_data(data)

    def _on_server_slug(self, slug: str) -> None:
        if self.preview.on_server_slug_available(slug):
            # The host does not store auto-generated slugs as the post name.
            self.collector.leave_post_name_untouched = True

    def _require_started(self) -> None:
        if not self._started:
            raise RuntimeError("Orchestrator.start() has not been called")
