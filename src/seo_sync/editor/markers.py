"""Paints engine mark ranges onto the live editor."""

from __future__ import annotations

from collections.abc import Callable

from seo_sync.editor.adapter import EditorAdapter, EditorHandle
from seo_sync.obs.log import get_logger
from seo_sync.types import DocumentSnapshot, MarkSet

logger = get_logger(__name__)

MarkerCallback = Callable[[DocumentSnapshot, MarkSet], None]


class MarkDecorator:
    """Binding between one editor handle and the marks painted on it."""

    def __init__(self, handle: EditorHandle) -> None:
        self._handle = handle
        self.applied: MarkSet = ()

    def __call__(self, snapshot: DocumentSnapshot, marks: MarkSet) -> None:
        # Each call fully replaces what was painted before.
        self._handle.clear_marks()
        self.applied = ()
        try:
            for mark in marks:
                self._handle.add_mark(mark)
        except Exception:
            self._handle.clear_marks()
            raise
        self.applied = tuple(marks)
        logger.debug("Painted %d marks for snapshot %d", len(marks), snapshot.snapshot_id)


class MarkerPipeline:
    def __init__(
        self,
        *,
        editor: EditorAdapter,
        editor_id: str,
        show_markers: bool,
        editor_present: bool = True,
    ) -> None:
        self._editor = editor
        self._editor_id = editor_id
        self._show_markers = show_markers
        self._editor_present = editor_present
        self._decorator: MarkDecorator | None = None

    @property
    def enabled(self) -> bool:
        return self._editor_present and self._show_markers

    @property
    def decorator(self) -> MarkDecorator | None:
        return self._decorator

    def marker(self) -> MarkerCallback | None:
        """The callback handed to the scoring engine, if marking is possible at all.

        Only the editor integration is checked here; the editor instance itself
        is usually not loaded yet at startup.
        """

        if not self.enabled:
            return None
        return self.apply_marks

    def apply_marks(self, snapshot: DocumentSnapshot, marks: MarkSet) -> None:
        if not self.enabled:
            return
        try:
            if not self._editor.is_available(self._editor_id):
                return
            if self._decorator is None:
                self._decorator = MarkDecorator(self._editor.get(self._editor_id))
            self._decorator(snapshot, marks)
        except Exception:
            logger.warning(
                "Editor %s rejected marks for snapshot %d; skipping",
                self._editor_id,
                snapshot.snapshot_id,
                exc_info=True,
            )
