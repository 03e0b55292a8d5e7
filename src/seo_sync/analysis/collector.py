"""Collects document snapshots and writes results back to the host form."""

from __future__ import annotations

import itertools
from dataclasses import asdict

from seo_sync.config import FieldIds
from seo_sync.editor.adapter import EditorAdapter
from seo_sync.obs.log import get_logger
from seo_sync.types import AnalysisDimension, DocumentSnapshot, SnippetFields
from seo_sync.ui.form import FormFields

logger = get_logger(__name__)


class DocumentSnapshotCollector:
    """Reads tracked fields at call time; never caches a snapshot."""

    def __init__(
        self,
        *,
        form: FormFields,
        editor: EditorAdapter,
        fields: FieldIds | None = None,
    ) -> None:
        self._form = form
        self._editor = editor
        self._fields = fields or FieldIds()
        self._sequence = itertools.count(1)
        self.leave_post_name_untouched = False

    def collect(self) -> DocumentSnapshot:
        fields = self._fields
        return DocumentSnapshot(
            snapshot_id=next(self._sequence),
            title=self._form.get(fields.title),
            body_text=self._body_text(),
            excerpt=self._form.get(fields.excerpt),
            focus_term=self._form.get(fields.focus_keyword_input),
            url_path=self._url_path(),
            meta_description=self._form.get(fields.meta_description),
        )

    def snippet_fields(self) -> SnippetFields:
        """Seed values for the snippet preview."""
        return SnippetFields(
            title=self._form.get(self._fields.snippet_title),
            url_path=self._url_path(),
            meta_desc=self._form.get(self._fields.meta_description),
        )

    def persist_score(self, dimension: AnalysisDimension, raw_score: object) -> bool:
        """Write `raw_score` into the dimension's hidden field.

        Returns ``True`` only when the stored value changed.
        """

        field_id = self._score_field(dimension)
        value = "" if raw_score is None else str(raw_score)
        if self._form.get(field_id) == value:
            return False
        self._form.set(field_id, value)
        return True

    def save_snippet_data(self, data: SnippetFields) -> None:
        """Persistence hook for in-place edits of the snippet preview."""
        fields = self._fields
        self._write_if_changed(fields.snippet_title, data.title)
        self._write_if_changed(fields.meta_description, data.meta_desc)
        if not self.leave_post_name_untouched:
            self._write_if_changed(fields.post_name, data.url_path)
        self.leave_post_name_untouched = False
        logger.debug("Saved snippet data %s", asdict(data))

    def sync_focus_keyword(self, visible_keyword: str) -> bool:
        """Copy the visible focus keyword into the hidden submit field."""
        return self._write_if_changed(self._fields.focus_keyword_hidden, visible_keyword)

    def _body_text(self) -> str:
        editor_id = self._fields.editor
        if self._editor.is_available(editor_id):
            return self._editor.get(editor_id).get_content()
        return self._form.get(editor_id)

    def _url_path(self) -> str:
        fields = self._fields
        slug = self._form.get(fields.slug_full) or self._form.get(fields.post_name)
        return slug or self._form.get(fields.title)

    def _score_field(self, dimension: AnalysisDimension) -> str:
        if dimension is AnalysisDimension.KEYWORD:
            return self._fields.keyword_score
        return self._fields.content_score

    def _write_if_changed(self, field_id: str, value: str) -> bool:
        if self._form.get(field_id) == value:
            return False
        self._form.set(field_id, value)
        return True
