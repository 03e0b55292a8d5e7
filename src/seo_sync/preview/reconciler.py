"""Search-result preview state and its competing writers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from seo_sync.errors import PreviewIsolatedError
from seo_sync.obs.log import get_logger
from seo_sync.types import SnippetFields, UrlPathState

logger = get_logger(__name__)

SaveHook = Callable[[SnippetFields], None]


class PreviewWidget(Protocol):
    def render(self, fields: SnippetFields) -> None:
        """Redraw the preview with `fields`."""

    def set_editable(self, editable: bool) -> None:
        """Enable or disable in-place editing."""


@dataclass(slots=True)
class InMemoryPreviewWidget:
    rendered: SnippetFields | None = None
    editable: bool = True
    render_count: int = 0
    history: list[SnippetFields] = field(default_factory=list)

    def render(self, fields: SnippetFields) -> None:
        self.rendered = fields
        self.render_count += 1
        self.history.append(fields)

    def set_editable(self, editable: bool) -> None:
        self.editable = editable


class PreviewHandle:
    """In-place editing surface of an initialized preview."""

    def __init__(self, reconciler: "PreviewReconciler") -> None:
        self._reconciler = reconciler

    def edit_title(self, value: str) -> None:
        self._reconciler._user_edit(title=value)

    def edit_url_path(self, value: str) -> None:
        self._reconciler._user_edit(url_path=value)

    def edit_meta_description(self, value: str) -> None:
        self._reconciler._user_edit(meta_desc=value)


class PreviewReconciler:
    """Merges the initial fields, user edits and server slugs into one preview.

    Once the user has edited the url path, server-generated slugs are ignored
    for the rest of the session.
    """

    def __init__(self, widget: PreviewWidget) -> None:
        self._widget = widget
        self._title = ""
        self._meta_desc = ""
        self._url = UrlPathState(current_value="")
        self._save: SaveHook | None = None
        self._handle: PreviewHandle | None = None
        self.isolated = False

    @property
    def url_state(self) -> UrlPathState:
        return self._url

    @property
    def handle(self) -> PreviewHandle | None:
        return self._handle

    @property
    def fields(self) -> SnippetFields:
        return SnippetFields(
            title=self._title,
            url_path=self._url.current_value,
            meta_desc=self._meta_desc,
        )

    def initialize(self, fields: SnippetFields, on_save: SaveHook) -> PreviewHandle:
        self._title = fields.title
        self._meta_desc = fields.meta_desc
        self._url.current_value = fields.url_path
        self._save = on_save
        self._handle = PreviewHandle(self)
        self._widget.render(self.fields)
        return self._handle

    def on_user_edited_url(self) -> None:
        self._url.is_user_edited = True

    def on_server_slug_available(self, new_slug: str) -> bool:
        """Apply a server slug unless the user already owns the url path."""
        if self._url.is_user_edited:
            logger.debug("Ignoring server slug %r: url path edited by user", new_slug)
            return False
        if new_slug == self._url.current_value:
            return False
        self._url.current_value = new_slug
        self._widget.render(self.fields)
        return True

    def isolate(self) -> None:
        self.isolated = True
        self._widget.set_editable(False)

    def _user_edit(
        self,
        *,
        title: str | None = None,
        url_path: str | None = None,
        meta_desc: str | None = None,
    ) -> None:
        if self.isolated:
            raise PreviewIsolatedError("Snippet preview is isolated and cannot be edited")
        if title is not None:
            self._title = title
        if meta_desc is not None:
            self._meta_desc = meta_desc
        if url_path is not None:
            self.on_user_edited_url()
            self._url.current_value = url_path
        self._widget.render(self.fields)
        if self._save is not None:
            self._save(self.fields)
