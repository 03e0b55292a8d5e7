"""Rich-text editor adapter contracts and an in-memory editor."""

from __future__ import annotations

from typing import Any, Protocol

from seo_sync.types import Mark


class EditorHandle(Protocol):
    """One live editor instance."""

    def get_content(self) -> str:
        """Return the editor's current body text."""

    def clear_marks(self) -> None:
        """Remove every decoration this layer painted."""

    def add_mark(self, mark: Mark) -> None:
        """Paint one decoration over `mark`'s range."""


class EditorAdapter(Protocol):
    def is_available(self, editor_id: str) -> bool:
        """Whether the editor with `editor_id` is loaded and usable."""

    def get(self, editor_id: str) -> EditorHandle:
        """Return the live handle for `editor_id`."""


class InMemoryEditorHandle:
    def __init__(self, content: str = "") -> None:
        self.content = content
        self.marks: list[Mark] = []

    def get_content(self) -> str:
        return self.content

    def clear_marks(self) -> None:
        self.marks.clear()

    def add_mark(self, mark: Mark) -> None:
        if not 0 <= mark.start <= mark.end <= len(self.content):
            raise ValueError(f"Mark {mark.start}-{mark.end} outside content")
        self.marks.append(mark)


class InMemoryEditorAdapter:
    """Holds editor handles by id; an id without a handle is unavailable."""

    def __init__(self, handles: dict[str, Any] | None = None) -> None:
        self._handles: dict[str, EditorHandle] = dict(handles or {})

    def attach(self, editor_id: str, handle: EditorHandle) -> None:
        self._handles[editor_id] = handle

    def detach(self, editor_id: str) -> None:
        self._handles.pop(editor_id, None)

    def is_available(self, editor_id: str) -> bool:
        return editor_id in self._handles

    def get(self, editor_id: str) -> EditorHandle:
        handle = self._handles.get(editor_id)
        if handle is None:
            raise KeyError(f"Editor not loaded: {editor_id}")
        return handle
