"""Host page form access."""

from __future__ import annotations

from typing import Protocol


class FormFields(Protocol):
    """Read/write access to the host page's named form fields."""

    def get(self, field_id: str) -> str:
        """Return the field's current value, or an empty string if absent."""

    def set(self, field_id: str, value: str) -> None:
        """Overwrite the field's value."""


class InMemoryForm:
    """Dict-backed form, used headless and in tests."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})
        self.writes: list[tuple[str, str]] = []

    def get(self, field_id: str) -> str:
        return self._values.get(field_id, "")

    def set(self, field_id: str, value: str) -> None:
        self._values[field_id] = value
        self.writes.append((field_id, value))

    def snapshot(self) -> dict[str, str]:
        return dict(self._values)
