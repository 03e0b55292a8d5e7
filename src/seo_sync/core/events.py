"""Minimal synchronous signal used for session lifecycle hooks."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Signal(Generic[T]):
    """Ordered list of listeners called synchronously on `emit`."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: list[Callable[[T], None]] = []

    def connect(self, listener: Callable[[T], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def _disconnect() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _disconnect

    def emit(self, payload: T) -> None:
        for listener in list(self._listeners):
            listener(payload)

    def __len__(self) -> int:
        return len(self._listeners)
