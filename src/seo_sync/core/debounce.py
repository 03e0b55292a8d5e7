"""Collapses bursts of field changes into one scheduled call."""

from __future__ import annotations

import asyncio
from collections.abc import Callable


class Debouncer:
    """Runs `callback` once after `delay` seconds without a new trigger.

    Scheduling uses the running asyncio loop unless one is given. Each
    trigger cancels the pending call and schedules a fresh one. With no
    loop at all the callback runs immediately.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[[], None],
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.delay = delay
        self._callback = callback
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self) -> None:
        loop = self._loop or _running_loop()
        if loop is None:
            # Nothing can fire later without a loop, so run now.
            self.cancel()
            self._callback()
            return
        self.cancel()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> bool:
        """Run a pending call now. Returns whether one was pending."""
        if self._handle is None:
            return False
        self.cancel()
        self._callback()
        return True

    def _fire(self) -> None:
        self._handle = None
        self._callback()


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None
