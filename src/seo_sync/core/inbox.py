"""Single ordered inbox for asynchronous engine results."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from seo_sync.types import ScoreReport


class ResultInbox:
    """Hands reports to `handler` strictly in arrival order.

    Posting from inside the handler queues the report behind the current one
    instead of recursing.
    """

    def __init__(self, handler: Callable[[ScoreReport], None]) -> None:
        self._handler = handler
        self._queue: deque[ScoreReport] = deque()
        self._draining = False

    def post(self, report: ScoreReport) -> None:
        self._queue.append(report)
        if self._draining:
            return
        self._draining = True
        try:
            while self._queue:
                self._handler(self._queue.popleft())
        finally:
            self._draining = False

    def __len__(self) -> int:
        return len(self._queue)
