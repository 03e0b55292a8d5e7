import asyncio

from seo_sync.core.debounce import Debouncer
from seo_sync.core.events import Signal
from seo_sync.core.inbox import ResultInbox
from seo_sync.types import AnalysisDimension, ScoreReport


def test_burst_of_triggers_fires_once() -> None:
    calls: list[int] = []

    async def _scenario() -> None:
        debouncer = Debouncer(0.05, lambda: calls.append(1))
        for _ in range(5):
            debouncer.trigger()
            await asyncio.sleep(0.001)
        assert debouncer.pending
        await asyncio.sleep(0.3)
        assert not debouncer.pending

    asyncio.run(_scenario())
    assert calls == [1]


def test_cancel_and_flush() -> None:
    calls: list[int] = []

    async def _scenario() -> None:
        debouncer = Debouncer(10.0, lambda: calls.append(1))
        debouncer.trigger()
        debouncer.cancel()
        assert debouncer.flush() is False
        debouncer.trigger()
        assert debouncer.flush() is True
        assert not debouncer.pending

    asyncio.run(_scenario())
    assert calls == [1]


def test_inbox_keeps_arrival_order_when_posting_reentrantly() -> None:
    handled: list[int] = []
    inbox: ResultInbox

    def _handler(report: ScoreReport) -> None:
        handled.append(report.snapshot_id)
        if report.snapshot_id == 1:
            inbox.post(ScoreReport(AnalysisDimension.CONTENT, 3, 10))
            assert handled == [1]

    inbox = ResultInbox(_handler)
    inbox.post(ScoreReport(AnalysisDimension.KEYWORD, 1, 10))
    inbox.post(ScoreReport(AnalysisDimension.KEYWORD, 2, 10))

    assert handled == [1, 3, 2]
    assert len(inbox) == 0


def test_signal_listeners_run_in_order_and_can_disconnect() -> None:
    seen: list[str] = []
    signal: Signal[str] = Signal("ready")
    signal.connect(lambda payload: seen.append(f"a:{payload}"))
    disconnect = signal.connect(lambda payload: seen.append(f"b:{payload}"))

    signal.emit("x")
    disconnect()
    signal.emit("y")

    assert seen == ["a:x", "b:x", "a:y"]
    assert len(signal) == 1


def test_trigger_outside_event_loop_runs_at_once() -> None:
    calls: list[int] = []
    debouncer = Debouncer(10.0, lambda: calls.append(1))

    debouncer.trigger()

    assert calls == [1]
    assert not debouncer.pending
