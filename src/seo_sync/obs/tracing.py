"""Analysis cycle tracing for the orchestrator's result inbox."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from seo_sync.types import AnalysisDimension

APPLIED = "applied"
DROPPED_STALE = "dropped_stale"


@dataclass(slots=True)
class CycleRecord:
    trace_id: str
    timestamp_utc: str
    dimension: AnalysisDimension
    snapshot_id: int
    latest_snapshot_id: int
    outcome: str
    display_class: str
    latency_ms: float


class CycleTraceStore:
    """In-memory record of how each engine report was handled."""

    def __init__(self, max_records: int = 500) -> None:
        self._records: dict[str, CycleRecord] = {}
        self._max_records = max_records

    def record(
        self,
        *,
        dimension: AnalysisDimension,
        snapshot_id: int,
        latest_snapshot_id: int,
        outcome: str,
        display_class: str = "",
        latency_ms: float = 0.0,
    ) -> CycleRecord:
        trace_id = str(uuid.uuid4())
        record = CycleRecord(
            trace_id=trace_id,
            timestamp_utc=datetime.now(timezone.utc).isoformat(),
            dimension=dimension,
            snapshot_id=snapshot_id,
            latest_snapshot_id=latest_snapshot_id,
            outcome=outcome,
            display_class=display_class,
            latency_ms=latency_ms,
        )
        self._records[trace_id] = record
        if len(self._records) > self._max_records:
            oldest = next(iter(self._records))
            del self._records[oldest]
        return record

    def get(self, trace_id: str) -> CycleRecord:
        record = self._records.get(trace_id)
        if record is None:
            raise KeyError(f"Trace not found: {trace_id}")
        return record

    def list_recent(self, limit: int = 20) -> list[CycleRecord]:
        return list(self._records.values())[-limit:]

    def summary(self) -> dict[str, float | int]:
        """Aggregate counts for applied and dropped reports."""
        records = list(self._records.values())
        total = len(records)
        if total == 0:
            return {
                "total_reports": 0,
                "applied": 0,
                "dropped_stale": 0,
                "avg_apply_latency_ms": 0.0,
            }

        applied = [record for record in records if record.outcome == APPLIED]
        dropped = total - len(applied)
        avg_latency = (
            sum(record.latency_ms for record in applied) / len(applied) if applied else 0.0
        )
        return {
            "total_reports": total,
            "applied": len(applied),
            "dropped_stale": dropped,
            "avg_apply_latency_ms": avg_latency,
        }

