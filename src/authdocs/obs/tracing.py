"""Request tracing and aggregate retrieval metrics."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from authdocs.types import RetrievalResult, ToolTrace


@dataclass(slots=True)
class TraceRecord:
    trace_id: str
    timestamp_utc: str
    question: str
    topic: str | None
    answer: str
    citations: list[str]
    confidence: float
    fallback: bool
    tool_traces: list[ToolTrace]
    latency_ms: float


class TraceStore:
    """In-memory trace storage for API-level observability."""

    def __init__(self) -> None:
        self._records: dict[str, TraceRecord] = {}

    def create_record(
        self,
        *,
        question: str,
        topic: str | None,
        result: RetrievalResult,
        tool_traces: list[ToolTrace],
        latency_ms: float,
    ) -> TraceRecord:
        trace_id = str(uuid.uuid4())
        record = TraceRecord(
            trace_id=trace_id,
            timestamp_utc=datetime.now(timezone.utc).isoformat(),
            question=question,
            topic=topic,
            answer=result.answer,
            citations=[f"{source.file}:{source.line_range}" for source in result.sources],
            confidence=result.confidence,
            fallback=result.fallback,
            tool_traces=tool_traces,
            latency_ms=latency_ms,
        )
        self._records[trace_id] = record
        return record

    def get(self, trace_id: str) -> TraceRecord:
        record = self._records.get(trace_id)
        if record is None:
            raise KeyError(f"Trace not found: {trace_id}")
        return record

    def list_recent(self, limit: int = 20) -> list[TraceRecord]:
        if limit <= 0:
            return []
        return list(self._records.values())[-limit:]

    def summary(self) -> dict[str, float | int]:
        """Aggregate core observability metrics for dashboard display."""
        records = list(self._records.values())
        total = len(records)
        if total == 0:
            return {
                "total_requests": 0,
                "avg_latency_ms": 0.0,
                "p95_latency_ms": 0.0,
                "avg_confidence": 0.0,
                "fallback_count": 0,
            }

        latencies = sorted(record.latency_ms for record in records)
        p95_index = max(0, int((len(latencies) * 0.95) - 1))
        return {
            "total_requests": total,
            "avg_latency_ms": sum(latencies) / total,
            "p95_latency_ms": latencies[p95_index],
            "avg_confidence": sum(record.confidence for record in records) / total,
            "fallback_count": sum(1 for record in records if record.fallback),
        }


class Timer:
    """Simple context timer used around retrieval calls."""

    def __init__(self) -> None:
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
