from authdocs.obs.tracing import TraceStore
from authdocs.types import RetrievalResult


def _store_with(count: int) -> TraceStore:
    store = TraceStore()
    for i in range(count):
        store.create_record(
            question=f"question {i}",
            topic=None,
            result=RetrievalResult(answer="a", snippets=[], sources=[], confidence=0.5),
            tool_traces=[],
            latency_ms=float(i),
        )
    return store


def test_list_recent_returns_newest_records() -> None:
    store = _store_with(5)

    assert [r.question for r in store.list_recent(limit=2)] == ["question 3", "question 4"]


def test_non_positive_limit_returns_nothing() -> None:
    store = _store_with(3)

    assert store.list_recent(limit=0) == []
    assert store.list_recent(limit=-1) == []


def test_summary_counts_fallbacks() -> None:
    store = _store_with(2)
    store.create_record(
        question="missing",
        topic="zzz",
        result=RetrievalResult(answer="none", snippets=[], sources=[], confidence=0.1, fallback=True),
        tool_traces=[],
        latency_ms=1.0,
    )

    summary = store.summary()

    assert summary["total_requests"] == 3
    assert summary["fallback_count"] == 1
