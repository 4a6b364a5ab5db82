import pytest

from authdocs.retrieval.retriever import CorpusRetriever

QUESTIONS = [
    ("database", "How do I configure the PostgreSQL adapter?"),
    ("plugins", "two factor"),
    (None, "install the package"),
    ("zzz-no-match", "BETTER_AUTH_SECRET"),
    ("integration", "nothing in the docs mentions this"),
    ("", "adapter plugin package database passkeys"),
]


@pytest.mark.parametrize(("topic", "question"), QUESTIONS)
def test_results_stay_within_bounds(
    retriever: CorpusRetriever, topic: str | None, question: str
) -> None:
    result = retriever.retrieve(topic, question)

    assert len(result.answer) <= 1600
    assert len(result.snippets) <= 4
    assert len(result.sources) == len(result.snippets)
    assert 0.0 <= result.confidence <= 0.95
    if result.fallback:
        assert result.confidence == 0.1
        assert len(result.snippets) <= 1
    else:
        assert all(snippet.score > 0.05 for snippet in result.snippets)
        assert result.confidence >= 0.4


@pytest.mark.parametrize(("topic", "question"), QUESTIONS)
def test_results_are_deterministic(
    retriever: CorpusRetriever, topic: str | None, question: str
) -> None:
    first = retriever.retrieve(topic, question)
    second = retriever.retrieve(topic, question)

    assert (first.answer, first.confidence, first.sources) == (
        second.answer,
        second.confidence,
        second.sources,
    )
