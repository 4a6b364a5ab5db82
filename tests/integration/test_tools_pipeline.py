from pathlib import Path

from authdocs.agent.registry import ToolRegistry
from authdocs.agent.tools import register_builtin_tools
from authdocs.config import CorpusConfig
from authdocs.ingest.corpus import CorpusCache
from authdocs.retrieval.retriever import NO_MATCH_ANSWER, CorpusRetriever


def _registry(corpus_dir: Path) -> ToolRegistry:
    corpus = CorpusCache(CorpusConfig(corpus_dir=corpus_dir))
    registry = ToolRegistry()
    register_builtin_tools(registry, CorpusRetriever(corpus), corpus)
    return registry


def test_ask_tool_renders_answer_and_citations(docs_dir: Path) -> None:
    output = _registry(docs_dir).execute(
        "ask_documentation",
        {"question": "Which plugin adds TOTP codes?", "topic": "plugins"},
    )

    lines = output.splitlines()
    assert lines[0].startswith("Answer (confidence ")
    assert "The two factor plugin adds TOTP codes." in output
    assert "- plugins.md lines 3-4 score=" in output


def test_ask_tool_reports_fallback_without_sources(tmp_path: Path) -> None:
    output = _registry(tmp_path / "empty").execute(
        "ask_documentation", {"question": "How do sessions expire?"}
    )

    assert output.startswith("Answer (confidence 0.10):")
    assert NO_MATCH_ANSWER in output
    assert output.endswith("Sources:\n- none")


def test_search_and_list_tools_on_empty_corpus(tmp_path: Path) -> None:
    registry = _registry(tmp_path / "empty")

    assert registry.execute("search_documentation", {"query": "adapter"}) == "NO_RESULTS"
    assert registry.execute("list_documents", {}) == "NO_DOCUMENTS"
