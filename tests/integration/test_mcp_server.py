import asyncio
from pathlib import Path

import pytest

from authdocs import mcp_server


@pytest.fixture()
def fresh_server(monkeypatch: pytest.MonkeyPatch, docs_dir: Path):
    monkeypatch.setenv("AUTHDOCS_CORPUS_DIR", str(docs_dir))
    monkeypatch.setattr(mcp_server, "_registry", None)
    return mcp_server


def test_mcp_tools_share_one_registry(fresh_server) -> None:
    listed = fresh_server.list_documents()
    registry = fresh_server._registry

    answer = fresh_server.ask_documentation("How do I configure the PostgreSQL adapter?", "database")
    hits = fresh_server.search_documentation("mysql", max_results=1)

    assert "database-adapters.md (6 lines)" in listed
    assert "- database-adapters.md lines 5-5" in answer
    assert hits.startswith("[database-adapters.md:3]")
    assert fresh_server._registry is registry


def test_mcp_blank_topic_searches_everything(fresh_server) -> None:
    answer = fresh_server.ask_documentation("passkeys", "")

    assert "plugins.md lines 3-4" in answer


def test_mcp_get_document_tool(fresh_server) -> None:
    assert fresh_server.get_document("plugins.md").startswith("# Plugins")
    assert fresh_server.get_document("missing.md") == "NOT_FOUND"


def test_mcp_documents_are_resources(fresh_server) -> None:
    assert "plugins.md (5 lines)" in fresh_server.document_index()
    assert "two factor plugin" in fresh_server.document_resource("plugins.md")
    with pytest.raises(ValueError):
        fresh_server.document_resource("missing.md")


def test_mcp_resource_template_is_registered(fresh_server) -> None:
    contents = list(
        asyncio.run(fresh_server.mcp.read_resource("authdocs://docs/database-adapters.md"))
    )

    assert "PostgreSQL" in contents[0].content
