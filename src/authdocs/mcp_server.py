"""
Auth Docs MCP Server

Exposes the documentation tools over the Model Context Protocol (stdio).

Usage:
    python -m authdocs.mcp_server

For an MCP client config:
    {
        "mcpServers": {
            "authdocs": {
                "command": "authdocs-mcp",
                "env": {"AUTHDOCS_CORPUS_DIR": "/path/to/docs"}
            }
        }
    }
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from authdocs.agent.registry import ToolRegistry
from authdocs.agent.tools import register_builtin_tools
from authdocs.config import CorpusConfig
from authdocs.ingest.corpus import CorpusCache
from authdocs.obs.log import configure_logging
from authdocs.retrieval.retriever import CorpusRetriever

logger = logging.getLogger(__name__)

mcp = FastMCP("authdocs")

# Initialized on first tool call
_registry: ToolRegistry | None = None


def _ensure_initialized() -> ToolRegistry:
    global _registry

    if _registry is not None:
        return _registry

    corpus_dir = Path(os.getenv("AUTHDOCS_CORPUS_DIR", "docs"))
    corpus = CorpusCache(CorpusConfig(corpus_dir=corpus_dir))
    registry = ToolRegistry()
    register_builtin_tools(registry, CorpusRetriever(corpus), corpus)
    logger.info("Tool registry ready with corpus directory %s", corpus_dir)
    _registry = registry
    return registry


@mcp.tool()
def ask_documentation(question: str, topic: str = "") -> str:
    """
    Answer a question from the local authentication documentation.

    Args:
        question: What you want to know, e.g. "How do I configure the PostgreSQL adapter?"
        topic: Optional coarse topic to narrow the docs (database, plugins, integration, ...)

    Returns:
        Answer text with confidence and file/line citations
    """
    return _ensure_initialized().execute(
        "ask_documentation", {"question": question, "topic": topic or None}
    )


@mcp.tool()
def search_documentation(query: str, max_results: int = 10) -> str:
    """
    Find documentation lines containing a phrase (case-insensitive).

    Returns one line per hit: [file:line] relevance=N excerpt
    """
    return _ensure_initialized().execute(
        "search_documentation", {"query": query, "max_results": max_results}
    )


@mcp.tool()
def list_documents() -> str:
    """List the documentation files the server can answer from."""
    return _ensure_initialized().execute("list_documents", {})


@mcp.tool()
def get_document(file_name: str) -> str:
    """
    Read one documentation file in full.

    Args:
        file_name: Display name from list_documents, e.g. "database.md"

    Returns:
        The file content, or NOT_FOUND
    """
    return _ensure_initialized().execute("get_document", {"file_name": file_name})


# ============================================================================
# RESOURCES
# ============================================================================

@mcp.resource("authdocs://docs", mime_type="text/plain")
def document_index() -> str:
    """Inventory of the documentation corpus."""
    return _ensure_initialized().execute("list_documents", {})


@mcp.resource("authdocs://docs/{file_name}", mime_type="text/plain")
def document_resource(file_name: str) -> str:
    """Full text of one documentation file."""
    content = _ensure_initialized().execute("get_document", {"file_name": file_name})
    if content == "NOT_FOUND":
        raise ValueError(f"Document not found: {file_name}")
    return content


def main() -> None:
    configure_logging(os.getenv("AUTHDOCS_LOG_LEVEL", "INFO"))
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
