"""Shared pytest fixtures for the documentation retrieval tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from authdocs.config import CorpusConfig
from authdocs.ingest.corpus import CorpusCache
from authdocs.ingest.parser import split_lines
from authdocs.retrieval.retriever import CorpusRetriever
from authdocs.types import Document

DATABASE_DOC = """# Database Adapters

Database adapters support PostgreSQL and MySQL.

To configure the PostgreSQL adapter, pass a pg Pool to the database option.
"""

PLUGINS_DOC = """# Plugins

The two factor plugin adds TOTP codes.
Passkeys and magic links are also available.
"""

GETTING_STARTED_DOC = (
    "Install the package with npm install better-auth.\r\n"
    "Set BETTER_AUTH_SECRET and BETTER_AUTH_URL.\r\n"
)


def make_document(file_name: str, content: str) -> Document:
    return Document(
        file_path=f"/virtual/{file_name}",
        file_name=file_name,
        content=content,
        lines=split_lines(content),
    )


@pytest.fixture()
def docs_dir(tmp_path: Path) -> Path:
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "plugins.md").write_text(PLUGINS_DOC, encoding="utf-8")
    (docs / "database-adapters.md").write_text(DATABASE_DOC, encoding="utf-8")
    (docs / "getting-started.txt").write_bytes(GETTING_STARTED_DOC.encode("utf-8"))
    (docs / "notes.json").write_text('{"ignored": true}', encoding="utf-8")
    return docs


@pytest.fixture()
def corpus(docs_dir: Path) -> CorpusCache:
    return CorpusCache(CorpusConfig(corpus_dir=docs_dir))


@pytest.fixture()
def retriever(corpus: CorpusCache) -> CorpusRetriever:
    return CorpusRetriever(corpus)


@pytest.fixture()
def document_factory():
    return make_document
