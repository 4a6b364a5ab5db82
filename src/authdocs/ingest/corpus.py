"""Lazy, load-once cache over the local documentation directory."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from authdocs.config import CorpusConfig
from authdocs.ingest.parser import ParserRegistry
from authdocs.types import Document

logger = logging.getLogger(__name__)


class CacheState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"


class CorpusCache:
    """Holds the corpus documents for the lifetime of the hosting process.

    The directory is read on the first call to `documents()` and never again.
    There is no invalidation: the corpus is treated as static while the
    process runs. Two callers racing on the first load may both read the
    directory; the second assignment replaces an identical result.
    """

    def __init__(
        self,
        config: CorpusConfig | None = None,
        parser_registry: ParserRegistry | None = None,
    ) -> None:
        self.config = config or CorpusConfig()
        self._parsers = parser_registry or ParserRegistry()
        self._documents: list[Document] | None = None

    @property
    def state(self) -> CacheState:
        if self._documents is None:
            return CacheState.UNINITIALIZED
        return CacheState.LOADED

    def documents(self) -> list[Document]:
        if self._documents is None:
            self._documents = self._load()
        return self._documents

    def _load(self) -> list[Document]:
        corpus_dir = Path(self.config.corpus_dir)
        try:
            if not corpus_dir.is_dir():
                logger.info("Corpus directory %s not found; using an empty corpus", corpus_dir)
                return []
            entries = sorted(corpus_dir.iterdir(), key=lambda path: path.name)
        except OSError as exc:
            logger.warning("Cannot list corpus directory %s: %s", corpus_dir, exc)
            return []

        documents: list[Document] = []
        for path in entries:
            parser = self._parsers.parser_for(path)
            if parser is None:
                continue
            try:
                if not path.is_file():
                    continue
                documents.append(parser.parse(path, encoding=self.config.encoding))
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping unreadable corpus file %s: %s", path, exc)

        logger.info("Loaded %d corpus documents from %s", len(documents), corpus_dir)
        return documents

    def get(self, file_name: str) -> Document | None:
        """Return the document with this display name, or None when absent."""
        for document in self.documents():
            if document.file_name == file_name:
                return document
        return None
