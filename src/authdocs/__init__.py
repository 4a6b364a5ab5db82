"""Local documentation retrieval tools for an authentication framework."""

from .config import CorpusConfig, RetrievalConfig

__all__ = ["CorpusConfig", "RetrievalConfig"]
