"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Document:
    """One corpus file, loaded once and never mutated."""

    file_path: str
    file_name: str
    content: str
    lines: tuple[str, ...]


@dataclass(slots=True)
class Paragraph:
    """A maximal run of non-blank lines with 1-based inclusive line numbers."""

    start_line: int
    end_line: int
    text: str

    @property
    def line_range(self) -> str:
        return f"{self.start_line}-{self.end_line}"


@dataclass(slots=True)
class ScoredSnippet:
    """A paragraph scored against a question, with its owning document."""

    paragraph: Paragraph
    score: float
    document: Document


@dataclass(slots=True)
class SourceCitation:
    file: str
    line_range: str


@dataclass(slots=True)
class RetrievalResult:
    """Bounded answer assembled from the top-ranked snippets."""

    answer: str
    snippets: list[ScoredSnippet]
    sources: list[SourceCitation]
    confidence: float
    fallback: bool = False

    def to_payload(self) -> dict[str, Any]:
        return {
            "answer": self.answer,
            "confidence": self.confidence,
            "fallback": self.fallback,
            "citations": [
                {"file": source.file, "line_range": source.line_range}
                for source in self.sources
            ],
            "snippets": [
                {
                    "file": snippet.document.file_name,
                    "start_line": snippet.paragraph.start_line,
                    "end_line": snippet.paragraph.end_line,
                    "score": snippet.score,
                    "text": snippet.paragraph.text,
                }
                for snippet in self.snippets
            ],
        }


@dataclass(slots=True)
class LineMatch:
    """A single corpus line matching a search query."""

    file: str
    line_number: int
    excerpt: str
    relevance: int


@dataclass(slots=True)
class ToolTrace:
    """Trace record for an executed tool call."""

    name: str
    input_payload: dict[str, Any]
    output_preview: str
    latency_ms: float
