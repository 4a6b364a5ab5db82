"""Line-level substring search across the corpus."""

from __future__ import annotations

from collections.abc import Sequence

from authdocs.retrieval.scorer import count_occurrences
from authdocs.types import Document, LineMatch

EXCERPT_LENGTH = 100


def search_lines(documents: Sequence[Document], query: str, *, limit: int = 10) -> list[LineMatch]:
    """Return corpus lines containing `query` (case-insensitive), most occurrences first."""

    needle = query.strip().lower()
    if not needle:
        return []

    matches: list[LineMatch] = []
    for document in documents:
        for number, line in enumerate(document.lines, start=1):
            stripped = line.strip()
            lowered = stripped.lower()
            if needle not in lowered:
                continue
            excerpt = stripped
            if len(excerpt) > EXCERPT_LENGTH:
                excerpt = excerpt[:EXCERPT_LENGTH] + "..."
            matches.append(
                LineMatch(
                    file=document.file_name,
                    line_number=number,
                    excerpt=excerpt,
                    relevance=count_occurrences(lowered, needle),
                )
            )

    matches.sort(key=lambda match: match.relevance, reverse=True)
    return matches[:limit]
