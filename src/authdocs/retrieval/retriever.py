"""Paragraph-level retriever that assembles cited, bounded answers."""

from __future__ import annotations

import logging

from authdocs.config import RetrievalConfig
from authdocs.ingest.corpus import CorpusCache
from authdocs.ingest.segmenter import segment
from authdocs.retrieval.scorer import score_paragraph
from authdocs.retrieval.selector import select_candidates
from authdocs.types import (
    Document,
    Paragraph,
    RetrievalResult,
    ScoredSnippet,
    SourceCitation,
)

logger = logging.getLogger(__name__)

NO_MATCH_ANSWER = (
    "No direct match was found in the local documentation. "
    "Try rephrasing the question, using terms from the docs, or choosing a broader topic."
)
ELLIPSIS = "…"


class CorpusRetriever:
    """Ranks corpus paragraphs against a question and builds a `RetrievalResult`.

    Pipeline:
    1. Load the corpus (once per cache) and narrow it with the topic hint.
    2. Segment every candidate into paragraphs and score each one.
    3. Drop scores at or below `min_score`, rank the rest, keep the top slice.
    4. Join the kept paragraphs into a bounded answer with citations.

    Ties keep corpus order: documents sorted by file name, then paragraphs
    top to bottom, because the ranking sort is stable.
    """

    def __init__(self, corpus: CorpusCache, config: RetrievalConfig | None = None) -> None:
        self.corpus = corpus
        self.config = config or RetrievalConfig()

    def retrieve(self, topic_hint: str | None, question: str) -> RetrievalResult:
        if not question or not question.strip():
            raise ValueError("question must not be empty")

        candidates = select_candidates(self.corpus.documents(), topic_hint)

        scored: list[ScoredSnippet] = []
        for document in candidates:
            for paragraph in segment(document):
                score = score_paragraph(paragraph.text, question)
                if score > self.config.min_score:
                    scored.append(ScoredSnippet(paragraph=paragraph, score=score, document=document))

        ranked = sorted(scored, key=lambda item: item.score, reverse=True)
        snippets = ranked[: self.config.max_snippets]
        logger.debug(
            "Scored %d paragraphs above threshold across %d candidates",
            len(scored),
            len(candidates),
        )

        if not snippets:
            return self._fallback(candidates)

        answer = self._bound("\n\n".join(item.paragraph.text for item in snippets))
        total = sum(item.score for item in snippets)
        confidence = min(
            self.config.max_confidence,
            self.config.base_confidence + total / self.config.confidence_divisor,
        )
        return RetrievalResult(
            answer=answer,
            snippets=snippets,
            sources=[_cite(item) for item in snippets],
            confidence=confidence,
        )

    def _bound(self, answer: str) -> str:
        if len(answer) <= self.config.max_answer_chars:
            return answer
        return answer[: self.config.truncate_to] + ELLIPSIS

    def _fallback(self, candidates: list[Document]) -> RetrievalResult:
        snippets: list[ScoredSnippet] = []
        for document in candidates:
            if not document.content.strip():
                continue
            head = document.lines[: self.config.fallback_lines]
            paragraph = Paragraph(start_line=1, end_line=len(head), text="\n".join(head))
            snippets.append(ScoredSnippet(paragraph=paragraph, score=0.0, document=document))
            break

        return RetrievalResult(
            answer=NO_MATCH_ANSWER,
            snippets=snippets,
            sources=[_cite(item) for item in snippets],
            confidence=self.config.fallback_confidence,
            fallback=True,
        )


def _cite(snippet: ScoredSnippet) -> SourceCitation:
    return SourceCitation(file=snippet.document.file_name, line_range=snippet.paragraph.line_range)
