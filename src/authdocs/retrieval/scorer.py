"""Term-frequency paragraph scoring with length normalization."""

from __future__ import annotations

from authdocs.retrieval.normalize import normalize

MIN_TERM_LENGTH = 3
PHRASE_MIN_LENGTH = 10
PHRASE_BONUS = 2.0
LENGTH_SCALE = 200.0
LENGTH_FLOOR = 40


def count_occurrences(text: str, term: str) -> int:
    return len(text.split(term)) - 1


def score_paragraph(paragraph_text: str, question: str) -> float:
    """Score how well a paragraph answers a question.

    Scoring steps:
    1. Every question term of at least three characters adds its occurrence
       count in the normalized paragraph (duplicate terms count again).
    2. A normalized question longer than ten characters that appears verbatim
       in the normalized paragraph adds a flat bonus of 2.
    3. The sum is scaled by `200 / max(40, len(paragraph_text))` so dense
       paragraphs outrank long ones that collect hits by volume.
    """

    normalized_question = normalize(question)
    question_terms = normalized_question.split()
    if not question_terms:
        return 0.0

    text = normalize(paragraph_text)
    total = 0.0
    for term in question_terms:
        if len(term) < MIN_TERM_LENGTH:
            continue
        total += count_occurrences(text, term)

    if len(normalized_question) > PHRASE_MIN_LENGTH and normalized_question in text:
        total += PHRASE_BONUS

    return total * (LENGTH_SCALE / max(LENGTH_FLOOR, len(paragraph_text)))
