"""Topic-based narrowing of the corpus by file name."""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from authdocs.retrieval.normalize import normalize
from authdocs.types import Document

SUBSTRING_SCORE = 3
ALIAS_SCORE = 2

ALIAS_GROUPS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "concepts": ("concept", "overview", "basics", "introduction", "getting started"),
        "authentication": (
            "auth",
            "provider",
            "oauth",
            "social",
            "sign in",
            "signin",
            "login",
            "email password",
            "session",
        ),
        "plugins": (
            "plugin",
            "two factor",
            "2fa",
            "passkey",
            "magic link",
            "organization",
            "otp",
        ),
        "integration": (
            "integrations",
            "framework",
            "nextjs",
            "next js",
            "nuxt",
            "sveltekit",
            "remix",
            "express",
            "hono",
        ),
        "database": (
            "db",
            "adapter",
            "schema",
            "postgres",
            "mysql",
            "sqlite",
            "prisma",
            "drizzle",
            "mongodb",
        ),
        "reference": ("api", "options", "config", "configuration", "cli"),
    }
)


def aliases_for(key: str) -> tuple[str, ...] | None:
    """Return the synonym phrases for a canonical key, or None when unknown."""
    return ALIAS_GROUPS.get(key)


def _mentions(text: str, key: str, phrases: tuple[str, ...]) -> bool:
    return key in text or any(phrase in text for phrase in phrases)


def score_file_name(file_name: str, normalized_topic: str) -> int:
    name = normalize(file_name)
    score = 0
    if normalized_topic and normalized_topic in name:
        score += SUBSTRING_SCORE
    for key, phrases in ALIAS_GROUPS.items():
        if _mentions(normalized_topic, key, phrases) and _mentions(name, key, phrases):
            score += ALIAS_SCORE
    return score


def select_candidates(documents: Sequence[Document], topic_hint: str | None) -> list[Document]:
    """Keep the best-matching documents for a topic hint.

    Documents within one point of the best score survive, never requiring a
    score below 1. With no signal at all, every document is a candidate.
    """

    all_documents = list(documents)
    if not topic_hint or not topic_hint.strip():
        return all_documents

    topic = normalize(topic_hint)
    scores = [score_file_name(document.file_name, topic) for document in all_documents]
    best = max(scores, default=0)
    if best == 0:
        return all_documents

    cutoff = max(1, best - 1)
    selected = [
        document for document, score in zip(all_documents, scores, strict=True) if score >= cutoff
    ]
    return selected or all_documents
