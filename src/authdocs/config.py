"""Configuration models for the documentation retrieval server."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class CorpusConfig(BaseModel):
    """Configures where the local documentation corpus is read from."""

    corpus_dir: Path = Field(default=Path("docs"))
    encoding: str = Field(default="utf-8", min_length=1)


class RetrievalConfig(BaseModel):
    """Configures paragraph ranking, answer assembly and confidence heuristics."""

    max_snippets: int = Field(default=4, ge=1)
    min_score: float = Field(default=0.05, ge=0.0)
    max_answer_chars: int = Field(default=1600, ge=1)
    truncate_to: int = Field(default=1575, ge=1)
    base_confidence: float = Field(default=0.4, ge=0.0, le=1.0)
    confidence_divisor: float = Field(default=20.0, gt=0.0)
    max_confidence: float = Field(default=0.95, ge=0.0, le=1.0)
    fallback_confidence: float = Field(default=0.1, ge=0.0, le=1.0)
    fallback_lines: int = Field(default=20, ge=1)

    @model_validator(mode="after")
    def _check_truncation(self) -> "RetrievalConfig":
        if self.truncate_to >= self.max_answer_chars:
            raise ValueError("truncate_to must be less than max_answer_chars")
        return self
