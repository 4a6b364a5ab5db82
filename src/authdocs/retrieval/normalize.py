"""Text normalization shared by candidate selection and scoring."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize(text: str) -> str:
    """Lower-case, collapse every run of non `[a-z0-9]` characters to one space, trim."""
    return _NON_ALNUM.sub(" ", text.lower()).strip()


def terms(text: str) -> list[str]:
    return normalize(text).split()
