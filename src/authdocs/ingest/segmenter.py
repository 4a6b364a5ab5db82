"""Paragraph segmentation with line-number bookkeeping."""

from __future__ import annotations

from collections.abc import Sequence

from authdocs.types import Document, Paragraph


def segment(document: Document) -> list[Paragraph]:
    return segment_lines(document.lines)


def segment_lines(lines: Sequence[str]) -> list[Paragraph]:
    """Split lines into maximal runs of non-blank lines.

    A line is blank when it is empty after `strip()`. Blank lines separate
    paragraphs and belong to none of them. Line numbers are 1-based and
    inclusive, taken from the original sequence.
    """

    paragraphs: list[Paragraph] = []
    current: list[str] = []
    start = 0

    for number, line in enumerate(lines, start=1):
        if line.strip():
            if not current:
                start = number
            current.append(line)
            continue
        if current:
            paragraphs.append(_make_paragraph(start, current))
            current = []

    if current:
        paragraphs.append(_make_paragraph(start, current))
    return paragraphs


def _make_paragraph(start: int, lines: list[str]) -> Paragraph:
    return Paragraph(start_line=start, end_line=start + len(lines) - 1, text="\n".join(lines))
