"""Parsing interfaces and concrete parsers for plain-text corpus files."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from pathlib import Path

from authdocs.types import Document

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(content: str) -> tuple[str, ...]:
    """Split on `\\n` and `\\r\\n` only, keeping a trailing empty line."""
    return tuple(_LINE_BREAK.split(content))


class Parser(ABC):
    """Base parser interface used by the corpus loader."""

    extensions: tuple[str, ...] = ()

    @abstractmethod
    def parse(self, path: Path, *, encoding: str = "utf-8") -> Document:
        """Read a file into an immutable `Document`."""


class TextParser(Parser):
    """Parser for plain text documents."""

    extensions = (".txt",)

    def parse(self, path: Path, *, encoding: str = "utf-8") -> Document:
        content = path.read_text(encoding=encoding)
        return Document(
            file_path=str(path.resolve()),
            file_name=path.name,
            content=content,
            lines=split_lines(content),
        )


class MarkdownParser(Parser):
    """Parser for markdown documents.

    Markdown is kept verbatim: headings and code fences stay in the text so
    that paragraph line numbers match the file on disk.
    """

    extensions = (".md", ".mdx", ".markdown")

    def parse(self, path: Path, *, encoding: str = "utf-8") -> Document:
        content = path.read_text(encoding=encoding)
        return Document(
            file_path=str(path.resolve()),
            file_name=path.name,
            content=content,
            lines=split_lines(content),
        )


class ParserRegistry:
    """Maps file extension to parser implementation.

    The set of registered extensions doubles as the corpus whitelist.
    """

    def __init__(self, parsers: list[Parser] | None = None) -> None:
        self._parsers: dict[str, Parser] = {}
        for parser in parsers or [TextParser(), MarkdownParser()]:
            self.register(parser)

    def register(self, parser: Parser) -> None:
        for extension in parser.extensions:
            self._parsers[extension.lower()] = parser

    @property
    def extensions(self) -> frozenset[str]:
        return frozenset(self._parsers)

    def parser_for(self, path: str | Path) -> Parser | None:
        """Return the parser for `path`, or None when its extension is not supported."""
        return self._parsers.get(Path(path).suffix.lower())
