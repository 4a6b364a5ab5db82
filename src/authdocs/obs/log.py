"""Logging setup shared by the HTTP and MCP entrypoints."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    # basicConfig writes to stderr, leaving stdout to the MCP stdio transport.
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
