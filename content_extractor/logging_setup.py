"""Logging setup shared by every entry-point.

All log output goes to stderr: when the MCP server runs over stdio, stdout
carries protocol frames and must stay clean.
"""

from __future__ import annotations

import sys

from loguru import logger

from content_extractor.config import settings

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def _stderr_sink(message) -> None:
    # Looks up sys.stderr on every write so redirected streams are followed.
    sys.stderr.write(message)


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a single stderr sink at *level*."""
    logger.remove()
    logger.add(_stderr_sink, level=(level or settings.log_level).upper(), format=_FORMAT)
