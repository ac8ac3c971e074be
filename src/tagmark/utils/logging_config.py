"""Logging helpers shared by the CLI and the HTTP server."""

from __future__ import annotations

import logging

from tagmark.config import TAGMARK_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package hierarchy."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> None:
    """Install a stderr handler on the root logger.

    Args:
        level: Logging level name or number. Defaults to ``TAGMARK_LOG_LEVEL``.
    """
    resolved = level if level is not None else TAGMARK_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
