"""String helpers used while building text leaves."""

from __future__ import annotations

import re

# Line breaks are excluded so that escaped ``\n`` survives compression.
_SPACE_RUN_RE = re.compile(r"[ \t\v\f\r]+")
_NON_LETTER_RE = re.compile(r"[\W\d_]")


def compress_spaces(text: str) -> str:
    """Collapse every run of horizontal whitespace into a single space."""
    return _SPACE_RUN_RE.sub(" ", text)


def is_whitespace_only(text: str) -> bool:
    """Return True for empty strings and strings made only of whitespace."""
    return not text or text.isspace()


def split_to_words(text: str) -> list[str]:
    """Split on every character that is not a letter.

    Adjacent separators produce empty strings, matching ``re.split``.
    """
    return _NON_LETTER_RE.split(text)
