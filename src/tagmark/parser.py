"""Parse tagmark source into a validated tag tree.

Document syntax::

    @main{
        @heading(level: "2", alignment: "center"){ Title }
        @paragraph{ Some text with a \\n line break. }
    }

A tag is the ``@`` marker, a name, an optional parenthesized option list and
a ``{ ... }`` block holding text and nested tags. Inside text a backslash
escapes the next character, and ``\\n`` stands for a line break.
"""

from __future__ import annotations

import re
import sys

from tagmark.config import TAGMARK_MAX_DEPTH
from tagmark.exceptions import DocumentValidationError, TagSyntaxError
from tagmark.position import PositionTracker
from tagmark.schemas.tag import Position, Tag
from tagmark.text_utils import compress_spaces, is_whitespace_only
from tagmark.utils.logging_config import get_logger
from tagmark.validator import validate

logger = get_logger(__name__)

MARKER = "@"
ESCAPE = "\\"
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"
OPTIONS_OPEN = "("
OPTIONS_CLOSE = ")"
OPTION_SEPARATOR = ","

_TAG_NAME_RE = re.compile(r"^[A-Za-z0-9_]+$")
_TAG_OPTION_RE = re.compile(r'^\s*([A-Za-z0-9_-]+)\s*:\s*"([^\n,"]*)"\s*$')

_NAME_STOPS = frozenset({BLOCK_OPEN, OPTIONS_OPEN})
_OPTION_FORBIDDEN = frozenset({BLOCK_OPEN, BLOCK_CLOSE, OPTIONS_OPEN, MARKER})

# Interpreter frames one nesting level costs in the deepest recursive pass
# (rendering), with headroom for the caller's own stack.
_FRAMES_PER_LEVEL = 8


def effective_max_depth(max_depth: int) -> int:
    """Clamp ``max_depth`` so parsing and rendering stay within the recursion limit."""
    return min(max_depth, max(1, sys.getrecursionlimit() // _FRAMES_PER_LEVEL))


def parse(source: bytes | str, *, max_depth: int | None = None) -> Tag:
    """Parse a document and return its validated root tag.

    Args:
        source: Raw document. Bytes are decoded as UTF-8, invalid sequences
            are replaced.
        max_depth: Deepest tag nesting accepted. Defaults to
            ``TAGMARK_MAX_DEPTH``; clamped by ``effective_max_depth``.

    Returns:
        The single root tag of the document.

    Raises:
        TagSyntaxError: On the first malformed construct, or when the document
            does not contain exactly one top-level node.
        DocumentValidationError: If the tree breaks any structural rule.
    """
    text = source.decode("utf-8", errors="replace") if isinstance(source, bytes) else source
    parser = _Parser(text, max_depth=TAGMARK_MAX_DEPTH if max_depth is None else max_depth)
    root = parser.parse_root()

    errors = validate(root)
    if errors:
        logger.debug("Document rejected with %d validation error(s)", len(errors))
        raise DocumentValidationError(errors)
    return root


class _PendingText:
    """Characters collected since the last flushed text leaf."""

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._start: Position | None = None

    def add(self, char: str, position: Position) -> None:
        if self._start is None:
            self._start = position
        self._chars.append(char)

    def flush(self) -> Tag | None:
        """Return a text leaf for the pending run (None if blank) and reset."""
        raw = "".join(self._chars)
        start = self._start
        self._chars = []
        self._start = None
        if start is None or is_whitespace_only(raw):
            return None
        return Tag.text_leaf(compress_spaces(raw), start)


class _Parser:
    def __init__(self, text: str, *, max_depth: int) -> None:
        self._tracker = PositionTracker(text)
        self._max_depth = effective_max_depth(max_depth)

    def _error(self, message: str, position: Position | None = None) -> TagSyntaxError:
        return TagSyntaxError(message, position or self._tracker.position)

    def parse_root(self) -> Tag:
        tags = self._parse_block(0)
        if not tags:
            raise self._error("no root tag found")
        if len(tags) > 1:
            raise self._error("multiple root tags found", tags[1].position)
        return tags[0]

    def _parse_block(self, depth: int) -> list[Tag]:
        """Parse up to the ``}`` closing this block, or end of input at depth 0."""
        tracker = self._tracker
        tags: list[Tag] = []
        pending = _PendingText()

        while True:
            char = tracker.advance()
            if char is None:
                break

            if char == ESCAPE:
                position = tracker.position
                escaped = tracker.advance()
                if escaped is None:
                    break
                if escaped == "n":
                    pending.add("\n", position)
                elif escaped == "\n":
                    # Source line breaks fold to a space, escaped or not.
                    pending.add(" ", position)
                else:
                    pending.add(escaped, position)
            elif char == MARKER:
                _append_leaf(tags, pending)
                tags.append(self._parse_tag(depth))
            elif char == BLOCK_CLOSE:
                if depth == 0:
                    raise self._error("unmatched closing brace")
                _append_leaf(tags, pending)
                return tags
            elif char == "\n":
                pending.add(" ", tracker.position)
            else:
                pending.add(char, tracker.position)

        if depth > 0:
            raise self._error("unexpected end of content")
        _append_leaf(tags, pending)
        return tags

    def _parse_tag(self, depth: int) -> Tag:
        """Parse a tag definition starting at its marker, then its block."""
        tracker = self._tracker
        marker_position = tracker.position
        if depth + 1 > self._max_depth:
            raise self._error(f"maximum nesting depth of {self._max_depth} exceeded")

        name_start = tracker.offset + 1
        char = tracker.advance()
        while char is not None and char not in _NAME_STOPS and not char.isspace():
            char = tracker.advance()
        if char is None:
            raise self._error("unexpected end of content")

        name = tracker.slice(name_start, tracker.offset)
        if not _TAG_NAME_RE.match(name):
            raise self._error(f"invalid tag name `{name}`")

        options: dict[str, str] = {}
        char = self._skip_whitespace()
        if char == OPTIONS_OPEN:
            options = self._parse_options()
            tracker.advance()
            char = self._skip_whitespace()
        if char != BLOCK_OPEN:
            raise self._error("unexpected token")

        children = self._parse_block(depth + 1)
        return Tag(kind=name, options=options, children=children, position=marker_position)

    def _parse_options(self) -> dict[str, str]:
        """Parse ``key: "value"`` pairs; the tracker ends on the closing paren."""
        tracker = self._tracker
        start = tracker.offset + 1
        char = tracker.advance()
        while char != OPTIONS_CLOSE:
            if char is None:
                raise self._error("unexpected end of content")
            if char in _OPTION_FORBIDDEN:
                raise self._error("unexpected token")
            char = tracker.advance()

        raw = tracker.slice(start, tracker.offset)
        options: dict[str, str] = {}
        if is_whitespace_only(raw):
            return options

        for segment in raw.split(OPTION_SEPARATOR):
            match = _TAG_OPTION_RE.match(segment)
            if match is None:
                raise self._error(f"invalid tag option format `{segment}`")
            key, value = match.groups()
            # Later duplicates win.
            options[key] = value
        return options

    def _skip_whitespace(self) -> str:
        char = self._tracker.current
        while char is not None and char.isspace():
            char = self._tracker.advance()
        if char is None:
            raise self._error("unexpected end of content")
        return char


def _append_leaf(tags: list[Tag], pending: _PendingText) -> None:
    leaf = pending.flush()
    if leaf is not None:
        tags.append(leaf)
