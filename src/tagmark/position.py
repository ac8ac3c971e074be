"""Forward-only cursor over document text with line/column bookkeeping."""

from __future__ import annotations

from tagmark.schemas.tag import Position


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` line endings to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class PositionTracker:
    """Walk a document one character at a time.

    The tracker starts before the first character; call ``advance`` to move
    onto it. Stepping over a line break moves the following character to the
    next row at column 0. Once the end of input is reached ``current`` is
    None and further ``advance`` calls keep returning None.
    """

    def __init__(self, text: str) -> None:
        self._text = normalize_newlines(text)
        self._offset = -1
        self._row = 0
        self._column = -1
        self._current: str | None = None

    @property
    def current(self) -> str | None:
        return self._current

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def position(self) -> Position:
        return Position(offset=self._offset, row=self._row, column=self._column)

    def advance(self) -> str | None:
        """Move to the next character and return it (None at end of input)."""
        if self._current is None and self._offset >= len(self._text):
            return None

        if self._current == "\n":
            self._row += 1
            self._column = 0
        else:
            self._column += 1

        self._offset += 1

        if self._offset >= len(self._text):
            self._current = None
        else:
            self._current = self._text[self._offset]
        return self._current

    def slice(self, start: int, end: int) -> str:
        """Return the normalized text between two offsets."""
        return self._text[start:end]
