"""Custom exceptions for tagmark."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from tagmark.schemas.tag import Position


class TagmarkError(Exception):
    """Base exception for tagmark operations."""


class SourceError(TagmarkError):
    """Error while reading a document from its source."""


class SourceNotFoundError(SourceError):
    """Document does not exist at the given path or URL."""


def _escape_message(message: str) -> str:
    return message.replace("\n", "\\n")


class _PositionedError(TagmarkError):
    """Error anchored to a location in the source document."""

    label = "Error"

    def __init__(self, message: str, position: Position) -> None:
        self.message = _escape_message(message)
        self.position = position
        super().__init__(str(self))

    @property
    def line(self) -> int:
        """1-based line number."""
        return self.position.row + 1

    @property
    def column(self) -> int:
        """1-based column number."""
        return self.position.column + 1

    def __str__(self) -> str:
        return f"{self.label}: {self.message} (line {self.line}, column {self.column})"


class TagSyntaxError(_PositionedError):
    """Malformed markup detected by the parser."""

    label = "Syntax Error"


class ValidationError(_PositionedError):
    """A single structural rule violated by a tag."""

    label = "Validation Error"


class DocumentValidationError(TagmarkError):
    """The parsed document broke one or more structural rules.

    Attributes:
        errors: Every violation found, in tree order.
    """

    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self.errors = list(errors)
        super().__init__("\n".join(str(error) for error in self.errors))
