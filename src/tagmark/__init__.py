"""tagmark: compile @-tag markup into HTML fragments."""

from tagmark.compiler import CompileOptions, compile_document, compile_file, compile_url
from tagmark.exceptions import (
    DocumentValidationError,
    SourceError,
    SourceNotFoundError,
    TagmarkError,
    TagSyntaxError,
    ValidationError,
)
from tagmark.parser import parse
from tagmark.renderer import render
from tagmark.schemas import CompileResult, Position, Tag, TagKind
from tagmark.validator import validate

__all__ = [
    "CompileOptions",
    "CompileResult",
    "DocumentValidationError",
    "Position",
    "SourceError",
    "SourceNotFoundError",
    "Tag",
    "TagKind",
    "TagSyntaxError",
    "TagmarkError",
    "ValidationError",
    "compile_document",
    "compile_file",
    "compile_url",
    "parse",
    "render",
    "validate",
]
