"""Shared schemas for tagmark."""

from tagmark.schemas.result import CompileResult
from tagmark.schemas.tag import Position, Tag, TagKind

__all__ = ["CompileResult", "Position", "Tag", "TagKind"]
