"""Pydantic models for the compile API."""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field, field_validator

from server.server_config import MAX_SOURCE_CHARS


class ErrorKind(str, Enum):
    """Which pipeline stage rejected the document."""

    SYNTAX = "syntax"
    VALIDATION = "validation"


class CompileRequest(BaseModel):
    """Request model for the /api/compile endpoint.

    Attributes
    ----------
    source : str
        The tagmark document to compile.
    escape_text : bool
        HTML-escape literal text in the output.
    include_tree : bool
        Return a dump of the parsed tag tree alongside the HTML.

    """

    source: str = Field(..., max_length=MAX_SOURCE_CHARS, description="tagmark document source")
    escape_text: bool = Field(default=False, description="HTML-escape literal text")
    include_tree: bool = Field(default=False, description="Include the parsed tag tree in the response")

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: str) -> str:
        """Validate that ``source`` is not blank."""
        if not v.strip():
            err = "source cannot be empty"
            raise ValueError(err)
        return v


class CompileSuccessResponse(BaseModel):
    """Success response model for the /api/compile endpoint.

    Attributes
    ----------
    html : str
        The rendered HTML fragment.
    tree : str | None
        Dump of the parsed tag tree, when requested.

    """

    html: str = Field(..., description="Rendered HTML fragment")
    tree: str | None = Field(default=None, description="Parsed tag tree")


class CompileErrorResponse(BaseModel):
    """Error response model for the /api/compile endpoint.

    Attributes
    ----------
    error : str
        Full diagnostic text.
    kind : ErrorKind
        Stage that rejected the document.
    errors : list[str]
        One diagnostic per problem found.

    """

    error: str = Field(..., description="Error message")
    kind: ErrorKind = Field(..., description="Rejecting stage")
    errors: list[str] = Field(default_factory=list, description="Individual diagnostics")


# Union type for API responses
CompileResponse = Union[CompileSuccessResponse, CompileErrorResponse]
