"""Process a compile request and shape the API response."""

from __future__ import annotations

from tagmark.compiler import CompileOptions, compile_document
from tagmark.exceptions import DocumentValidationError, TagSyntaxError
from tagmark.utils.logging_config import get_logger
from server.models import CompileErrorResponse, CompileResponse, CompileSuccessResponse, ErrorKind

# Initialize logger for this module
logger = get_logger(__name__)


def process_compile(
    source: str,
    *,
    escape_text: bool = False,
    include_tree: bool = False,
) -> CompileResponse:
    """Compile a document and return a success or error response model."""
    try:
        result = compile_document(source, CompileOptions(escape_text=escape_text))
    except TagSyntaxError as exc:
        _print_error(source, ErrorKind.SYNTAX, [str(exc)])
        return CompileErrorResponse(error=str(exc), kind=ErrorKind.SYNTAX, errors=[str(exc)])
    except DocumentValidationError as exc:
        messages = [str(error) for error in exc.errors]
        _print_error(source, ErrorKind.VALIDATION, messages)
        return CompileErrorResponse(error=str(exc), kind=ErrorKind.VALIDATION, errors=messages)

    _print_success(source, result.html)
    return CompileSuccessResponse(html=result.html, tree=result.tree if include_tree else None)


def _print_error(source: str, kind: ErrorKind, messages: list[str]) -> None:
    """Log a rejected document.

    Parameters
    ----------
    source : str
        The submitted document.
    kind : ErrorKind
        Stage that rejected the document.
    messages : list[str]
        Diagnostics produced for the document.

    """
    logger.warning(
        "Document rejected",
        extra={
            "source_chars": len(source),
            "error_kind": kind.value,
            "error_count": len(messages),
            "first_error": messages[0] if messages else None,
        },
    )


def _print_success(source: str, html: str) -> None:
    logger.info(
        "Document compiled",
        extra={
            "source_chars": len(source),
            "html_chars": len(html),
        },
    )
