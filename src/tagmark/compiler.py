"""Compilation pipeline: source -> tag tree -> validation -> HTML."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tagmark.parser import parse
from tagmark.renderer import render
from tagmark.schemas import CompileResult
from tagmark.sources import fetch_document, read_document
from tagmark.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class CompileOptions:
    """Options for document compilation.

    Attributes:
        escape_text: If True, HTML-escape literal text. Off by default so
            text reaches the output verbatim.
    """

    escape_text: bool = False


def compile_document(source: bytes | str, options: CompileOptions | None = None) -> CompileResult:
    """Parse, validate and render a document.

    Args:
        source: Raw document bytes or text.
        options: Compilation options. Uses defaults if None.

    Returns:
        The rendered HTML fragment and a dump of the tag tree.

    Raises:
        TagSyntaxError: If the document is malformed.
        DocumentValidationError: If the document breaks structural rules.
    """
    opts = options or CompileOptions()
    root = parse(source)
    html = render(root, escape_text=opts.escape_text)
    logger.debug("Compiled document into %d characters of HTML", len(html))
    return CompileResult(html=html, tree=root.dump())


def compile_file(path: str | Path, options: CompileOptions | None = None) -> CompileResult:
    """Read a document from disk and compile it."""
    return compile_document(read_document(path), options)


async def compile_url(url: str, options: CompileOptions | None = None) -> CompileResult:
    """Download a document and compile it."""
    source = await fetch_document(url)
    return compile_document(source, options)
