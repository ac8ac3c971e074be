"""Command-line entry point: compile a tagmark document to HTML."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from tagmark.exceptions import DocumentValidationError, SourceError, TagSyntaxError
from tagmark.parser import parse
from tagmark.renderer import render
from tagmark.sources import fetch_document, read_document, read_stream
from tagmark.utils.logging_config import configure_logging

EXIT_OK = 0
EXIT_INVALID_DOCUMENT = 1
EXIT_SOURCE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tagmark", description="Compile tagmark markup into an HTML fragment.")
    parser.add_argument("input", help="Document path, http(s) URL, or - for stdin")
    parser.add_argument("-o", "--output", help="Write HTML to this file instead of stdout")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--tree", action="store_true", help="Print the parsed tag tree instead of HTML")
    mode.add_argument("--check", action="store_true", help="Only parse and validate the document")
    parser.add_argument("--escape-text", action="store_true", help="HTML-escape literal text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_source(location: str) -> bytes:
    if location == "-":
        return read_stream(sys.stdin.buffer, name="<stdin>")
    if location.startswith(("http://", "https://")):
        return asyncio.run(fetch_document(location))
    return read_document(location)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    try:
        source = load_source(args.input)
    except SourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_SOURCE_ERROR

    try:
        root = parse(source)
    except (TagSyntaxError, DocumentValidationError) as exc:
        print(exc, file=sys.stderr)
        return EXIT_INVALID_DOCUMENT

    if args.check:
        return EXIT_OK

    output = root.dump() if args.tree else render(root, escape_text=args.escape_text)
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
