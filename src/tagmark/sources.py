"""Read raw document bytes from files, streams and URLs."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from tagmark.config import TAGMARK_MAX_INPUT_BYTES, TAGMARK_READ_CHUNK_SIZE
from tagmark.exceptions import SourceError, SourceNotFoundError
from tagmark.http_utils import fetch_with_retries
from tagmark.utils.logging_config import get_logger

logger = get_logger(__name__)


def read_stream(
    stream: BinaryIO,
    *,
    max_bytes: int | None = None,
    chunk_size: int | None = None,
    name: str = "<stream>",
) -> bytes:
    """Read a binary stream in chunks, stopping at the input ceiling.

    Args:
        stream: Binary file-like object.
        max_bytes: Ceiling on bytes consumed. Defaults to
            ``TAGMARK_MAX_INPUT_BYTES``.
        chunk_size: Size of each read. Defaults to ``TAGMARK_READ_CHUNK_SIZE``.
        name: Label used in log messages.

    Returns:
        At most ``max_bytes`` bytes from the stream.
    """
    limit = TAGMARK_MAX_INPUT_BYTES if max_bytes is None else max_bytes
    size = chunk_size or TAGMARK_READ_CHUNK_SIZE

    chunks: list[bytes] = []
    total = 0
    while total < limit:
        chunk = stream.read(min(size, limit - total))
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)
        total += len(chunk)

    if stream.read(1):
        logger.warning("Document %s exceeds %d bytes; input truncated", name, limit)
    return b"".join(chunks)


def read_document(path: str | Path, *, max_bytes: int | None = None) -> bytes:
    """Read a document from disk, honouring the input ceiling.

    Raises:
        SourceNotFoundError: If the file does not exist.
        SourceError: If the file cannot be read.
    """
    file_path = Path(path)
    try:
        with file_path.open("rb") as handle:
            return read_stream(handle, max_bytes=max_bytes, name=str(file_path))
    except FileNotFoundError as exc:
        raise SourceNotFoundError(f"Document not found: {file_path}") from exc
    except OSError as exc:
        raise SourceError(f"Failed to read {file_path}: {exc}") from exc


async def fetch_document(url: str, *, max_bytes: int | None = None) -> bytes:
    """Download a document over HTTP, honouring the input ceiling.

    Raises:
        SourceNotFoundError: If the server answers 404.
        SourceError: If the download fails after retries.
    """
    return await fetch_with_retries(
        url,
        max_bytes=max_bytes,
        on_404=SourceNotFoundError,
        on_404_message=f"Document not found at {url}",
    )
