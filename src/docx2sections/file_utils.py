"""File utilities for reading uploaded documents."""

from __future__ import annotations

import asyncio
from pathlib import Path, PurePath

from docx2sections.config import DOCX2SECTIONS_MAX_UPLOAD_BYTES, DOCX_SUFFIX
from docx2sections.exceptions import FileReadError, UnsupportedFileTypeError


def ensure_docx_filename(filename: str | None) -> str:
    """Check that a filename carries the .docx suffix.

    Args:
        filename: Name of the uploaded file as supplied by the client.

    Returns:
        The filename without any directory part.

    Raises:
        UnsupportedFileTypeError: If the name is missing or not a .docx file.
    """
    name = PurePath(filename or "").name
    if not name or PurePath(name).suffix.lower() != DOCX_SUFFIX:
        raise UnsupportedFileTypeError(f"Only {DOCX_SUFFIX} files are supported, got {name or 'no file'!r}")
    return name


def check_upload_size(size: int, max_bytes: int = DOCX2SECTIONS_MAX_UPLOAD_BYTES) -> None:
    """Reject payloads above ``max_bytes``.

    Args:
        size: Payload size in bytes.
        max_bytes: Upper bound. If <= 0, any size is accepted.

    Raises:
        FileReadError: If the payload is too large.
    """
    if max_bytes > 0 and size > max_bytes:
        raise FileReadError(f"File is {size} bytes, limit is {max_bytes} bytes")


async def read_docx_bytes(path: Path) -> bytes:
    """Read a document from disk asynchronously using a thread pool.

    Args:
        path: Path to the .docx file.

    Returns:
        The file contents.

    Raises:
        UnsupportedFileTypeError: If the path does not name a .docx file.
        FileReadError: If the file cannot be read or is too large.
    """
    ensure_docx_filename(path.name)
    try:
        data = await asyncio.to_thread(path.read_bytes)
    except OSError as exc:
        raise FileReadError(f"Cannot read {path}: {exc}") from exc
    check_upload_size(len(data))
    return data
