"""Convert .docx documents to HTML with mammoth."""

from __future__ import annotations

import asyncio
import io
import logging
from pathlib import Path

from docx2sections.config import DOCX2SECTIONS_STYLE_MAP_PATH
from docx2sections.exceptions import ConversionError
from docx2sections.schemas import ConversionResult

try:
    import mammoth
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "mammoth is required for .docx conversion (pip install mammoth)."
    ) from exc

logger = logging.getLogger(__name__)


def load_style_map(path: Path | None = DOCX2SECTIONS_STYLE_MAP_PATH) -> str | None:
    """Read a mammoth style map file, if one is configured.

    Args:
        path: Path to the style map. None means no custom style map.

    Returns:
        The style map text, or None.

    Raises:
        ConversionError: If the configured file cannot be read.
    """
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConversionError(f"Cannot read style map {path}: {exc}") from exc


def convert_docx_to_html(data: bytes, *, style_map: str | None = None) -> ConversionResult:
    """Convert raw .docx bytes into an HTML fragment.

    Args:
        data: The document bytes.
        style_map: Optional mammoth style map overriding the defaults.

    Returns:
        The produced HTML and the converter's warning messages.

    Raises:
        ConversionError: If the bytes are empty or not a readable document.
    """
    if not data:
        raise ConversionError("Document is empty")

    kwargs = {}
    if style_map:
        kwargs["style_map"] = style_map

    try:
        result = mammoth.convert_to_html(io.BytesIO(data), **kwargs)
    except Exception as exc:
        raise ConversionError(f"Failed to convert document: {exc}") from exc

    messages = [f"{message.type}: {message.message}" for message in result.messages]
    for message in messages:
        logger.debug("mammoth: %s", message)

    return ConversionResult(html=result.value, messages=messages)


async def convert_docx_to_html_async(data: bytes, *, style_map: str | None = None) -> ConversionResult:
    """Run :func:`convert_docx_to_html` in a worker thread."""
    return await asyncio.to_thread(convert_docx_to_html, data, style_map=style_map)
