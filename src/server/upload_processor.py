"""Process an uploaded document into a section tree response."""

from __future__ import annotations

from docx2sections.exceptions import ConversionError, FileReadError
from docx2sections.file_utils import check_upload_size, ensure_docx_filename
from docx2sections.ingestion import ingest_docx
from docx2sections.schemas import SectionNode
from docx2sections.session import (
    PROCESSING_FAILED_MESSAGE,
    READ_FAILED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
)
from docx2sections.utils.logging_config import get_logger
from server.models import IngestErrorResponse, IngestResponse, IngestSuccessResponse
from server.server_config import MAX_DISPLAY_SIZE

# Initialize logger for this module
logger = get_logger(__name__)


async def process_upload(filename: str | None, data: bytes) -> tuple[IngestResponse, int]:
    """Convert an uploaded .docx and group it into sections.

    Parameters
    ----------
    filename : str | None
        Name of the uploaded file.
    data : bytes
        The uploaded file's contents.

    Returns
    -------
    tuple[IngestResponse, int]
        The response model and the HTTP status code to send it with.

    """
    try:
        name = ensure_docx_filename(filename)
        check_upload_size(len(data))
    except FileReadError as exc:
        _print_error(filename, exc, size=len(data))
        return IngestErrorResponse(error=str(exc), notification=READ_FAILED_MESSAGE), 400

    try:
        result = await ingest_docx(data, filename=name)
    except ConversionError as exc:
        _print_error(name, exc, size=len(data))
        return (
            IngestErrorResponse(error=str(exc), notification=PROCESSING_FAILED_MESSAGE),
            422,
        )
    except Exception as exc:
        logger.exception("Unexpected error while processing upload", extra={"upload_name": name})
        return (
            IngestErrorResponse(error=str(exc), notification=UNEXPECTED_ERROR_MESSAGE),
            500,
        )

    _print_success(name, size=len(data), section_count=result.section_count, warnings=len(result.messages))

    sections, truncated = _crop_sections(result.sections, MAX_DISPLAY_SIZE)
    notice = None
    if truncated:
        notice = (
            f"(Content cropped to {int(MAX_DISPLAY_SIZE / 1_000)}k characters, "
            "later sections are listed without their content)"
        )

    return (
        IngestSuccessResponse(
            filename=name,
            section_count=result.section_count,
            tree=result.sections_tree,
            sections=sections,
            messages=result.messages,
            truncated=truncated,
            notice=notice,
        ),
        200,
    )


def _print_error(filename: str | None, exc: Exception, *, size: int) -> None:
    """Log a failed upload.

    Parameters
    ----------
    filename : str | None
        The uploaded file name.
    exc : Exception
        The exception raised while processing.
    size : int
        Payload size in bytes.

    """
    logger.error(
        "Upload processing failed",
        extra={
            "upload_name": filename,
            "size_kb": int(size / 1024),
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
    )


def _print_success(filename: str, *, size: int, section_count: int, warnings: int) -> None:
    """Log a processed upload."""
    logger.info(
        "Upload processed successfully",
        extra={
            "upload_name": filename,
            "size_kb": int(size / 1024),
            "section_count": section_count,
            "converter_warnings": warnings,
        },
    )


def _crop_sections(sections: list[SectionNode], limit: int) -> tuple[list[SectionNode], bool]:
    """Keep section content until ``limit`` characters are used up.

    Sections past the limit keep their title and key but lose their content.

    Parameters
    ----------
    sections : list[SectionNode]
        The grouped sections.
    limit : int
        Maximum number of content characters to return.

    Returns
    -------
    tuple[list[SectionNode], bool]
        The sections to display and whether any content was dropped.

    """
    remaining = limit
    cropped: list[SectionNode] = []
    truncated = False
    for section in sections:
        if len(section.content) <= remaining:
            remaining -= len(section.content)
            cropped.append(section)
            continue
        truncated = True
        remaining = 0
        cropped.append(section.model_copy(update={"content": ""}))
    return cropped, truncated
