"""Ingestion pipeline for .docx -> titled sections."""

from __future__ import annotations

from docx2sections.converter import convert_docx_to_html_async, load_style_map
from docx2sections.exceptions import ConversionError, UnexpectedError
from docx2sections.html_utils import parse_top_level_elements
from docx2sections.output_formatter import format_sections_tree
from docx2sections.schemas import IngestionResult
from docx2sections.sections import GroupingOptions, count_sections, group_sections


async def ingest_docx(
    data: bytes,
    *,
    filename: str | None = None,
    options: GroupingOptions | None = None,
    style_map: str | None = None,
) -> IngestionResult:
    """Convert a document and group its top-level elements into sections.

    Args:
        data: Raw .docx bytes.
        filename: Name shown alongside the result.
        options: Grouping options. Uses defaults if None.
        style_map: Mammoth style map. Falls back to the configured file.

    Returns:
        The section list together with a plain-text tree and the
        converter's warnings.

    Raises:
        ConversionError: If the document cannot be converted or parsed.
        UnexpectedError: If grouping or formatting the parsed elements fails.
    """
    conversion = await convert_docx_to_html_async(data, style_map=style_map or load_style_map())

    try:
        elements = parse_top_level_elements(conversion.html)
    except Exception as exc:
        raise ConversionError(f"Failed to parse converted HTML: {exc}") from exc

    try:
        sections = group_sections(elements, options=options)
        sections_tree = format_sections_tree(sections)
    except Exception as exc:
        raise UnexpectedError(f"Failed to group sections: {exc}") from exc

    return IngestionResult(
        filename=filename,
        sections=sections,
        section_count=count_sections(sections),
        sections_tree=sections_tree,
        messages=conversion.messages,
    )
