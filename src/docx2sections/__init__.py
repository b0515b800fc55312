"""docx2sections: group .docx documents into titled, collapsible sections."""

from docx2sections.converter import convert_docx_to_html
from docx2sections.exceptions import (
    ConversionError,
    Docx2sectionsError,
    FileReadError,
    UnexpectedError,
    UnsupportedFileTypeError,
)
from docx2sections.ingestion import ingest_docx
from docx2sections.schemas import ConversionResult, IngestionResult, SectionNode
from docx2sections.sections import GroupingOptions, group_sections
from docx2sections.session import DocumentSession

__all__ = [
    "ConversionError",
    "ConversionResult",
    "Docx2sectionsError",
    "DocumentSession",
    "FileReadError",
    "GroupingOptions",
    "IngestionResult",
    "SectionNode",
    "UnexpectedError",
    "UnsupportedFileTypeError",
    "convert_docx_to_html",
    "group_sections",
    "ingest_docx",
]
