"""Shared schemas for docx2sections."""

from docx2sections.schemas.ingestion import ConversionResult, IngestionResult
from docx2sections.schemas.sections import SectionNode

__all__ = ["ConversionResult", "IngestionResult", "SectionNode"]
