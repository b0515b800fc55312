"""Conversion and ingestion output models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from docx2sections.schemas.sections import SectionNode


class ConversionResult(BaseModel):
    """HTML produced from a document, with the converter's warnings."""

    html: str
    messages: list[str] = Field(default_factory=list)


class IngestionResult(BaseModel):
    """Final ingestion output."""

    filename: str | None = None
    sections: list[SectionNode] = Field(default_factory=list)
    section_count: int = 0
    sections_tree: str = ""
    messages: list[str] = Field(default_factory=list)
