"""Pydantic models for the ingest API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

from docx2sections.schemas import SectionNode


class IngestSuccessResponse(BaseModel):
    """Success response model for the /api/ingest endpoint.

    Attributes
    ----------
    filename : str
        Name of the uploaded document.
    section_count : int
        Number of sections found.
    tree : str
        Plain-text tree of section titles.
    sections : list[SectionNode]
        The titled sections with their HTML content.
    messages : list[str]
        Warnings reported by the converter.
    truncated : bool
        Whether section content was cropped to the display limit.
    notice : str | None
        Explanation shown when content was cropped.

    """

    filename: str = Field(..., description="Uploaded file name")
    section_count: int = Field(..., description="Number of sections found")
    tree: str = Field(..., description="Section tree structure")
    sections: list[SectionNode] = Field(default_factory=list, description="Titled sections")
    messages: list[str] = Field(default_factory=list, description="Converter warnings")
    truncated: bool = Field(default=False, description="Section content cropped")
    notice: str | None = Field(default=None, description="Cropping notice")


class IngestErrorResponse(BaseModel):
    """Error response model for the /api/ingest endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    notification : str
        Localized message suitable for display to the user.

    """

    error: str = Field(..., description="Error message")
    notification: str = Field(..., description="User-facing message")


# Union type for API responses
IngestResponse = Union[IngestSuccessResponse, IngestErrorResponse]
