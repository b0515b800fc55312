"""Section tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SectionNode(BaseModel):
    """A titled section and the HTML collected under it."""

    title: str
    key: str
    content: str = ""
    children: list["SectionNode"] = Field(default_factory=list)
