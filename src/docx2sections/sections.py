"""Group top-level document elements into titled sections."""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from typing import Iterable

from bs4.element import Tag

from docx2sections.config import DOCX2SECTIONS_INCLUDE_HEADINGS
from docx2sections.schemas import SectionNode

_HEADING_RE = re.compile(r"^h[1-6]$")
_KEY_LENGTH = 12


@dataclass
class GroupingOptions:
    """Options for section grouping.

    Attributes:
        include_headings: If True, ``h1``-``h6`` elements also start a new
            section. By default only bold text inside a list item does.
    """

    include_headings: bool = DOCX2SECTIONS_INCLUDE_HEADINGS


def find_title(element: Tag, *, include_headings: bool = False) -> str | None:
    """Return the section title an element introduces, or None.

    Only the element's first ``<strong>`` is considered, and it counts only
    when it sits inside an ``<li>``.
    """
    bold = element.find("strong")
    if bold is not None and bold.find_parent("li") is not None:
        return bold.get_text()
    if include_headings and _HEADING_RE.match(element.name or ""):
        return element.get_text(" ", strip=True)
    return None


def section_key(title: str, index: int) -> str:
    """Build a stable identifier for the section at ``index`` titled ``title``."""
    digest = hashlib.sha1(f"{index}:{title}".encode("utf-8")).hexdigest()
    return digest[:_KEY_LENGTH]


def group_sections(
    elements: Iterable[Tag],
    *,
    options: GroupingOptions | None = None,
) -> list[SectionNode]:
    """Bucket elements under the most recent title element.

    Elements seen before the first title are dropped. The content of each
    section is the concatenated outer HTML of the elements that follow its
    title, up to the next title.
    """
    opts = options or GroupingOptions()
    sections: list[SectionNode] = []
    current: SectionNode | None = None
    buffer: list[str] = []

    for element in elements:
        title = find_title(element, include_headings=opts.include_headings)
        if title is not None:
            if current is not None:
                current.content = "".join(buffer)
                buffer = []
            current = SectionNode(title=title, key=section_key(title, len(sections)))
            sections.append(current)
        elif current is not None:
            buffer.append(str(element))

    if current is not None:
        current.content = "".join(buffer)

    return sections


def count_sections(sections: Iterable[SectionNode]) -> int:
    """Count total sections in the tree."""
    total = 0
    for section in sections:
        total += 1
        total += count_sections(section.children)
    return total
