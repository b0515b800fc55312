"""Render section trees as plain text and as collapsible HTML."""

from __future__ import annotations

from html import escape
from typing import AbstractSet

from docx2sections.schemas import SectionNode


def format_sections_tree(sections: list[SectionNode]) -> str:
    """Create an indented plain-text tree of section titles."""
    return "Sections:\n" + _create_sections_tree(sections)


def render_sections_html(
    sections: list[SectionNode],
    open_keys: AbstractSet[str] = frozenset(),
) -> str:
    """Expand the tree into nested ``<details>`` widgets.

    A section is rendered open when its key is in ``open_keys``. The
    section content is inserted as-is; it is converter output, not user
    text.
    """
    return "".join(_render_section(section, open_keys) for section in sections)


def _render_section(section: SectionNode, open_keys: AbstractSet[str]) -> str:
    open_attr = " open" if section.key in open_keys else ""
    parts = [
        f'<div class="section">'
        f'<details data-section-key="{escape(section.key)}"{open_attr}>'
        f'<summary class="section-title">{escape(section.title)}</summary>'
        f'<div class="section-body">'
    ]
    if section.content:
        parts.append(f'<div class="prose">{section.content}</div>')
    if section.children:
        parts.append('<div class="section-children">')
        parts.extend(_render_section(child, open_keys) for child in section.children)
        parts.append("</div>")
    parts.append("</div></details></div>")
    return "".join(parts)


def _create_sections_tree(sections: list[SectionNode], indent: int = 0) -> str:
    lines: list[str] = []
    for section in sections:
        lines.append(" " * (indent * 4) + section.title)
        if section.children:
            lines.append(_create_sections_tree(section.children, indent + 1))
    return "\n".join(lines)
