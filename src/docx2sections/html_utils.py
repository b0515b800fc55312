"""Shared HTML utilities for converted document processing."""

from __future__ import annotations

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def find_document_root(soup: BeautifulSoup) -> Tag:
    """Find the element whose children are the document's top-level blocks.

    The converter emits a body fragment, which the parser wraps in
    ``<html><body>``. Falls back to the soup itself when there is no body
    (e.g. empty input).
    """
    if soup.body:
        return soup.body
    return soup


def parse_top_level_elements(html: str) -> list[Tag]:
    """Parse an HTML string and return its top-level elements in document order.

    Text nodes, comments and whitespace between elements are skipped, so the
    result matches what a browser exposes as ``document.body.children``.
    """
    soup = BeautifulSoup(html, "lxml")
    root = find_document_root(soup)
    return [child for child in root.children if isinstance(child, Tag)]
