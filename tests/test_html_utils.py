"""Tests for HTML utilities."""

from __future__ import annotations

from docx2sections.html_utils import parse_top_level_elements


def test_returns_top_level_elements_in_order() -> None:
    elements = parse_top_level_elements("<p>a</p><ol><li>b</li></ol><h1>c</h1>")
    assert [element.name for element in elements] == ["p", "ol", "h1"]


def test_skips_text_and_comments() -> None:
    elements = parse_top_level_elements("<p>a</p>\n  <!-- note -->\n<p>b</p>")
    assert [element.get_text() for element in elements] == ["a", "b"]


def test_nested_elements_are_not_flattened() -> None:
    elements = parse_top_level_elements("<div><p>inner</p></div>")
    assert len(elements) == 1
    assert str(elements[0]) == "<div><p>inner</p></div>"


def test_empty_html_yields_nothing() -> None:
    assert parse_top_level_elements("") == []
