"""Tests for logging configuration helpers."""

from __future__ import annotations

import logging

from docx2sections.utils.logging_config import ContextFormatter, get_logger


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("server.test", logging.INFO, __file__, 1, "Upload processed", (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_extra_context() -> None:
    formatter = ContextFormatter("%(message)s%(context)s")

    line = formatter.format(_record(upload_name="a.docx", section_count=2))

    assert line == "Upload processed section_count=2 upload_name='a.docx'"


def test_formatter_without_extra_is_plain() -> None:
    formatter = ContextFormatter("%(message)s%(context)s")
    assert formatter.format(_record()) == "Upload processed"


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("server.example").name == "server.example"
