"""Tests for file reading utilities."""

from __future__ import annotations

from pathlib import Path

import pytest

from docx2sections.exceptions import FileReadError, UnsupportedFileTypeError
from docx2sections.file_utils import check_upload_size, ensure_docx_filename, read_docx_bytes


class TestEnsureDocxFilename:
    """Tests for ensure_docx_filename."""

    @pytest.mark.parametrize("name", ["paper.docx", "PAPER.DOCX", "dir/sub/paper.docx"])
    def test_accepts_docx(self, name: str) -> None:
        assert ensure_docx_filename(name) == Path(name).name

    @pytest.mark.parametrize("name", ["paper.doc", "paper.pdf", "docx", "", None])
    def test_rejects_other_names(self, name: str | None) -> None:
        with pytest.raises(UnsupportedFileTypeError, match="Only .docx"):
            ensure_docx_filename(name)

    def test_unsupported_type_is_a_read_error(self) -> None:
        assert issubclass(UnsupportedFileTypeError, FileReadError)


class TestCheckUploadSize:
    """Tests for check_upload_size."""

    def test_zero_limit_accepts_anything(self) -> None:
        check_upload_size(10**9, max_bytes=0)

    def test_within_limit(self) -> None:
        check_upload_size(100, max_bytes=100)

    def test_over_limit_raises(self) -> None:
        with pytest.raises(FileReadError, match="limit is 100 bytes"):
            check_upload_size(101, max_bytes=100)


class TestReadDocxBytes:
    """Tests for read_docx_bytes."""

    @pytest.mark.asyncio
    async def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "paper.docx"
        path.write_bytes(b"PK\x03\x04 content")

        assert await read_docx_bytes(path) == b"PK\x03\x04 content"

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileReadError, match="Cannot read"):
            await read_docx_bytes(tmp_path / "missing.docx")

    @pytest.mark.asyncio
    async def test_wrong_suffix_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        with pytest.raises(UnsupportedFileTypeError):
            await read_docx_bytes(path)
