"""Test setup for docx2sections."""

from __future__ import annotations

import io
import sys
import zipfile
from pathlib import Path
from typing import Callable, Sequence
from xml.sax.saxutils import escape

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

_W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
_R_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
_PKG_REL_NS = "http://schemas.openxmlformats.org/package/2006/relationships"

_CONTENT_TYPES = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">
  <Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>
  <Default Extension="xml" ContentType="application/xml"/>
  <Override PartName="/word/document.xml" ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>
  <Override PartName="/word/numbering.xml" ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.numbering+xml"/>
</Types>"""

_PACKAGE_RELS = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="{_PKG_REL_NS}">
  <Relationship Id="rId1" Type="{_R_NS}/officeDocument" Target="word/document.xml"/>
</Relationships>"""

_DOCUMENT_RELS = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="{_PKG_REL_NS}">
  <Relationship Id="rId1" Type="{_R_NS}/numbering" Target="numbering.xml"/>
</Relationships>"""

_NUMBERING = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<w:numbering xmlns:w="{_W_NS}">
  <w:abstractNum w:abstractNumId="0">
    <w:lvl w:ilvl="0"><w:start w:val="1"/><w:numFmt w:val="decimal"/></w:lvl>
  </w:abstractNum>
  <w:num w:numId="1"><w:abstractNumId w:val="0"/></w:num>
</w:numbering>"""

# (text, bold, in_list)
Paragraph = tuple[str, bool, bool]


def build_docx(paragraphs: Sequence[Paragraph]) -> bytes:
    """Build a minimal .docx package in memory."""
    body = "".join(_paragraph_xml(text, bold, in_list) for text, bold, in_list in paragraphs)
    document = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{_W_NS}" xmlns:r="{_R_NS}"><w:body>{body}</w:body></w:document>'
    )
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        archive.writestr("[Content_Types].xml", _CONTENT_TYPES)
        archive.writestr("_rels/.rels", _PACKAGE_RELS)
        archive.writestr("word/_rels/document.xml.rels", _DOCUMENT_RELS)
        archive.writestr("word/numbering.xml", _NUMBERING)
        archive.writestr("word/document.xml", document)
    return buffer.getvalue()


def _paragraph_xml(text: str, bold: bool, in_list: bool) -> str:
    ppr = '<w:pPr><w:numPr><w:ilvl w:val="0"/><w:numId w:val="1"/></w:numPr></w:pPr>' if in_list else ""
    rpr = "<w:rPr><w:b/></w:rPr>" if bold else ""
    return f'<w:p>{ppr}<w:r>{rpr}<w:t xml:space="preserve">{escape(text)}</w:t></w:r></w:p>'


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests that convert real .docx packages end to end",
    )


@pytest.fixture
def make_docx() -> Callable[[Sequence[Paragraph]], bytes]:
    """Factory building .docx bytes from (text, bold, in_list) tuples."""
    return build_docx


@pytest.fixture
def article_docx() -> bytes:
    """A document with a preamble and two titled sections."""
    return build_docx(
        [
            ("Preamble text", False, False),
            ("Introduction", True, True),
            ("First paragraph.", False, False),
            ("Second paragraph.", False, False),
            ("Methods", True, True),
            ("Method details.", False, False),
        ]
    )
