"""Local configuration for docx2sections."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_MAX_UPLOAD_BYTES = 0
DEFAULT_INCLUDE_HEADINGS = "false"
DOCX_SUFFIX = ".docx"

# 0 disables the upload size check.
DOCX2SECTIONS_MAX_UPLOAD_BYTES = int(os.getenv("DOCX2SECTIONS_MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES)))
DOCX2SECTIONS_INCLUDE_HEADINGS = (
    os.getenv("DOCX2SECTIONS_INCLUDE_HEADINGS", DEFAULT_INCLUDE_HEADINGS).lower() in {"1", "true", "yes"}
)
_style_map_path = os.getenv("DOCX2SECTIONS_STYLE_MAP_PATH")
DOCX2SECTIONS_STYLE_MAP_PATH = Path(_style_map_path).expanduser().resolve() if _style_map_path else None
