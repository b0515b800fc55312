"""Server configuration."""

from __future__ import annotations

import os

DEFAULT_MAX_DISPLAY_SIZE = 300_000

# Upper bound, in characters, on section HTML returned by the ingest API.
MAX_DISPLAY_SIZE = int(os.getenv("DOCX2SECTIONS_MAX_DISPLAY_SIZE", str(DEFAULT_MAX_DISPLAY_SIZE)))
