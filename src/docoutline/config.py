"""Local configuration for docoutline."""

from __future__ import annotations

import os


DEFAULT_TOC_DEPTH = 3
DEFAULT_CODE_BLOCK_MIN_LINES = 3
DEFAULT_CODE_BLOCK_MIN_CHARS = 50
DEFAULT_TABLE_LABEL_MAX_CHARS = 50
DEFAULT_SECTION_PREVIEW_CHARS = 100

DOCOUTLINE_TOC_DEPTH = int(os.getenv("DOCOUTLINE_TOC_DEPTH", str(DEFAULT_TOC_DEPTH)))
# Code blocks must exceed one of these thresholds to show up in the outline.
DOCOUTLINE_CODE_BLOCK_MIN_LINES = int(
    os.getenv("DOCOUTLINE_CODE_BLOCK_MIN_LINES", str(DEFAULT_CODE_BLOCK_MIN_LINES))
)
DOCOUTLINE_CODE_BLOCK_MIN_CHARS = int(
    os.getenv("DOCOUTLINE_CODE_BLOCK_MIN_CHARS", str(DEFAULT_CODE_BLOCK_MIN_CHARS))
)
DOCOUTLINE_TABLE_LABEL_MAX_CHARS = int(
    os.getenv("DOCOUTLINE_TABLE_LABEL_MAX_CHARS", str(DEFAULT_TABLE_LABEL_MAX_CHARS))
)
DOCOUTLINE_SECTION_PREVIEW_CHARS = int(
    os.getenv("DOCOUTLINE_SECTION_PREVIEW_CHARS", str(DEFAULT_SECTION_PREVIEW_CHARS))
)
