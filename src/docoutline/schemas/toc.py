"""Table of contents models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from docoutline.config import DOCOUTLINE_TOC_DEPTH


class TocEntry(BaseModel):
    """A table of contents line.

    ``page`` is filled in by an external paginator, never by docoutline.
    """

    id: str
    level: Literal[1, 2, 3]
    number: str
    text: str
    page: int | None = None


class TocOptions(BaseModel):
    """Display settings for a table of contents block."""

    depth: int = Field(default=DOCOUTLINE_TOC_DEPTH, ge=1, le=3)
    title: str = "Table of Contents"
    include_numbers: bool = True
