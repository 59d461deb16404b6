"""Outline and navigation models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from docoutline.schemas.structure import Zone

HEADING_MARKER_LEVELS = (1, 2, 3)
PAGE_BREAK_LEVEL = 0
MEDIA_MARKER_LEVEL = -1


class OutlineItemType(str, Enum):
    """Kinds of entries in the flat outline."""

    HEADING = "heading"
    TABLE = "table"
    IMAGE = "image"
    CODE_BLOCK = "codeBlock"
    PAGE_BREAK = "pageBreak"


class OutlineItem(BaseModel):
    """One entry of the navigation outline.

    Attributes:
        id: Identifier used to scroll to the node.
        text: Display label.
        type: Entry kind.
        level: 1-3 for headings, 0 for page breaks, -1 for tables, images
            and code blocks.
        index: Position in the outline, shared by every entry kind.
        parent_heading_index: ``index`` of the closest heading emitted before
            this entry, None when there is none.
        zone: Zone the node sits in.
    """

    id: str
    text: str
    type: OutlineItemType
    level: int
    index: int
    parent_heading_index: int | None = None
    zone: Zone = Zone.MIDDLE


class SectionSummary(BaseModel):
    """A top-level section delimited by H1 headings or page breaks."""

    id: str
    title: str
    type: str
    preview: str = ""
    node_index: int
    end_index: int


class DocumentStats(BaseModel):
    """Basic document statistics."""

    words: int = 0
    characters: int = 0
    headings: int = 0
    paragraphs: int = 0
