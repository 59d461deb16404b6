"""Heading and caption numbering models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from docoutline.schemas.structure import Zone


class HeadingNumber(BaseModel):
    """Number assigned to one heading.

    ``number`` is empty for headings outside the middle zone and for H4 and
    deeper headings.
    """

    id: str
    level: int = Field(..., ge=1)
    number: str
    text: str = ""
    zone: Zone


class CaptionType(str, Enum):
    """Kinds of captioned floats."""

    FIGURE = "figure"
    TABLE = "table"


class CaptionInfo(BaseModel):
    """A numbered figure or table.

    Attributes:
        id: Node identifier.
        type: Figure or table.
        number: 1-based sequence number within its type.
        caption: Caption text (for figures, the alt text when no caption).
        position: 0-based pre-order offset of the node in the document.
        zone: Zone the node sits in.
    """

    id: str
    type: CaptionType
    number: int = Field(..., ge=1)
    caption: str
    position: int = Field(..., ge=0)
    zone: Zone = Zone.MIDDLE


class CaptionNumbers(BaseModel):
    """Figure and table captions in document order with id lookups."""

    figures: list[CaptionInfo] = Field(default_factory=list)
    tables: list[CaptionInfo] = Field(default_factory=list)
    figure_numbers: dict[str, int] = Field(default_factory=dict)
    table_numbers: dict[str, int] = Field(default_factory=dict)
