"""Combined analysis output model."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

from docoutline.schemas.nodes import Node
from docoutline.schemas.numbering import CaptionNumbers, HeadingNumber
from docoutline.schemas.outline import DocumentStats, OutlineItem
from docoutline.schemas.structure import DocumentStructure
from docoutline.schemas.toc import TocEntry


class DocumentAnalysis(BaseModel):
    """Everything derived from one document in a single recomputation.

    ``document`` is the input with identifiers assigned; callers persist it
    so the next run keeps the same ids.
    """

    document: Union[Node, DocumentStructure]
    heading_numbers: dict[str, HeadingNumber] = Field(default_factory=dict)
    captions: CaptionNumbers = Field(default_factory=CaptionNumbers)
    outline: list[OutlineItem] = Field(default_factory=list)
    toc: list[TocEntry] = Field(default_factory=list)
    stats: DocumentStats = Field(default_factory=DocumentStats)

    def summary(self) -> str:
        numbered = sum(1 for heading in self.heading_numbers.values() if heading.number)
        lines = [
            f"Headings: {len(self.heading_numbers)}",
            f"Numbered headings: {numbered}",
            f"Figures: {len(self.captions.figures)}",
            f"Tables: {len(self.captions.tables)}",
            f"Outline items: {len(self.outline)}",
            f"TOC entries: {len(self.toc)}",
            f"Words: {self.stats.words}",
        ]
        return "\n".join(lines)
