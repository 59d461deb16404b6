"""Shared schemas for docoutline."""

from docoutline.schemas.analysis import DocumentAnalysis
from docoutline.schemas.nodes import (
    BaseNode,
    CodeBlockNode,
    ContainerNode,
    HeadingNode,
    ImageNode,
    Node,
    NodeKind,
    PageBreakNode,
    TableNode,
    TextNode,
    dump_node,
    parse_node,
)
from docoutline.schemas.numbering import CaptionInfo, CaptionNumbers, CaptionType, HeadingNumber
from docoutline.schemas.outline import DocumentStats, OutlineItem, OutlineItemType, SectionSummary
from docoutline.schemas.structure import DocumentStructure, Zone
from docoutline.schemas.toc import TocEntry, TocOptions

__all__ = [
    "BaseNode",
    "CaptionInfo",
    "CaptionNumbers",
    "CaptionType",
    "CodeBlockNode",
    "ContainerNode",
    "DocumentAnalysis",
    "DocumentStats",
    "DocumentStructure",
    "HeadingNode",
    "HeadingNumber",
    "ImageNode",
    "Node",
    "NodeKind",
    "OutlineItem",
    "OutlineItemType",
    "PageBreakNode",
    "SectionSummary",
    "TableNode",
    "TextNode",
    "TocEntry",
    "TocOptions",
    "Zone",
    "dump_node",
    "parse_node",
]
