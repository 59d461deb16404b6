"""Sequential numbering of captioned figures and tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from docoutline.ids import ensure_ids
from docoutline.schemas import (
    CaptionInfo,
    CaptionNumbers,
    CaptionType,
    ImageNode,
    NodeKind,
    TableNode,
)
from docoutline.zones import Document, load_document, walk


def figure_caption_text(node: ImageNode) -> str:
    """Caption of an image, falling back to its alt text."""
    caption = node.caption.strip()
    return caption or node.alt.strip()


def table_caption_text(node: TableNode) -> str:
    return node.caption.strip()


def calculate_captions(document: Document | Mapping[str, Any]) -> CaptionNumbers:
    """Number figures and tables that carry caption text.

    A figure is an image with a caption or alt text; a table needs an explicit
    ``caption`` attribute. Nodes without caption text are skipped and do not
    advance either counter. Both counters run across the whole document, all
    zones included.
    """
    document = ensure_ids(load_document(document))
    result = CaptionNumbers()

    for position, (zone, node) in enumerate(walk(document)):
        if isinstance(node, ImageNode):
            caption = figure_caption_text(node)
            if not caption:
                continue
            info = CaptionInfo(
                id=node.node_id,
                type=CaptionType.FIGURE,
                number=len(result.figures) + 1,
                caption=caption,
                position=position,
                zone=zone,
            )
            result.figures.append(info)
            result.figure_numbers[info.id] = info.number
        elif isinstance(node, TableNode):
            caption = table_caption_text(node)
            if not caption:
                continue
            info = CaptionInfo(
                id=node.node_id,
                type=CaptionType.TABLE,
                number=len(result.tables) + 1,
                caption=caption,
                position=position,
                zone=zone,
            )
            result.tables.append(info)
            result.table_numbers[info.id] = info.number
    return result


def get_all_figures(document: Document | Mapping[str, Any]) -> list[CaptionInfo]:
    return calculate_captions(document).figures


def get_all_tables(document: Document | Mapping[str, Any]) -> list[CaptionInfo]:
    return calculate_captions(document).tables


def get_figure_number(figure_id: str, document: Document | Mapping[str, Any]) -> int | None:
    return calculate_captions(document).figure_numbers.get(figure_id)


def get_table_number(table_id: str, document: Document | Mapping[str, Any]) -> int | None:
    return calculate_captions(document).table_numbers.get(table_id)


def format_caption(info: CaptionInfo) -> str:
    """Format a caption for display, e.g. ``"Figure 1: Architecture"``."""
    if info.type is CaptionType.FIGURE:
        return format_figure_caption(info.number, info.caption)
    return format_table_caption(info.number, info.caption)


def format_figure_caption(number: int, caption: str) -> str:
    return f"Figure {number}: {caption}"


def format_table_caption(number: int, caption: str) -> str:
    return f"Table {number}: {caption}"


def should_have_caption(kind: NodeKind) -> bool:
    return kind in (NodeKind.IMAGE, NodeKind.TABLE)

