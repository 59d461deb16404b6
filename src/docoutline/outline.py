"""Flat navigation outline, section navigator and document statistics."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from docoutline.config import (
    DOCOUTLINE_CODE_BLOCK_MIN_CHARS,
    DOCOUTLINE_CODE_BLOCK_MIN_LINES,
    DOCOUTLINE_SECTION_PREVIEW_CHARS,
    DOCOUTLINE_TABLE_LABEL_MAX_CHARS,
)
from docoutline.ids import collect_ids, ensure_ids
from docoutline.schemas import (
    BaseNode,
    CodeBlockNode,
    DocumentStats,
    DocumentStructure,
    HeadingNode,
    ImageNode,
    OutlineItem,
    OutlineItemType,
    PageBreakNode,
    SectionSummary,
    TableNode,
    TextNode,
    Zone,
)
from docoutline.schemas.outline import (
    HEADING_MARKER_LEVELS,
    MEDIA_MARKER_LEVEL,
    PAGE_BREAK_LEVEL,
)
from docoutline.text_utils import count_words, extract_text
from docoutline.zones import Document, load_document, walk

UNTITLED = "Untitled"
UNTITLED_SECTION = "Untitled Section"


@dataclass
class _OutlineState:
    """Running counters for one outline extraction."""

    items: list[OutlineItem]
    taken: set[str] = field(default_factory=set)
    last_heading_index: int | None = None
    tables: int = 0
    images: int = 0
    code_blocks: int = 0
    page_breaks: int = 0

    def emit(
        self,
        *,
        item_id: str,
        text: str,
        item_type: OutlineItemType,
        level: int,
        zone: Zone,
    ) -> OutlineItem:
        item = OutlineItem(
            id=item_id,
            text=text,
            type=item_type,
            level=level,
            index=len(self.items),
            parent_heading_index=self.last_heading_index,
            zone=zone,
        )
        self.items.append(item)
        if item_type is OutlineItemType.HEADING:
            self.last_heading_index = item.index
        return item

    def fallback_id(self, prefix: str, count: int) -> str:
        """Id for a marker without one, skipping ids already in the document."""
        candidate = f"{prefix}-{count}"
        while candidate in self.taken:
            count += 1
            candidate = f"{prefix}-{count}"
        self.taken.add(candidate)
        return candidate


def is_significant_code(
    text: str,
    *,
    min_lines: int = DOCOUTLINE_CODE_BLOCK_MIN_LINES,
    min_chars: int = DOCOUTLINE_CODE_BLOCK_MIN_CHARS,
) -> bool:
    """Whether a code block is long enough to be listed in the outline."""
    return len(text) > min_chars or len(text.split("\n")) > min_lines


def table_label(node: TableNode, *, max_chars: int = DOCOUTLINE_TABLE_LABEL_MAX_CHARS) -> str | None:
    """Text of the first cell of the first row, when short enough to be a label.

    The length limit applies to the cell text as written, surrounding
    whitespace included.
    """
    if not node.content or not node.content[0].content:
        return None
    text = extract_text(node.content[0].content[0])
    if text.strip() and len(text) < max_chars:
        return text.strip()
    return None


def extract_outline(
    document: Document | Mapping[str, Any],
    *,
    include_code_blocks: bool = True,
    include_page_breaks: bool = True,
) -> list[OutlineItem]:
    """Flatten the document into one ordered navigation list.

    Lists H1-H3 headings, tables, images, code blocks longer than the
    configured thresholds, and page break / horizontal rule markers. Every
    entry shares one running ``index``. Children of every node are visited,
    so an image inside a table cell is listed after its table.
    """
    document = ensure_ids(load_document(document))
    state = _OutlineState(items=[], taken=set(collect_ids(document)))

    for zone, node in walk(document):
        if isinstance(node, HeadingNode):
            if node.level not in HEADING_MARKER_LEVELS:
                continue
            state.emit(
                item_id=node.node_id,
                text=extract_text(node).strip() or UNTITLED,
                item_type=OutlineItemType.HEADING,
                level=node.level,
                zone=zone,
            )
        elif isinstance(node, TableNode):
            state.tables += 1
            state.emit(
                item_id=node.node_id,
                text=table_label(node) or f"Table {state.tables}",
                item_type=OutlineItemType.TABLE,
                level=MEDIA_MARKER_LEVEL,
                zone=zone,
            )
        elif isinstance(node, ImageNode):
            state.images += 1
            label = node.alt.strip() or node.caption.strip()
            state.emit(
                item_id=node.node_id,
                text=label or f"Image {state.images}",
                item_type=OutlineItemType.IMAGE,
                level=MEDIA_MARKER_LEVEL,
                zone=zone,
            )
        elif isinstance(node, CodeBlockNode):
            if not include_code_blocks or not is_significant_code(extract_text(node)):
                continue
            state.code_blocks += 1
            state.emit(
                item_id=node.node_id or state.fallback_id("code", state.code_blocks),
                text=f"Code: {node.language or 'code'}",
                item_type=OutlineItemType.CODE_BLOCK,
                level=MEDIA_MARKER_LEVEL,
                zone=zone,
            )
        elif isinstance(node, PageBreakNode):
            if not include_page_breaks:
                continue
            state.page_breaks += 1
            state.emit(
                item_id=node.node_id or state.fallback_id("pagebreak", state.page_breaks),
                text="Page Break",
                item_type=OutlineItemType.PAGE_BREAK,
                level=PAGE_BREAK_LEVEL,
                zone=zone,
            )
    return state.items


def _top_level_blocks(document: Document) -> tuple[BaseNode, ...]:
    if isinstance(document, DocumentStructure):
        return document.front + document.middle + document.back
    return document.content


def _paragraph_preview(node: BaseNode) -> str:
    if node.type != "paragraph":
        return ""
    return extract_text(node)[:DOCOUTLINE_SECTION_PREVIEW_CHARS]


def extract_sections(document: Document | Mapping[str, Any]) -> list[SectionSummary]:
    """Split the top-level blocks into sections at H1 headings and page breaks.

    For a zone split, blocks of all three regions are indexed as one run.
    A document with blocks but no delimiter is a single ``Document Content``
    section.
    """
    blocks = _top_level_blocks(load_document(document))
    sections: list[SectionSummary] = []
    current: dict[str, Any] | None = None

    for index, node in enumerate(blocks):
        is_h1 = isinstance(node, HeadingNode) and node.level == 1
        is_break = isinstance(node, PageBreakNode)
        if is_h1 or is_break:
            if current is not None:
                current["end_index"] = index - 1
                sections.append(SectionSummary(**current))
            number = len(sections) + 1
            if is_break:
                title = f"Page Break {number}"
            else:
                title = extract_text(node).strip() or UNTITLED_SECTION
            current = {
                "id": f"section-{index}",
                "title": title,
                "type": "pageBreak" if is_break else "heading",
                "preview": "",
                "node_index": index,
                "end_index": len(blocks) - 1,
            }
        elif current is not None and not current["preview"]:
            current["preview"] = _paragraph_preview(node)

    if current is not None:
        sections.append(SectionSummary(**current))

    if not sections and blocks:
        preview = next(
            (text for text in (_paragraph_preview(node) for node in blocks) if text),
            "",
        )
        sections.append(
            SectionSummary(
                id="section-0",
                title="Document Content",
                type="content",
                preview=preview,
                node_index=0,
                end_index=len(blocks) - 1,
            )
        )
    return sections


def get_document_stats(document: Document | Mapping[str, Any]) -> DocumentStats:
    """Count words, characters, headings and paragraphs over every zone."""
    stats = DocumentStats()
    for _, node in walk(document):
        if isinstance(node, HeadingNode):
            stats.headings += 1
        elif isinstance(node, TextNode):
            stats.characters += len(node.text)
        elif node.type == "paragraph":
            stats.paragraphs += 1
        # Words are counted per text block so adjacent blocks do not merge.
        inline = [child.text for child in node.content if isinstance(child, TextNode)]
        if inline:
            stats.words += count_words("".join(inline))
    return stats
