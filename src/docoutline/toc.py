"""Depth-filtered table of contents and Markdown listings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from docoutline.captions import format_caption
from docoutline.config import DOCOUTLINE_TOC_DEPTH
from docoutline.exceptions import InvalidDepthError
from docoutline.numbering import calculate_heading_numbers
from docoutline.schemas import CaptionInfo, HeadingNumber, TocEntry, TocOptions, Zone
from docoutline.zones import Document

TOC_DEPTHS = (1, 2, 3)


def _check_depth(depth: int) -> int:
    if isinstance(depth, bool) or depth not in TOC_DEPTHS:
        raise InvalidDepthError(f"TOC depth must be 1, 2 or 3, got {depth!r}")
    return depth


def build_toc(headings: Iterable[HeadingNumber], depth: int = DOCOUTLINE_TOC_DEPTH) -> list[TocEntry]:
    """Keep numbered main content headings up to ``depth``, in original order.

    Raises:
        InvalidDepthError: If ``depth`` is not 1, 2 or 3.
    """
    depth = _check_depth(depth)
    return [
        TocEntry(id=heading.id, level=heading.level, number=heading.number, text=heading.text)
        for heading in headings
        if heading.zone is Zone.MIDDLE and heading.number and heading.level <= depth
    ]


def generate_toc(
    document: Document | Mapping[str, Any],
    depth: int = DOCOUTLINE_TOC_DEPTH,
) -> list[TocEntry]:
    """Number the document's headings and build its table of contents."""
    _check_depth(depth)
    return build_toc(calculate_heading_numbers(document).values(), depth)


def render_toc_markdown(entries: list[TocEntry], options: TocOptions | None = None) -> str:
    """Render TOC entries as an indented Markdown list under a heading."""
    opts = options or TocOptions()
    lines: list[str] = []
    for entry in entries:
        if entry.level > opts.depth:
            continue
        prefix = "  " * (entry.level - 1) + "- "
        label = f"{entry.number} {entry.text}" if opts.include_numbers else entry.text
        if entry.page is not None:
            label = f"{label} ({entry.page})"
        lines.append(prefix + label.strip())
    if not lines:
        return ""
    return f"## {opts.title}\n" + "\n".join(lines)


def render_caption_list_markdown(captions: list[CaptionInfo], title: str) -> str:
    """Render a list of figures or tables, e.g. ``- Figure 1: Overview``."""
    if not captions:
        return ""
    lines = [f"- {format_caption(info)}" for info in captions]
    return f"## {title}\n" + "\n".join(lines)
