"""Plain-text helpers for content tree nodes."""

from __future__ import annotations

from docoutline.schemas import BaseNode, TextNode


def extract_text(node: BaseNode) -> str:
    """Concatenate the text of every text node under ``node``."""
    if isinstance(node, TextNode):
        return node.text
    return "".join(extract_text(child) for child in node.content)


def count_words(text: str) -> int:
    return len(text.split())
