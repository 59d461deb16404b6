"""Stable identifier assignment for headings, figures and tables."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from docoutline.schemas import BaseNode, DocumentStructure, NodeKind
from docoutline.zones import Document, load_document, walk

logger = logging.getLogger(__name__)

ID_PREFIXES: dict[NodeKind, str] = {
    NodeKind.HEADING: "heading",
    NodeKind.IMAGE: "figure",
    NodeKind.TABLE: "table",
}


@dataclass
class _IdAllocator:
    """Per-type counters for one ID assignment pass."""

    taken: set[str]
    counters: dict[NodeKind, int] = field(default_factory=dict)
    assigned: int = 0

    def next_id(self, kind: NodeKind) -> str:
        prefix = ID_PREFIXES[kind]
        count = self.counters.get(kind, 0)
        candidate = ""
        while not candidate or candidate in self.taken:
            count += 1
            candidate = f"{prefix}-{count}"
        self.counters[kind] = count
        self.taken.add(candidate)
        self.assigned += 1
        return candidate


def collect_ids(document: Document | Mapping[str, Any]) -> list[str]:
    """Return every node identifier in document order."""
    return [node.node_id for _, node in walk(document) if node.node_id is not None]


def ensure_ids(document: Document | Mapping[str, Any]) -> Document:
    """Give every heading, image and table without an id a generated one.

    Ids come from per-type counters (``heading-1``, ``figure-2``,
    ``table-1``...) advanced in document order, only for nodes that still
    lack an id. Existing ids are kept verbatim and generated ids never reuse
    one already present, so running the pass again on its own output
    returns an equal document. The input is never modified; untouched
    subtrees are shared with the result.
    """
    document = load_document(document)
    allocator = _IdAllocator(taken=set(collect_ids(document)))

    if isinstance(document, DocumentStructure):
        result: Document = document.model_copy(
            update={
                "front": _assign_all(document.front, allocator),
                "middle": _assign_all(document.middle, allocator),
                "back": _assign_all(document.back, allocator),
            }
        )
    else:
        result = _assign(document, allocator)

    if allocator.assigned:
        logger.debug("Assigned %d node ids", allocator.assigned)
    return result


def _assign_all(nodes: tuple[BaseNode, ...], allocator: _IdAllocator) -> tuple[BaseNode, ...]:
    return tuple(_assign(node, allocator) for node in nodes)


def _assign(node: BaseNode, allocator: _IdAllocator) -> BaseNode:
    updated = node
    if node.kind in ID_PREFIXES and node.node_id is None:
        updated = node.with_attrs(id=allocator.next_id(node.kind))

    children = _assign_all(node.content, allocator)
    if any(new is not old for new, old in zip(children, node.content)):
        updated = updated.with_content(children)
    return updated
