"""Zone classification and document traversal."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Union

from docoutline.schemas import BaseNode, DocumentStructure, Zone, parse_node

Document = Union[BaseNode, DocumentStructure]

_ZONE_ORDER = (Zone.FRONT, Zone.MIDDLE, Zone.BACK)
_ZONE_KEYS = frozenset(zone.value for zone in _ZONE_ORDER)


def load_document(raw: Document | Mapping[str, Any]) -> Document:
    """Parse a raw tree or a ``{front, middle, back}`` split.

    A mapping without a ``type`` key whose keys include a zone name is read
    as an explicit split; anything else is a single tree.
    """
    if isinstance(raw, (BaseNode, DocumentStructure)):
        return raw
    if isinstance(raw, Mapping) and "type" not in raw and _ZONE_KEYS & set(raw):
        regions = {
            key: tuple(parse_node(node) for node in raw.get(key) or ())
            for key in _ZONE_KEYS
        }
        return DocumentStructure(**regions)
    return parse_node(raw)


def iter_zones(document: Document | Mapping[str, Any]) -> Iterator[tuple[Zone, tuple[BaseNode, ...]]]:
    """Yield ``(zone, nodes)`` regions in document order.

    Without an explicit split the whole tree is main content.
    """
    document = load_document(document)
    if isinstance(document, DocumentStructure):
        for zone in _ZONE_ORDER:
            nodes = document.region(zone)
            if nodes:
                yield zone, nodes
        return
    yield Zone.MIDDLE, (document,)


def walk(document: Document | Mapping[str, Any]) -> Iterator[tuple[Zone, BaseNode]]:
    """Depth-first, pre-order traversal of every node with its zone."""
    for zone, nodes in iter_zones(document):
        for node in nodes:
            yield from _walk_node(zone, node)


def _walk_node(zone: Zone, node: BaseNode) -> Iterator[tuple[Zone, BaseNode]]:
    yield zone, node
    for child in node.content:
        yield from _walk_node(zone, child)


def zone_of(document: Document | Mapping[str, Any], node_id: str) -> Zone | None:
    """Zone of the first node carrying ``node_id``."""
    for zone, node in walk(document):
        if node.node_id == node_id:
            return zone
    return None


def split_by_markers(
    root: BaseNode | Mapping[str, Any],
    *,
    front_matter_end: int | None = None,
    back_matter_start: int | None = None,
) -> DocumentStructure:
    """Split a flat document into zones using block index markers.

    Args:
        root: Document whose top-level blocks are split.
        front_matter_end: Index of the last front matter block, if any.
        back_matter_start: Index of the first back matter block, if any.

    Returns:
        The blocks grouped into front, middle and back regions.
    """
    blocks = parse_node(root).content
    front_stop = 0 if front_matter_end is None else max(0, min(front_matter_end + 1, len(blocks)))
    back_start = len(blocks) if back_matter_start is None else max(front_stop, min(back_matter_start, len(blocks)))
    return DocumentStructure(
        front=blocks[:front_stop],
        middle=blocks[front_stop:back_start],
        back=blocks[back_start:],
    )
