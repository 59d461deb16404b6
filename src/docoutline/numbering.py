"""Hierarchical heading numbering with front/middle/back zones."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from docoutline.ids import ensure_ids
from docoutline.schemas import BaseNode, HeadingNode, HeadingNumber, Zone
from docoutline.text_utils import extract_text
from docoutline.zones import Document, load_document, walk

NUMBERED_LEVELS = (1, 2, 3)
UNNUMBERED_NODE_TYPES = ("coverPage", "frontMatter")


@dataclass
class _HeadingCounters:
    h1: int = 0
    h2: int = 0
    h3: int = 0

    def reset(self) -> None:
        self.h1 = self.h2 = self.h3 = 0

    def advance(self, level: int) -> str:
        """Count a heading and return its dotted number.

        Missing parents are not corrected: an H2 before any H1 is ``0.1``.
        """
        if level == 1:
            self.h1 += 1
            self.h2 = 0
            self.h3 = 0
            return f"{self.h1}"
        if level == 2:
            self.h2 += 1
            self.h3 = 0
            return f"{self.h1}.{self.h2}"
        self.h3 += 1
        return f"{self.h1}.{self.h2}.{self.h3}"


def should_number_heading(zone: Zone) -> bool:
    """Only main content headings carry numbers."""
    return zone is Zone.MIDDLE


def is_non_numbered_zone(node: BaseNode) -> bool:
    """Whether a node opts out of numbering through its own type or attrs.

    Cover pages and front matter blocks, nodes tagged with
    ``attrs.zone`` ``"front"`` or ``"back"``, and nodes with
    ``attrs.noNumber`` set are unnumbered.
    """
    if node.type in UNNUMBERED_NODE_TYPES or node.attrs.get("type") in UNNUMBERED_NODE_TYPES:
        return True
    if node.attrs.get("zone") in (Zone.FRONT.value, Zone.BACK.value):
        return True
    return node.attrs.get("noNumber") is True


def calculate_heading_numbers(
    document: Document | Mapping[str, Any],
) -> dict[str, HeadingNumber]:
    """Number the H1-H3 headings of the document.

    Counters start at zero when the middle zone begins and are only touched
    by middle zone headings. Front and back matter headings, H4 and deeper,
    and headings flagged by :func:`is_non_numbered_zone` are returned too
    with an empty number, so callers can look up any heading id. Numbering
    follows pre-order encounter order through every node, whatever its type.

    Returns:
        Heading id -> number, in document order. Headings without an id are
        keyed by the id :func:`docoutline.ids.ensure_ids` would give them.
    """
    document = ensure_ids(load_document(document))
    counters = _HeadingCounters()
    numbers: dict[str, HeadingNumber] = {}
    current_zone: Zone | None = None

    for zone, node in walk(document):
        if zone is not current_zone:
            if zone is Zone.MIDDLE:
                counters.reset()
            current_zone = zone
        if not isinstance(node, HeadingNode):
            continue
        level = node.level
        if level is None or level < 1:
            continue

        numbered = (
            level in NUMBERED_LEVELS
            and should_number_heading(zone)
            and not is_non_numbered_zone(node)
        )
        number = counters.advance(level) if numbered else ""
        numbers[node.node_id] = HeadingNumber(
            id=node.node_id,
            level=level,
            number=number,
            text=extract_text(node).strip(),
            zone=zone,
        )
    return numbers


def get_numbered_headings(document: Document | Mapping[str, Any]) -> list[HeadingNumber]:
    """Main content headings that received a number, in document order."""
    return [
        heading
        for heading in calculate_heading_numbers(document).values()
        if heading.zone is Zone.MIDDLE and heading.number
    ]


def get_heading_number(heading_id: str, document: Document | Mapping[str, Any]) -> str:
    heading = calculate_heading_numbers(document).get(heading_id)
    return heading.number if heading else ""


def format_heading_number(number: str) -> str:
    """Format a number as a heading prefix, e.g. ``"1.2. "``."""
    return f"{number}. " if number else ""
