"""Tests for heading numbering."""

from __future__ import annotations

import pytest

from builders import doc, heading, paragraph
from docoutline.ids import ensure_ids
from docoutline.numbering import (
    calculate_heading_numbers,
    format_heading_number,
    get_heading_number,
    get_numbered_headings,
    is_non_numbered_zone,
    should_number_heading,
)
from docoutline.schemas import Zone, parse_node


def _numbers(*levels: int) -> list[str]:
    document = doc(*(heading(level, f"H{level}") for level in levels))
    return [h.number for h in calculate_heading_numbers(document).values()]


class TestCalculateHeadingNumbers:
    """Tests for calculate_heading_numbers."""

    def test_mixed_sequence_with_zero_prefix(self) -> None:
        """An H3 straight after an H1 keeps a zero for the missing H2."""
        assert _numbers(1, 2, 2, 1, 3) == ["1", "1.1", "1.2", "2", "2.0.1"]

    @pytest.mark.parametrize(
        ("levels", "expected"),
        [
            ((1, 2, 3, 3, 2, 3), ["1", "1.1", "1.1.1", "1.1.2", "1.2", "1.2.1"]),
            ((1, 2, 3, 1, 2, 3), ["1", "1.1", "1.1.1", "2", "2.1", "2.1.1"]),
            ((2, 2, 1), ["0.1", "0.2", "1"]),
            ((3,), ["0.0.1"]),
            ((1, 3, 3, 2), ["1", "1.0.1", "1.0.2", "1.1"]),
        ],
    )
    def test_counter_resets(self, levels: tuple[int, ...], expected: list[str]) -> None:
        """H1 resets H2 and H3, H2 resets H3, H3 resets nothing."""
        assert _numbers(*levels) == expected

    def test_keys_are_generated_ids(self) -> None:
        """Headings without ids are keyed like the ID pass names them."""
        numbers = calculate_heading_numbers(doc(heading(1, "A"), heading(2, "B", node_id="b")))
        assert list(numbers) == ["heading-1", "b"]

    def test_extracts_heading_text(self) -> None:
        """Text is joined from all text children."""
        node = {
            "type": "heading",
            "attrs": {"level": 1},
            "content": [
                {"type": "text", "text": "Data "},
                {"type": "text", "text": "Sources", "marks": [{"type": "italic"}]},
            ],
        }
        numbers = calculate_heading_numbers(doc(node))
        assert numbers["heading-1"].text == "Data Sources"

    def test_numbers_nested_headings_in_encounter_order(self) -> None:
        """Containers are transparent; only encounter order matters."""
        document = doc(
            heading(1, "A"),
            {"type": "blockquote", "content": [heading(2, "Quoted"), paragraph("x")]},
            heading(2, "B"),
        )
        numbers = [h.number for h in calculate_heading_numbers(document).values()]
        assert numbers == ["1", "1.1", "1.2"]

    def test_deep_headings_are_listed_without_numbers(self) -> None:
        """H4 and deeper are looked up with an empty number and leave counters alone."""
        document = doc(
            heading(1, "A"),
            heading(2, "B"),
            heading(4, "Deep", node_id="deep"),
            heading(None, "Broken"),
            heading(3, "C"),
        )
        numbers = calculate_heading_numbers(document)
        assert [h.number for h in numbers.values()] == ["1", "1.1", "", "1.1.1"]
        assert numbers["deep"].level == 4
        assert numbers["deep"].number == ""
        assert get_heading_number("deep", document) == ""

    def test_level_less_headings_are_not_listed(self) -> None:
        """A heading without a usable level has no entry."""
        numbers = calculate_heading_numbers(doc(heading(None, "Broken", node_id="broken")))
        assert "broken" not in numbers

    def test_opted_out_headings_keep_counters(self) -> None:
        """A noNumber heading is listed unnumbered and does not advance the count."""
        opted_out = heading(1, "Dedication", node_id="dedication")
        opted_out["attrs"]["noNumber"] = True
        numbers = calculate_heading_numbers(doc(opted_out, heading(1, "Intro"), heading(2, "Scope")))
        assert [h.number for h in numbers.values()] == ["", "1", "1.1"]

    def test_front_and_back_headings_are_unnumbered(self, zoned_document: dict) -> None:
        """Only middle zone headings get numbers."""
        numbers = calculate_heading_numbers(zoned_document)
        by_zone = {
            zone: [h.number for h in numbers.values() if h.zone is zone]
            for zone in Zone
        }
        assert by_zone[Zone.FRONT] == [""]
        assert by_zone[Zone.MIDDLE] == ["1", "1.1", "2"]
        assert by_zone[Zone.BACK] == ["", ""]

    def test_front_headings_do_not_advance_counters(self) -> None:
        """Front matter H1s leave the main numbering at 1."""
        document = {
            "front": [heading(1, "Preface"), heading(1, "Foreword")],
            "middle": [heading(1, "Chapter")],
        }
        numbers = [h.number for h in calculate_heading_numbers(document).values()]
        assert numbers == ["", "", "1"]

    def test_same_result_with_persisted_ids(self, sample_document: dict) -> None:
        """Numbering is stable once generated ids are persisted."""
        first = calculate_heading_numbers(sample_document)
        second = calculate_heading_numbers(ensure_ids(sample_document))
        assert first == second

    def test_empty_document(self) -> None:
        """A document without headings yields an empty mapping."""
        assert calculate_heading_numbers(doc()) == {}


class TestHelpers:
    """Tests for numbering lookups and formatting."""

    def test_get_numbered_headings_excludes_other_zones(self, zoned_document: dict) -> None:
        """Only numbered main content headings are returned."""
        headings = get_numbered_headings(zoned_document)
        assert [h.text for h in headings] == ["Introduction", "Background", "Method"]

    def test_get_heading_number(self, sample_document: dict) -> None:
        """Looks up one heading's number."""
        assert get_heading_number("heading-3", sample_document) == "1.1.1"
        assert get_heading_number("missing", sample_document) == ""

    @pytest.mark.parametrize(("number", "expected"), [("1.2", "1.2. "), ("", "")])
    def test_format_heading_number(self, number: str, expected: str) -> None:
        """Numbers become display prefixes."""
        assert format_heading_number(number) == expected

    def test_should_number_heading(self) -> None:
        """Only the middle zone is numbered."""
        assert should_number_heading(Zone.MIDDLE)
        assert not should_number_heading(Zone.FRONT)
        assert not should_number_heading(Zone.BACK)

    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            ({"type": "coverPage"}, True),
            ({"type": "frontMatter"}, True),
            ({"type": "section", "attrs": {"type": "coverPage"}}, True),
            ({"type": "heading", "attrs": {"level": 1, "zone": "front"}}, True),
            ({"type": "heading", "attrs": {"level": 1, "zone": "back"}}, True),
            ({"type": "heading", "attrs": {"level": 1, "zone": "middle"}}, False),
            ({"type": "heading", "attrs": {"level": 1, "noNumber": True}}, True),
            ({"type": "heading", "attrs": {"level": 1, "noNumber": "yes"}}, False),
            ({"type": "paragraph"}, False),
        ],
    )
    def test_is_non_numbered_zone(self, node: dict, expected: bool) -> None:
        """Cover pages, front matter, zone tags and noNumber opt out."""
        assert is_non_numbered_zone(parse_node(node)) is expected
