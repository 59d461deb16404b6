"""Tests for table of contents generation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from builders import doc, heading
from docoutline.captions import calculate_captions
from docoutline.exceptions import InvalidDepthError
from docoutline.numbering import calculate_heading_numbers
from docoutline.schemas import TocOptions
from docoutline.toc import build_toc, generate_toc, render_caption_list_markdown, render_toc_markdown


class TestGenerateToc:
    """Tests for generate_toc and build_toc."""

    def test_depth_filters_levels(self, sample_document: dict) -> None:
        """Depth 2 keeps H1 and H2 in original order."""
        entries = generate_toc(sample_document, depth=2)
        assert [(e.level, e.number, e.text) for e in entries] == [
            (1, "1", "Intro"),
            (2, "1.1", "Data"),
            (1, "2", "Results"),
        ]

    @pytest.mark.parametrize(("depth", "count"), [(1, 2), (2, 3), (3, 4)])
    def test_entry_count_per_depth(self, sample_document: dict, depth: int, count: int) -> None:
        """Each depth adds its level."""
        assert len(generate_toc(sample_document, depth=depth)) == count

    def test_only_main_content(self, zoned_document: dict) -> None:
        """Front and back matter headings never appear."""
        entries = generate_toc(zoned_document)
        assert [e.text for e in entries] == ["Introduction", "Background", "Method"]

    def test_deep_headings_never_appear(self) -> None:
        """H4 headings are in the number map but not in the TOC."""
        document = doc(heading(1, "A"), heading(4, "Deep"), heading(2, "B"))
        entries = generate_toc(document, depth=3)
        assert [e.text for e in entries] == ["A", "B"]

    def test_pages_are_left_unset(self, sample_document: dict) -> None:
        """Pagination is external."""
        assert all(e.page is None for e in generate_toc(sample_document))

    @pytest.mark.parametrize("depth", [0, 4, -1, True])
    def test_rejects_invalid_depth(self, depth: int) -> None:
        """Depth must be 1, 2 or 3."""
        with pytest.raises(InvalidDepthError):
            generate_toc(doc(heading(1, "A")), depth=depth)

    def test_build_from_heading_numbers(self, sample_document: dict) -> None:
        """build_toc accepts a precomputed heading map."""
        numbers = calculate_heading_numbers(sample_document)
        entries = build_toc(numbers.values(), 1)
        assert [e.id for e in entries] == ["heading-1", "heading-4"]

    def test_empty_document(self) -> None:
        """No headings, no entries."""
        assert generate_toc(doc()) == []


class TestRenderMarkdown:
    """Tests for Markdown listings."""

    def test_render_toc(self, sample_document: dict) -> None:
        """Entries are indented by level."""
        entries = generate_toc(sample_document)
        assert render_toc_markdown(entries) == (
            "## Table of Contents\n"
            "- 1 Intro\n"
            "  - 1.1 Data\n"
            "    - 1.1.1 Cleaning\n"
            "- 2 Results"
        )

    def test_render_toc_options(self, sample_document: dict) -> None:
        """Title, depth and numbers are configurable; pages are appended."""
        entries = generate_toc(sample_document, depth=1)
        entries[0] = entries[0].model_copy(update={"page": 3})
        options = TocOptions(title="Contents", include_numbers=False, depth=1)
        assert render_toc_markdown(entries, options) == "## Contents\n- Intro (3)\n- Results"

    def test_render_empty_toc(self) -> None:
        """Nothing to render gives an empty string."""
        assert render_toc_markdown([]) == ""

    def test_render_caption_list(self, sample_document: dict) -> None:
        """List of tables uses formatted captions."""
        tables = calculate_captions(sample_document).tables
        assert render_caption_list_markdown(tables, "List of Tables") == (
            "## List of Tables\n- Table 1: Scores"
        )
        assert render_caption_list_markdown([], "List of Figures") == ""

    def test_options_validate_depth(self) -> None:
        """TocOptions rejects depths outside 1-3."""
        with pytest.raises(ValidationError):
            TocOptions(depth=5)
