"""Test setup for docoutline."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

from builders import doc, heading, image, paragraph, table

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def zoned_document() -> dict[str, Any]:
    """A front/middle/back split with headings and captions in every zone."""
    return {
        "front": [
            heading(1, "Abstract"),
            image(alt="Cover art"),
        ],
        "middle": [
            heading(1, "Introduction"),
            paragraph("Some text."),
            heading(2, "Background"),
            table(caption="Results", first_cell="Metric"),
            heading(1, "Method"),
        ],
        "back": [
            heading(1, "References"),
            heading(2, "Primary sources"),
        ],
    }


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A single-zone document covering every outline item type."""
    return doc(
        heading(1, "Intro"),
        paragraph("Welcome to the report."),
        image(alt="Architecture", caption="System overview"),
        heading(2, "Data"),
        table(caption="Scores", first_cell="Model"),
        heading(3, "Cleaning"),
        heading(1, "Results"),
    )
