"""One-shot recomputation pipeline over a document."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from docoutline.captions import calculate_captions
from docoutline.config import DOCOUTLINE_TOC_DEPTH
from docoutline.ids import ensure_ids
from docoutline.numbering import calculate_heading_numbers
from docoutline.outline import extract_outline, get_document_stats
from docoutline.schemas import DocumentAnalysis
from docoutline.toc import build_toc
from docoutline.zones import Document, load_document

logger = logging.getLogger(__name__)


@dataclass
class AnalysisOptions:
    """Options for document analysis.

    Attributes:
        toc_depth: Deepest heading level listed in the table of contents.
        assign_ids: If True, return the document with generated ids so the
            caller can persist them. If False, the input document is returned
            as-is (results still use the ids the ID pass would assign).
        include_code_blocks: If True, list significant code blocks in the outline.
        include_page_breaks: If True, list page breaks in the outline.
    """

    toc_depth: int = DOCOUTLINE_TOC_DEPTH
    assign_ids: bool = True
    include_code_blocks: bool = True
    include_page_breaks: bool = True


def analyze_document(
    document: Document | Mapping[str, Any],
    options: AnalysisOptions | None = None,
) -> DocumentAnalysis:
    """Derive numbering, captions, outline and TOC from one document.

    Args:
        document: A raw or parsed tree, or a front/middle/back split.
        options: Processing options. Uses defaults if None.

    Returns:
        The combined analysis.

    Raises:
        InvalidNodeError: If the document does not have the tree shape.
        InvalidDepthError: If ``options.toc_depth`` is not 1, 2 or 3.
    """
    opts = options or AnalysisOptions()
    parsed = load_document(document)
    identified = ensure_ids(parsed)

    heading_numbers = calculate_heading_numbers(identified)
    analysis = DocumentAnalysis(
        document=identified if opts.assign_ids else parsed,
        heading_numbers=heading_numbers,
        captions=calculate_captions(identified),
        outline=extract_outline(
            identified,
            include_code_blocks=opts.include_code_blocks,
            include_page_breaks=opts.include_page_breaks,
        ),
        toc=build_toc(heading_numbers.values(), opts.toc_depth),
        stats=get_document_stats(identified),
    )
    logger.debug(
        "Analyzed document: %d headings, %d outline items",
        len(analysis.heading_numbers),
        len(analysis.outline),
    )
    return analysis
