"""docoutline: outline, numbering and table of contents for rich document trees."""

from docoutline.analysis import AnalysisOptions, analyze_document
from docoutline.captions import (
    calculate_captions,
    format_figure_caption,
    format_table_caption,
    get_figure_number,
    get_table_number,
)
from docoutline.exceptions import DocOutlineError, InvalidDepthError, InvalidNodeError
from docoutline.ids import ensure_ids
from docoutline.numbering import (
    calculate_heading_numbers,
    format_heading_number,
    get_heading_number,
    get_numbered_headings,
)
from docoutline.outline import extract_outline, extract_sections, get_document_stats
from docoutline.refresh import OutlineRefresher
from docoutline.schemas import (
    CaptionInfo,
    CaptionNumbers,
    DocumentAnalysis,
    DocumentStructure,
    HeadingNumber,
    OutlineItem,
    TocEntry,
    Zone,
    dump_node,
    parse_node,
)
from docoutline.toc import build_toc, generate_toc, render_toc_markdown
from docoutline.zones import iter_zones, load_document, split_by_markers

__all__ = [
    "AnalysisOptions",
    "CaptionInfo",
    "CaptionNumbers",
    "DocOutlineError",
    "DocumentAnalysis",
    "DocumentStructure",
    "HeadingNumber",
    "InvalidDepthError",
    "InvalidNodeError",
    "OutlineItem",
    "OutlineRefresher",
    "TocEntry",
    "Zone",
    "analyze_document",
    "build_toc",
    "calculate_captions",
    "calculate_heading_numbers",
    "dump_node",
    "ensure_ids",
    "extract_outline",
    "extract_sections",
    "format_figure_caption",
    "format_heading_number",
    "format_table_caption",
    "generate_toc",
    "get_document_stats",
    "get_figure_number",
    "get_heading_number",
    "get_numbered_headings",
    "get_table_number",
    "iter_zones",
    "load_document",
    "parse_node",
    "render_toc_markdown",
    "split_by_markers",
]
