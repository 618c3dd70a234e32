"""docpages: turn editor documents into titled pages of sanitized HTML sections."""

from docpages.conversion import ConversionOptions, convert_document, load_document
from docpages.exceptions import DocpagesError, DocumentParseError
from docpages.partitioner import extract_text, partition_document
from docpages.publish import validate_for_publishing
from docpages.renderer import escape_html, render_children, render_marks, render_node
from docpages.schemas import (
    ConversionResult,
    DescriptionCapacity,
    Page,
    RichDocument,
    RichNode,
    Section,
    TableCellStyle,
    TocItem,
)
from docpages.slugs import ensure_unique_slug, generate_publish_slug, slugify
from docpages.table_styles import extract_cell_styles
from docpages.toc import build_table_of_contents

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "DescriptionCapacity",
    "DocpagesError",
    "DocumentParseError",
    "Page",
    "RichDocument",
    "RichNode",
    "Section",
    "TableCellStyle",
    "TocItem",
    "build_table_of_contents",
    "convert_document",
    "ensure_unique_slug",
    "escape_html",
    "extract_cell_styles",
    "extract_text",
    "generate_publish_slug",
    "load_document",
    "partition_document",
    "render_children",
    "render_marks",
    "render_node",
    "slugify",
    "validate_for_publishing",
]
