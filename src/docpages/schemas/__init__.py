"""Shared schemas for docpages."""

from docpages.schemas.conversion import ConversionResult
from docpages.schemas.nodes import (
    Mark,
    MarkType,
    NodeType,
    RichDocument,
    RichNode,
    coerce_document,
    coerce_node,
    heading_level,
    subtree_text,
)
from docpages.schemas.publish import (
    PublishableDocument,
    PublishablePage,
    PublishValidationResult,
)
from docpages.schemas.sections import DescriptionCapacity, Page, Section
from docpages.schemas.tables import TableCellStyle
from docpages.schemas.toc import TocItem

__all__ = [
    "ConversionResult",
    "DescriptionCapacity",
    "Mark",
    "MarkType",
    "NodeType",
    "Page",
    "PublishValidationResult",
    "PublishableDocument",
    "PublishablePage",
    "RichDocument",
    "RichNode",
    "Section",
    "TableCellStyle",
    "TocItem",
    "coerce_document",
    "coerce_node",
    "heading_level",
    "subtree_text",
]
