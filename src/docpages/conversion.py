"""Conversion pipeline for editor JSON -> page sections."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from docpages.exceptions import DocumentParseError
from docpages.partitioner import partition_document
from docpages.schemas import (
    ConversionResult,
    DescriptionCapacity,
    RichDocument,
    coerce_document,
)
from docpages.toc import build_table_of_contents

logger = logging.getLogger(__name__)


@dataclass
class ConversionOptions:
    """Options for document conversion.

    Attributes:
        description_capacity: How much leading content the untitled
            description section may hold. None uses
            ``DOCPAGES_DESCRIPTION_CAPACITY``.
        include_toc: If True, build a table of contents for the page.
    """

    description_capacity: DescriptionCapacity | None = None
    include_toc: bool = False


def load_document(raw: str | bytes | Mapping[str, Any] | RichDocument | None) -> RichDocument:
    """Load an editor document from JSON text or an already decoded mapping.

    Decodable input with the wrong shape (not an object, or ``content`` not a
    list) is treated as a document without content.

    Raises:
        DocumentParseError: If ``raw`` is text that is not valid JSON.
    """
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DocumentParseError(f"Document is not valid JSON: {exc}") from exc

    document = coerce_document(raw)
    if not document.content:
        logger.debug("Loaded document has no content")
    return document


def convert_document(
    raw: str | bytes | Mapping[str, Any] | RichDocument | None,
    *,
    page_id: str,
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """Load, partition and optionally index an editor document.

    Args:
        raw: JSON text, a decoded mapping, or a RichDocument.
        page_id: Id of the page the sections belong to.
        options: Conversion options. Uses defaults if None.

    Returns:
        The page and, when requested, its table of contents.

    Raises:
        ValueError: If ``page_id`` is empty.
        DocumentParseError: If ``raw`` is text that is not valid JSON.
    """
    if not page_id or not page_id.strip():
        raise ValueError("page_id cannot be empty")

    page_id = page_id.strip()
    opts = options or ConversionOptions()
    document = load_document(raw)
    page = partition_document(document, page_id, description_capacity=opts.description_capacity)
    toc = build_table_of_contents(page.sections) if opts.include_toc else []

    logger.info(
        "Converted page %s: title=%r, %d section(s), %d toc item(s)",
        page_id,
        page.title,
        len(page.sections),
        len(toc),
    )
    return ConversionResult(page=page, toc=toc)
