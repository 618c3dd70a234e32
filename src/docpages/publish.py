"""Checks a document must pass before it can be published."""

from __future__ import annotations

import logging
from typing import Any

from docpages import config
from docpages.schemas import (
    PublishableDocument,
    PublishablePage,
    PublishValidationResult,
    Section,
)

logger = logging.getLogger(__name__)

_MIN_PAGE_TITLE_LENGTH = 3


def validate_for_publishing(
    document: PublishableDocument | dict[str, Any],
) -> PublishValidationResult:
    """Validate a document against the publishing requirements.

    Errors (blocking): the document has no title, has no pages, has pages
    without sections, has sections without content, or has less than
    ``DOCPAGES_MIN_PUBLISH_CONTENT_LENGTH`` characters of content overall.

    Warnings: no description, fewer than ``DOCPAGES_MIN_RECOMMENDED_PAGES``
    pages, or very short page titles.

    Args:
        document: The document and its pages.

    Returns:
        The validation result; ``is_valid`` is True when there are no errors.
    """
    if not isinstance(document, PublishableDocument):
        document = PublishableDocument.model_validate(document)

    min_content_length = config.DOCPAGES_MIN_PUBLISH_CONTENT_LENGTH
    min_pages = config.DOCPAGES_MIN_RECOMMENDED_PAGES
    errors: list[str] = []
    warnings: list[str] = []

    if not document.title.strip():
        errors.append("Document must have a title")

    if not document.pages:
        errors.append("Document must have at least one page")

    pages_without_sections = [page for page in document.pages if not page.sections]
    if pages_without_sections:
        titles = ", ".join(page.title for page in pages_without_sections)
        errors.append(
            f"All pages must have at least one section. Pages without sections: {titles}"
        )

    empty_sections = _find_empty_sections(document.pages)
    if len(empty_sections) == 1:
        page_title, section_title = empty_sections[0]
        errors.append(
            f'The page "{page_title}" has an empty section: "{section_title}". '
            "Please add content to this section before publishing."
        )
    elif empty_sections:
        listing = ", ".join(
            f'"{page_title}" → "{section_title}"' for page_title, section_title in empty_sections
        )
        errors.append(
            f"Multiple sections are empty and need content: {listing}. "
            "Please add content to these sections before publishing."
        )

    total_length = sum(
        len(fragment)
        for page in document.pages
        for section in page.sections
        for fragment in section.content
    )
    if total_length < min_content_length:
        errors.append(
            f"Document must have at least {min_content_length} characters "
            f"of content (currently has {total_length})"
        )

    if not (document.description or "").strip():
        warnings.append(
            "Adding a description will help users understand what your documentation is about"
        )

    if len(document.pages) < min_pages:
        warnings.append(
            f"Consider adding more pages (recommended: at least {min_pages} pages)"
        )

    if any(len(page.title.strip()) < _MIN_PAGE_TITLE_LENGTH for page in document.pages):
        warnings.append("Some page titles are very short. Consider making them more descriptive")

    logger.debug(
        "Publish validation for %r: %d error(s), %d warning(s)",
        document.title,
        len(errors),
        len(warnings),
    )
    return PublishValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def _find_empty_sections(pages: list[PublishablePage]) -> list[tuple[str, str]]:
    empty: list[tuple[str, str]] = []
    for page in pages:
        for index, section in enumerate(page.sections, start=1):
            if not _has_content(section):
                empty.append((page.title, section.title.strip() or f"Section {index} (no title)"))
    return empty


def _has_content(section: Section) -> bool:
    return any(fragment.strip() for fragment in section.content)
