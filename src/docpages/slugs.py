"""Slug helpers for section ids and published documents."""

from __future__ import annotations

import re
from typing import Container

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_PUBLISH_STRIP_RE = re.compile(r"[^\w\s-]")
_PUBLISH_SEPARATOR_RE = re.compile(r"[\s_-]+")


def slugify(title: str) -> str:
    """Lowercase ``title`` and collapse every run of non ``[a-z0-9]`` into one hyphen.

    Leading and trailing hyphens are stripped, so a title without any ASCII
    letter or digit slugifies to the empty string.
    """
    return _NON_ALNUM_RE.sub("-", title.lower().strip()).strip("-")


def generate_publish_slug(title: str) -> str:
    """Generate a URL-friendly slug for a published document title."""
    slug = _PUBLISH_STRIP_RE.sub("", title.lower().strip())
    slug = _PUBLISH_SEPARATOR_RE.sub("-", slug)
    return slug.strip("-")


def ensure_unique_slug(base_slug: str, existing: Container[str]) -> str:
    """Return ``base_slug``, or ``base_slug-N`` for the first N not in ``existing``.

    Args:
        base_slug: The preferred slug.
        existing: Slugs already taken.

    Returns:
        A slug that is not contained in ``existing``.
    """
    slug = base_slug
    counter = 1
    while slug in existing:
        slug = f"{base_slug}-{counter}"
        counter += 1
    return slug
