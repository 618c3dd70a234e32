"""Table of contents models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TocItem(BaseModel):
    """One entry of a page's table of contents.

    Attributes:
        id: Anchor id the entry links to.
        label: Visible text of the entry.
        level: Nesting depth; 1 for section titles, 2 for h3, 3 for h4.
    """

    id: str
    label: str
    level: int = Field(default=1, ge=1, le=3)
