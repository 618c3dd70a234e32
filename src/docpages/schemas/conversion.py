"""Conversion output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from docpages.schemas.sections import Page
from docpages.schemas.toc import TocItem


class ConversionResult(BaseModel):
    """Final conversion output."""

    page: Page
    toc: list[TocItem] = Field(default_factory=list)
