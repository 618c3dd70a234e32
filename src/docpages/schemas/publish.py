"""Publishing validation models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from docpages.schemas.sections import Section


class PublishablePage(BaseModel):
    """A stored page; unlike a freshly partitioned Page it may have no sections."""

    title: str = ""
    sections: list[Section] = Field(default_factory=list)


class PublishableDocument(BaseModel):
    """A document with its pages, as handed to the publishing checks."""

    title: str = ""
    description: str | None = None
    pages: list[PublishablePage] = Field(default_factory=list)


class PublishValidationResult(BaseModel):
    """Outcome of the publishing checks.

    Errors block publishing; warnings are recommendations only.
    """

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
