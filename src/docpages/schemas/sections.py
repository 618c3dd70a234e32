"""Page and section output models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class DescriptionCapacity(str, Enum):
    """How much leading content the untitled description section may hold."""

    SINGLE_NODE = "single-node"
    UNBOUNDED = "unbounded"


class Section(BaseModel):
    """A titled or untitled block of rendered HTML belonging to one page.

    An empty ``title`` marks an untitled section (the page description or
    content that appeared before any heading).
    """

    id: str
    title: str = ""
    type: Literal["html"] = "html"
    content: list[str] = Field(default_factory=list)


class Page(BaseModel):
    """Page envelope produced from one editor document."""

    title: str
    sections: list[Section] = Field(..., min_length=1)
