"""Table cell style models."""

from __future__ import annotations

from pydantic import BaseModel


class TableCellStyle(BaseModel):
    """Structured styling recovered from a rendered ``th`` or ``td`` element."""

    header: bool = False
    background_color: str | None = None
    text_color: str | None = None
    text_align: str = "left"
    vertical_align: str = "top"
