"""Recover structured table cell styling from rendered HTML."""

from __future__ import annotations

import re

from docpages.schemas import TableCellStyle

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_IMPORTANT_RE = re.compile(r"\s*!important\s*$", re.IGNORECASE)


def extract_cell_styles(html: str) -> list[TableCellStyle]:
    """Return the styling of every ``th``/``td`` in ``html``, in document order.

    Colors come from the ``data-background-color`` and ``data-text-color``
    attributes; alignment comes from the inline ``style`` declarations.
    """
    # html.parser keeps cells that are not wrapped in a <table>.
    soup = BeautifulSoup(html, "html.parser")
    return [_cell_style(cell) for cell in soup.find_all(["th", "td"])]


def parse_style_declarations(style: str) -> dict[str, str]:
    """Parse an inline ``style`` attribute into a property -> value mapping."""
    declarations: dict[str, str] = {}
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        if not sep or not prop.strip():
            continue
        declarations[prop.strip().lower()] = _IMPORTANT_RE.sub("", value).strip()
    return declarations


def _cell_style(cell: Tag) -> TableCellStyle:
    declarations = parse_style_declarations(cell.get("style") or "")
    return TableCellStyle(
        header=cell.name == "th",
        background_color=cell.get("data-background-color") or None,
        text_color=cell.get("data-text-color") or None,
        text_align=declarations.get("text-align") or "left",
        vertical_align=declarations.get("vertical-align") or "top",
    )
