"""Build a page table of contents from partitioned sections."""

from __future__ import annotations

from typing import Iterable

from docpages.schemas import Section, TocItem
from docpages.slugs import slugify

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_SUBHEADING_LEVELS = {"h3": 2, "h4": 3}


def build_table_of_contents(sections: Iterable[Section]) -> list[TocItem]:
    """Collect section titles and the h3/h4 headings inside section HTML.

    Titled sections become level 1 entries. Headings found in the rendered
    fragments become level 2 (h3) and level 3 (h4) entries, keyed by their
    ``id`` attribute when present and by the slug of their text otherwise.
    """
    items: list[TocItem] = []
    for section in sections:
        if section.title.strip():
            items.append(
                TocItem(id=slugify(section.title) or section.id, label=section.title, level=1)
            )
        for html in section.content:
            _collect_subheadings(html, items)
    return items


def _collect_subheadings(html: str, items: list[TocItem]) -> None:
    soup = BeautifulSoup(html, "lxml")
    seen: set[tuple[str, str]] = set()
    for heading in soup.find_all(list(_SUBHEADING_LEVELS)):
        label = heading.get_text().strip()
        if not label:
            continue
        anchor = heading.get("id") or slugify(label) or f"{heading.name}-{len(items)}"
        key = (heading.name, anchor)
        if key in seen:
            continue
        seen.add(key)
        items.append(TocItem(id=anchor, label=label, level=_SUBHEADING_LEVELS[heading.name]))
