"""Partition an editor document into a titled page of HTML sections."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import partial, reduce
from typing import Any

from docpages import config
from docpages.renderer import render_node
from docpages.schemas import (
    DescriptionCapacity,
    Page,
    RichNode,
    Section,
    coerce_document,
)
from docpages.slugs import ensure_unique_slug, slugify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _SectionDraft:
    id: str
    title: str
    content: tuple[str, ...] = ()


@dataclass(frozen=True)
class _PartitionState:
    """Accumulator threaded through the left-to-right pass over top-level nodes.

    Attributes:
        sections: Finished sections, in document order.
        current: The section under construction, if any.
        pending_description: Fragments of the untitled description block.
        title: Page title, taken from the first H1.
        saw_first_heading1: Whether the title H1 has been consumed.
        collecting_description: Whether untitled content still goes into
            ``pending_description``. On at the start of the pass and switched
            off for good by the first section boundary.
    """

    sections: tuple[_SectionDraft, ...] = ()
    current: _SectionDraft | None = None
    pending_description: tuple[str, ...] = ()
    title: str = ""
    saw_first_heading1: bool = False
    collecting_description: bool = True


def partition_document(
    document: Any,
    page_id: str,
    *,
    description_capacity: DescriptionCapacity | str | None = None,
) -> Page:
    """Split a document into a page title and an ordered list of HTML sections.

    The first H1 becomes the page title. Every later H1 and every H2 starts a
    new titled section. Content before the first section boundary becomes an
    untitled ``{page_id}-intro`` section; with the ``single-node`` capacity a
    second fragment before any boundary closes the intro and opens an
    anonymous section instead.

    Args:
        document: A RichDocument or a ``{"type": "doc", "content": [...]}``
            mapping. Anything else is treated as an empty document.
        page_id: Id of the owning page; prefixes every section id.
        description_capacity: ``single-node`` or ``unbounded``. Defaults to
            ``DOCPAGES_DESCRIPTION_CAPACITY``.

    Returns:
        The page. ``sections`` is never empty.
    """
    capacity = DescriptionCapacity(description_capacity or config.DOCPAGES_DESCRIPTION_CAPACITY)
    doc = coerce_document(document)

    step = partial(_step, page_id=page_id, capacity=capacity)
    initial = _PartitionState(title=config.DOCPAGES_DEFAULT_PAGE_TITLE)
    state = _finish(reduce(step, doc.content, initial), page_id)

    sections = [
        Section(id=draft.id, title=draft.title, content=list(draft.content))
        for draft in state.sections
    ]
    if not sections:
        logger.debug("Page %s has no content; emitting the default section", page_id)
        sections = [Section(id=f"{page_id}-section", content=[config.EMPTY_SECTION_HTML])]

    logger.debug("Partitioned page %s into %d section(s)", page_id, len(sections))
    return Page(title=state.title, sections=sections)


def extract_text(node: RichNode) -> str:
    """Concatenate the text of a node's direct children and trim it."""
    return "".join(child.text or "" for child in node.children).strip()


def _step(
    state: _PartitionState,
    node: RichNode,
    *,
    page_id: str,
    capacity: DescriptionCapacity,
) -> _PartitionState:
    if node.is_heading(1) and not state.saw_first_heading1:
        return replace(
            state,
            title=extract_text(node) or config.DOCPAGES_DEFAULT_PAGE_TITLE,
            saw_first_heading1=True,
        )

    if node.is_heading(1) or node.is_heading(2):
        return _open_titled(state, page_id, extract_text(node))

    html = render_node(node)
    if not html.strip():
        return state

    if state.collecting_description:
        if capacity is DescriptionCapacity.UNBOUNDED or not state.pending_description:
            return replace(state, pending_description=state.pending_description + (html,))
        return _open_anonymous(_flush_description(state, page_id), page_id, html)

    if state.current is not None:
        current = replace(state.current, content=state.current.content + (html,))
        return replace(state, current=current)
    return _open_anonymous(state, page_id, html)


def _open_titled(state: _PartitionState, page_id: str, title: str) -> _PartitionState:
    state = _flush_current(_flush_description(state, page_id))
    section_id = _section_id(state, page_id, slugify(title))
    return replace(state, current=_SectionDraft(id=section_id, title=title))


def _open_anonymous(state: _PartitionState, page_id: str, html: str) -> _PartitionState:
    state = _flush_current(state)
    section_id = _section_id(state, page_id, "")
    return replace(state, current=_SectionDraft(id=section_id, title="", content=(html,)))


def _flush_description(state: _PartitionState, page_id: str) -> _PartitionState:
    if not state.collecting_description:
        return state
    sections = state.sections
    if state.pending_description:
        intro_id = ensure_unique_slug(f"{page_id}-intro", _used_ids(state))
        sections += (_SectionDraft(id=intro_id, title="", content=state.pending_description),)
    return replace(
        state,
        sections=sections,
        pending_description=(),
        collecting_description=False,
    )


def _flush_current(state: _PartitionState) -> _PartitionState:
    if state.current is None:
        return state
    return replace(state, sections=state.sections + (state.current,), current=None)


def _finish(state: _PartitionState, page_id: str) -> _PartitionState:
    return _flush_current(_flush_description(state, page_id))


def _section_id(state: _PartitionState, page_id: str, slug: str) -> str:
    used = _used_ids(state)
    positional = f"{page_id}-section-{len(state.sections)}"
    candidate = f"{page_id}-{slug}" if slug else positional
    if candidate in used:
        candidate = positional
    return ensure_unique_slug(candidate, used)


def _used_ids(state: _PartitionState) -> set[str]:
    used = {draft.id for draft in state.sections}
    if state.current is not None:
        used.add(state.current.id)
    return used
