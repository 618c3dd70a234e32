"""Render editor document nodes into sanitized HTML fragments."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from docpages.config import DEFAULT_HIGHLIGHT_COLOR, MAX_NODE_DEPTH
from docpages.schemas import (
    Mark,
    MarkType,
    NodeType,
    RichNode,
    coerce_node,
    heading_level,
    subtree_text,
)

logger = logging.getLogger(__name__)

# Order matters: "&" must be replaced before the entities that contain it.
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

_INLINE_CODE_CLASS = "bg-gray-100 px-1 py-0.5 rounded text-sm"
_LINK_CLASS = "text-blue-600 underline hover:text-blue-800"
_CODE_BLOCK_PRE_CLASS = "bg-gray-100 rounded-md p-4 my-4"
_CODE_BLOCK_CODE_CLASS = "block"
_TABLE_CLASS = "border-collapse w-full my-4"
_TABLE_HEADER_CLASS = "border border-gray-300 bg-gray-100 px-4 py-2 text-left font-semibold"
_TABLE_CELL_CLASS = "border border-gray-300 px-4 py-2"

_DEFAULT_TEXT_ALIGN = "left"
_DEFAULT_VERTICAL_ALIGN = "top"

_SIMPLE_MARKS: dict[str, tuple[str, str]] = {
    MarkType.BOLD.value: ("<strong>", "</strong>"),
    MarkType.ITALIC.value: ("<em>", "</em>"),
    MarkType.UNDERLINE.value: ("<u>", "</u>"),
    MarkType.STRIKE.value: ("<s>", "</s>"),
    MarkType.SUBSCRIPT.value: ("<sub>", "</sub>"),
    MarkType.SUPERSCRIPT.value: ("<sup>", "</sup>"),
}

_CONTAINER_BLOCKS: dict[str, tuple[str, str]] = {
    NodeType.BULLET_LIST.value: ("<ul>", "</ul>"),
    NodeType.ORDERED_LIST.value: ("<ol>", "</ol>"),
    NodeType.LIST_ITEM.value: ("<li>", "</li>"),
    NodeType.TASK_LIST.value: ('<ul data-type="taskList">', "</ul>"),
    NodeType.BLOCKQUOTE.value: ("<blockquote>", "</blockquote>"),
    NodeType.TABLE.value: (f'<table class="{_TABLE_CLASS}">', "</table>"),
    NodeType.TABLE_ROW.value: ("<tr>", "</tr>"),
}


def escape_html(text: str) -> str:
    """Replace ``& < > " '`` with their HTML entities."""
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def render_marks(text: str, marks: Iterable[Mark] = ()) -> str:
    """Escape ``text`` and wrap it in each mark, in order.

    Every mark wraps the output of the previous one, so ``[bold, italic]``
    yields ``<em><strong>text</strong></em>``. Unknown marks are skipped.
    """
    result = escape_html(text)
    for mark in marks:
        result = _apply_mark(result, mark)
    return result


def render_node(node: RichNode | Mapping[str, Any] | None, *, depth: int = 1) -> str:
    """Render a node and its descendants as an HTML fragment.

    Never raises: a missing node renders as an empty string, malformed
    fields fall back to their defaults and unknown node types render
    their children without a wrapper. Below ``MAX_NODE_DEPTH`` levels only
    the escaped text of the subtree is kept.
    """
    node = coerce_node(node)
    if node is None:
        return ""
    if depth > MAX_NODE_DEPTH:
        return escape_html(subtree_text([node]))

    node_type = node.type

    if node_type == NodeType.TEXT.value:
        return render_marks(node.text or "", node.marks)

    if node_type == NodeType.PARAGRAPH.value:
        return f"<p{_alignment_style(node.attrs)}>{render_children(node, depth=depth)}</p>"

    if node_type == NodeType.HEADING.value:
        level = _heading_level(node.attrs)
        inner = render_children(node, depth=depth)
        return f"<h{level}{_alignment_style(node.attrs)}>{inner}</h{level}>"

    if node_type in _CONTAINER_BLOCKS:
        opening, closing = _CONTAINER_BLOCKS[node_type]
        return f"{opening}{render_children(node, depth=depth)}{closing}"

    if node_type == NodeType.TASK_ITEM.value:
        return _render_task_item(node, depth)

    if node_type == NodeType.CODE_BLOCK.value:
        code = escape_html("".join(child.text or "" for child in node.children))
        return (
            f'<pre class="{_CODE_BLOCK_PRE_CLASS}">'
            f'<code class="{_CODE_BLOCK_CODE_CLASS}">{code}</code></pre>'
        )

    if node_type == NodeType.HARD_BREAK.value:
        return "<br />"

    if node_type == NodeType.HORIZONTAL_RULE.value:
        return "<hr />"

    if node_type == NodeType.TABLE_HEADER.value:
        return _render_table_cell(node, depth, tag="th", css_class=_TABLE_HEADER_CLASS)

    if node_type == NodeType.TABLE_CELL.value:
        return _render_table_cell(node, depth, tag="td", css_class=_TABLE_CELL_CLASS)

    if node_type != "doc":
        logger.debug("Unwrapping unknown node type %r", node_type)
    return render_children(node, depth=depth)


def render_children(node: RichNode, *, depth: int = 1) -> str:
    """Render the children of ``node`` and concatenate them without separators."""
    return "".join(render_node(child, depth=depth + 1) for child in node.children)


def _apply_mark(html: str, mark: Mark) -> str:
    mark_type = mark.type

    if mark_type in _SIMPLE_MARKS:
        opening, closing = _SIMPLE_MARKS[mark_type]
        return f"{opening}{html}{closing}"

    if mark_type == MarkType.CODE.value:
        return f'<code class="{_INLINE_CODE_CLASS}">{html}</code>'

    if mark_type == MarkType.LINK.value:
        href = _string_attr(mark.attrs, "href") or "#"
        return f'<a href="{escape_html(href)}" class="{_LINK_CLASS}">{html}</a>'

    if mark_type == MarkType.HIGHLIGHT.value:
        color = escape_html(_string_attr(mark.attrs, "color") or DEFAULT_HIGHLIGHT_COLOR)
        return f'<mark data-color="{color}" style="background-color: {color}">{html}</mark>'

    return html


def _render_task_item(node: RichNode, depth: int) -> str:
    checked = bool(node.attrs.get("checked"))
    checked_attr = "checked" if checked else ""
    return (
        f'<li data-type="taskItem" data-checked="{"true" if checked else "false"}">'
        f'<label><input type="checkbox" {checked_attr}>'
        f"<span>{render_children(node, depth=depth)}</span></label></li>"
    )


def _render_table_cell(node: RichNode, depth: int, *, tag: str, css_class: str) -> str:
    attrs = node.attrs
    background_color = _string_attr(attrs, "backgroundColor")
    text_color = _string_attr(attrs, "textColor")
    text_align = _string_attr(attrs, "textAlign") or _DEFAULT_TEXT_ALIGN
    vertical_align = _string_attr(attrs, "verticalAlign") or _DEFAULT_VERTICAL_ALIGN

    declarations: list[str] = []
    if background_color:
        declarations.append(f"background-color: {escape_html(background_color)} !important")
    if text_color:
        declarations.append(f"color: {escape_html(text_color)} !important")
    if text_align != _DEFAULT_TEXT_ALIGN:
        declarations.append(f"text-align: {escape_html(text_align)}")
    if vertical_align != _DEFAULT_VERTICAL_ALIGN:
        declarations.append(f"vertical-align: {escape_html(vertical_align)}")
    style = f' style="{"; ".join(declarations)}"' if declarations else ""

    # Mirrored so the structured values can be parsed back out of the HTML.
    data_attrs = ""
    if background_color:
        data_attrs += f' data-background-color="{escape_html(background_color)}"'
    if text_color:
        data_attrs += f' data-text-color="{escape_html(text_color)}"'

    inner = render_children(node, depth=depth)
    return f'<{tag} class="{css_class}"{style}{data_attrs}>{inner}</{tag}>'


def _alignment_style(attrs: Mapping[str, Any]) -> str:
    align = _string_attr(attrs, "textAlign")
    if not align or align == _DEFAULT_TEXT_ALIGN:
        return ""
    return f' style="text-align: {escape_html(align)}"'


def _heading_level(attrs: Mapping[str, Any]) -> int:
    level = heading_level(attrs.get("level"))
    if level is None or not 1 <= level <= 6:
        return 1
    return level


def _string_attr(attrs: Mapping[str, Any], key: str) -> str | None:
    value = attrs.get(key)
    if isinstance(value, str) and value:
        return value
    return None
