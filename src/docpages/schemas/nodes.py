"""Editor document models (the Tiptap JSON node tree)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from docpages.config import MAX_NODE_DEPTH

logger = logging.getLogger(__name__)


class NodeType(str, Enum):
    """Node types the renderer knows how to wrap."""

    TEXT = "text"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    TASK_LIST = "taskList"
    TASK_ITEM = "taskItem"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK = "codeBlock"
    HARD_BREAK = "hardBreak"
    HORIZONTAL_RULE = "horizontalRule"
    TABLE = "table"
    TABLE_ROW = "tableRow"
    TABLE_HEADER = "tableHeader"
    TABLE_CELL = "tableCell"


class MarkType(str, Enum):
    """Inline formatting marks."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKE = "strike"
    CODE = "code"
    LINK = "link"
    HIGHLIGHT = "highlight"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"


def _coerce_type(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _coerce_attrs(value: Any) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        return {}
    return {key: item for key, item in value.items() if isinstance(key, str)}


def heading_level(value: Any) -> int | None:
    """Return ``value`` as an integer heading level, or None when it is not one.

    Integral floats such as ``2.0`` are accepted; booleans are not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def subtree_text(nodes: list[Any]) -> str:
    """Concatenate the ``text`` of every node in ``nodes`` and their descendants.

    Accepts raw mappings and RichNode instances alike. Walks the tree with an
    explicit stack, so arbitrarily deep input is safe.
    """
    parts: list[str] = []
    stack = list(reversed(nodes))
    while stack:
        item = stack.pop()
        if isinstance(item, RichNode):
            text, content = item.text, item.content
        elif isinstance(item, Mapping):
            text, content = item.get("text"), item.get("content")
        else:
            continue
        if isinstance(text, str):
            parts.append(text)
        if isinstance(content, list):
            stack.extend(reversed(content))
    return "".join(parts)


def _limit_depth(value: Mapping[str, Any], depth: int = 1) -> dict[str, Any]:
    """Copy a raw node, collapsing anything below ``MAX_NODE_DEPTH`` into one text node."""
    node = dict(value)
    content = node.get("content")
    if not isinstance(content, list):
        return node
    if depth >= MAX_NODE_DEPTH:
        text = subtree_text(content)
        node["content"] = [{"type": NodeType.TEXT.value, "text": text}] if text else []
        return node
    node["content"] = [
        _limit_depth(child, depth + 1) if isinstance(child, Mapping) else child
        for child in content
    ]
    return node


class Mark(BaseModel):
    """An inline formatting annotation on a text node."""

    model_config = ConfigDict(extra="allow")

    type: str = ""
    attrs: dict[str, Any] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> str:
        return _coerce_type(v)

    @field_validator("attrs", mode="before")
    @classmethod
    def normalize_attrs(cls, v: Any) -> dict[str, Any]:
        return _coerce_attrs(v)


class RichNode(BaseModel):
    """A single node of an editor document.

    Coercion is lenient: a field of the wrong shape collapses to its default
    instead of failing validation, so any mapping yields a usable node.
    """

    model_config = ConfigDict(extra="allow")

    type: str = ""
    attrs: dict[str, Any] = Field(default_factory=dict)
    content: list["RichNode"] | None = None
    text: str | None = None
    marks: list[Mark] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> str:
        return _coerce_type(v)

    @field_validator("attrs", mode="before")
    @classmethod
    def normalize_attrs(cls, v: Any) -> dict[str, Any]:
        return _coerce_attrs(v)

    @field_validator("content", mode="before")
    @classmethod
    def normalize_content(cls, v: Any) -> list[Any] | None:
        """Drop a non-list ``content`` and any child that is not a mapping."""
        if not isinstance(v, list):
            return None
        return [child for child in v if isinstance(child, (Mapping, RichNode))]

    @field_validator("text", mode="before")
    @classmethod
    def normalize_text(cls, v: Any) -> str | None:
        """Keep ``text`` only when it is a string."""
        return v if isinstance(v, str) else None

    @field_validator("marks", mode="before")
    @classmethod
    def normalize_marks(cls, v: Any) -> list[Any]:
        """Drop a non-list ``marks`` and any mark that is not a mapping."""
        if not isinstance(v, list):
            return []
        return [mark for mark in v if isinstance(mark, (Mapping, Mark))]

    @property
    def children(self) -> list[RichNode]:
        return self.content or []

    def is_heading(self, level: int) -> bool:
        """Return True for a heading node whose ``level`` attribute equals ``level``."""
        return (
            self.type == NodeType.HEADING.value
            and heading_level(self.attrs.get("level")) == level
        )


class RichDocument(BaseModel):
    """Top-level editor document: ``{"type": "doc", "content": [...]}``."""

    model_config = ConfigDict(extra="allow")

    type: str = "doc"
    content: list[RichNode] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> str:
        return _coerce_type(v) or "doc"

    @field_validator("content", mode="before")
    @classmethod
    def normalize_content(cls, v: Any) -> list[Any]:
        """Treat a missing or non-list ``content`` as an empty document."""
        if not isinstance(v, list):
            return []
        return [child for child in v if isinstance(child, (Mapping, RichNode))]


def coerce_node(value: Any) -> RichNode | None:
    """Return ``value`` as a RichNode, or None when it cannot be one."""
    if value is None or isinstance(value, RichNode):
        return value
    if not isinstance(value, Mapping):
        return None
    try:
        return RichNode.model_validate(_limit_depth(value))
    except ValidationError as exc:
        logger.debug("Discarding malformed node: %s", exc)
        return None


def coerce_document(value: Any) -> RichDocument:
    """Return ``value`` as a RichDocument; anything unusable becomes an empty document.

    Top-level nodes are coerced one at a time, so a node that cannot be
    used is dropped without losing its siblings.
    """
    if isinstance(value, RichDocument):
        return value
    if not isinstance(value, Mapping):
        return RichDocument()

    content = value.get("content")
    nodes = [coerce_node(child) for child in content] if isinstance(content, list) else []
    fields = {key: item for key, item in value.items() if isinstance(key, str)}
    fields["content"] = [node for node in nodes if node is not None]
    try:
        return RichDocument.model_validate(fields)
    except ValidationError as exc:
        logger.debug("Dropping malformed document fields: %s", exc)
        return RichDocument(content=fields["content"])
