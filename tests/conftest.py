"""Test setup for docpages."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _text(value: str, *marks: str) -> dict[str, Any]:
    node: dict[str, Any] = {"type": "text", "text": value}
    if marks:
        node["marks"] = [{"type": mark} for mark in marks]
    return node


def _paragraph(value: str | None = None) -> dict[str, Any]:
    node: dict[str, Any] = {"type": "paragraph"}
    if value is not None:
        node["content"] = [_text(value)]
    return node


def _heading(level: int, value: str | None = None) -> dict[str, Any]:
    node: dict[str, Any] = {"type": "heading", "attrs": {"level": level}}
    if value is not None:
        node["content"] = [_text(value)]
    return node


def _doc(*nodes: dict[str, Any]) -> dict[str, Any]:
    return {"type": "doc", "content": list(nodes)}


@pytest.fixture
def text() -> Callable[..., dict[str, Any]]:
    """Build a text node: ``text("hi", "bold")``."""
    return _text


@pytest.fixture
def paragraph() -> Callable[..., dict[str, Any]]:
    """Build a paragraph holding a single text node."""
    return _paragraph


@pytest.fixture
def heading() -> Callable[..., dict[str, Any]]:
    """Build a heading of the given level holding a single text node."""
    return _heading


@pytest.fixture
def doc() -> Callable[..., dict[str, Any]]:
    """Build a top-level document from nodes."""
    return _doc
