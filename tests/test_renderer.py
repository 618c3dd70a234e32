"""Tests for the node renderer."""

from __future__ import annotations

import copy

import pytest

from docpages.config import MAX_NODE_DEPTH
from docpages.renderer import escape_html, render_marks, render_node
from docpages.schemas import Mark, RichNode

TH_CLASS = "border border-gray-300 bg-gray-100 px-4 py-2 text-left font-semibold"
TD_CLASS = "border border-gray-300 px-4 py-2"


class TestEscapeHtml:
    """Tests for escape_html."""

    @pytest.mark.parametrize(
        ("raw", "escaped"),
        [
            ("&", "&amp;"),
            ("<", "&lt;"),
            (">", "&gt;"),
            ('"', "&quot;"),
            ("'", "&#039;"),
            ("plain text", "plain text"),
            ("&lt;", "&amp;lt;"),
        ],
    )
    def test_escapes_special_characters(self, raw: str, escaped: str) -> None:
        assert escape_html(raw) == escaped

    def test_escapes_markup_injection(self) -> None:
        assert (
            escape_html("<script>alert('x & y')</script>")
            == "&lt;script&gt;alert(&#039;x &amp; y&#039;)&lt;/script&gt;"
        )


class TestMarks:
    """Tests for inline mark rendering."""

    @pytest.mark.parametrize(
        ("mark", "expected"),
        [
            ("bold", "<strong>x</strong>"),
            ("italic", "<em>x</em>"),
            ("underline", "<u>x</u>"),
            ("strike", "<s>x</s>"),
            ("subscript", "<sub>x</sub>"),
            ("superscript", "<sup>x</sup>"),
            ("code", '<code class="bg-gray-100 px-1 py-0.5 rounded text-sm">x</code>'),
        ],
    )
    def test_simple_marks(self, text, mark: str, expected: str) -> None:
        assert render_node(text("x", mark)) == expected

    def test_marks_nest_in_array_order(self, text) -> None:
        """Each mark wraps the output of the previous one."""
        assert render_node(text("x", "bold", "italic")) == "<em><strong>x</strong></em>"
        assert render_node(text("x", "italic", "bold")) == "<strong><em>x</em></strong>"

    def test_text_is_escaped_before_marks(self, text) -> None:
        assert render_node(text("<b> & 'q'", "bold")) == (
            "<strong>&lt;b&gt; &amp; &#039;q&#039;</strong>"
        )

    def test_link_with_href(self) -> None:
        node = {
            "type": "text",
            "text": "docs",
            "marks": [{"type": "link", "attrs": {"href": "https://example.com/?a=1&b=\"2\""}}],
        }
        assert render_node(node) == (
            '<a href="https://example.com/?a=1&amp;b=&quot;2&quot;" '
            'class="text-blue-600 underline hover:text-blue-800">docs</a>'
        )

    def test_link_without_href_defaults_to_hash(self, text) -> None:
        assert render_node(text("docs", "link")) == (
            '<a href="#" class="text-blue-600 underline hover:text-blue-800">docs</a>'
        )

    def test_highlight_default_color(self, text) -> None:
        assert render_node(text("hi", "highlight")) == (
            '<mark data-color="#fef08a" style="background-color: #fef08a">hi</mark>'
        )

    def test_highlight_custom_color(self) -> None:
        node = {"type": "text", "text": "hi", "marks": [{"type": "highlight", "attrs": {"color": "#bbf7d0"}}]}
        assert render_node(node) == (
            '<mark data-color="#bbf7d0" style="background-color: #bbf7d0">hi</mark>'
        )

    def test_unknown_mark_is_ignored(self, text) -> None:
        assert render_node(text("x", "sparkle", "bold")) == "<strong>x</strong>"

    def test_render_marks_accepts_mark_models(self) -> None:
        assert render_marks("a<b", [Mark(type="bold")]) == "<strong>a&lt;b</strong>"


class TestBlocks:
    """Tests for block-level nodes."""

    def test_paragraph(self, paragraph) -> None:
        assert render_node(paragraph("Hello")) == "<p>Hello</p>"

    def test_empty_paragraph(self, paragraph) -> None:
        assert render_node(paragraph()) == "<p></p>"

    def test_paragraph_alignment(self, paragraph) -> None:
        node = paragraph("Hello")
        node["attrs"] = {"textAlign": "center"}
        assert render_node(node) == '<p style="text-align: center">Hello</p>'

    def test_left_alignment_is_omitted(self, paragraph) -> None:
        node = paragraph("Hello")
        node["attrs"] = {"textAlign": "left"}
        assert render_node(node) == "<p>Hello</p>"

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_levels(self, heading, level: int) -> None:
        assert render_node(heading(level, "T")) == f"<h{level}>T</h{level}>"

    def test_heading_defaults_to_level_one(self) -> None:
        node = {"type": "heading", "content": [{"type": "text", "text": "T"}]}
        assert render_node(node) == "<h1>T</h1>"

    @pytest.mark.parametrize("level", [2.0, 6.0])
    def test_integral_float_heading_level(self, heading, level: float) -> None:
        node = heading(1, "T")
        node["attrs"]["level"] = level
        assert render_node(node) == f"<h{int(level)}>T</h{int(level)}>"

    @pytest.mark.parametrize("level", [0, 7, "2", None, True, 2.5, 7.0])
    def test_invalid_heading_level_falls_back_to_one(self, heading, level) -> None:
        node = heading(1, "T")
        node["attrs"]["level"] = level
        assert render_node(node) == "<h1>T</h1>"

    def test_heading_alignment(self, heading) -> None:
        node = heading(2, "T")
        node["attrs"]["textAlign"] = "right"
        assert render_node(node) == '<h2 style="text-align: right">T</h2>'

    def test_lists(self, paragraph) -> None:
        item = {"type": "listItem", "content": [paragraph("a")]}
        assert render_node({"type": "bulletList", "content": [item]}) == "<ul><li><p>a</p></li></ul>"
        assert render_node({"type": "orderedList", "content": [item, item]}) == (
            "<ol><li><p>a</p></li><li><p>a</p></li></ol>"
        )

    def test_task_list(self, paragraph) -> None:
        node = {
            "type": "taskList",
            "content": [
                {"type": "taskItem", "attrs": {"checked": True}, "content": [paragraph("done")]},
                {"type": "taskItem", "attrs": {"checked": False}, "content": [paragraph("todo")]},
            ],
        }
        assert render_node(node) == (
            '<ul data-type="taskList">'
            '<li data-type="taskItem" data-checked="true"><label><input type="checkbox" checked>'
            "<span><p>done</p></span></label></li>"
            '<li data-type="taskItem" data-checked="false"><label><input type="checkbox" >'
            "<span><p>todo</p></span></label></li>"
            "</ul>"
        )

    def test_task_item_without_attrs_is_unchecked(self) -> None:
        assert render_node({"type": "taskItem"}) == (
            '<li data-type="taskItem" data-checked="false"><label><input type="checkbox" >'
            "<span></span></label></li>"
        )

    def test_blockquote(self, paragraph) -> None:
        node = {"type": "blockquote", "content": [paragraph("quoted")]}
        assert render_node(node) == "<blockquote><p>quoted</p></blockquote>"

    def test_code_block_ignores_marks_and_escapes(self, text) -> None:
        node = {"type": "codeBlock", "content": [text("if a < b:", "bold"), text("\n    pass")]}
        assert render_node(node) == (
            '<pre class="bg-gray-100 rounded-md p-4 my-4"><code class="block">'
            "if a &lt; b:\n    pass</code></pre>"
        )

    def test_empty_code_block(self) -> None:
        assert render_node({"type": "codeBlock"}) == (
            '<pre class="bg-gray-100 rounded-md p-4 my-4"><code class="block"></code></pre>'
        )

    def test_void_nodes(self, text) -> None:
        assert render_node({"type": "hardBreak"}) == "<br />"
        assert render_node({"type": "horizontalRule", "content": [text("ignored")]}) == "<hr />"

    def test_paragraph_with_hard_break(self, text) -> None:
        node = {"type": "paragraph", "content": [text("a"), {"type": "hardBreak"}, text("b")]}
        assert render_node(node) == "<p>a<br />b</p>"


class TestTables:
    """Tests for table rendering."""

    def test_plain_table(self, paragraph) -> None:
        node = {
            "type": "table",
            "content": [
                {
                    "type": "tableRow",
                    "content": [
                        {"type": "tableHeader", "content": [paragraph("H")]},
                        {"type": "tableCell", "content": [paragraph("C")]},
                    ],
                }
            ],
        }
        assert render_node(node) == (
            '<table class="border-collapse w-full my-4"><tr>'
            f'<th class="{TH_CLASS}"><p>H</p></th>'
            f'<td class="{TD_CLASS}"><p>C</p></td>'
            "</tr></table>"
        )

    def test_cell_with_all_style_attributes(self) -> None:
        node = {
            "type": "tableCell",
            "attrs": {
                "backgroundColor": "#fff",
                "textColor": "#000",
                "textAlign": "center",
                "verticalAlign": "middle",
            },
        }
        assert render_node(node) == (
            f'<td class="{TD_CLASS}" style="background-color: #fff !important; '
            'color: #000 !important; text-align: center; vertical-align: middle" '
            'data-background-color="#fff" data-text-color="#000"></td>'
        )

    def test_default_alignments_are_omitted(self) -> None:
        node = {"type": "tableHeader", "attrs": {"textAlign": "left", "verticalAlign": "top"}}
        assert render_node(node) == f'<th class="{TH_CLASS}"></th>'

    def test_header_has_no_inline_default_background(self) -> None:
        node = {"type": "tableHeader", "attrs": {"textColor": "red"}}
        assert render_node(node) == (
            f'<th class="{TH_CLASS}" style="color: red !important" data-text-color="red"></th>'
        )

    def test_color_values_are_escaped(self) -> None:
        node = {"type": "tableCell", "attrs": {"backgroundColor": '"><script>'}}
        html = render_node(node)
        assert "<script>" not in html
        assert 'data-background-color="&quot;&gt;&lt;script&gt;"' in html


class TestFallbacks:
    """Tests for missing, unknown and malformed input."""

    def test_none_renders_empty(self) -> None:
        assert render_node(None) == ""

    def test_non_mapping_renders_empty(self) -> None:
        assert render_node("paragraph") == ""  # type: ignore[arg-type]

    def test_unknown_type_renders_children_only(self, text, paragraph) -> None:
        node = {"type": "callout", "content": [paragraph("a"), text("b")]}
        assert render_node(node) == "<p>a</p>b"

    def test_unknown_type_without_children(self) -> None:
        assert render_node({"type": "image", "attrs": {"src": "x.png"}}) == ""

    def test_missing_type_renders_children(self, text) -> None:
        assert render_node({"content": [text("a")]}) == "a"

    def test_malformed_fields_fall_back_to_defaults(self) -> None:
        node = {"type": "paragraph", "attrs": ["center"], "content": "oops"}
        assert render_node(node) == "<p></p>"

    def test_text_node_with_non_string_text(self) -> None:
        assert render_node({"type": "text", "text": 42, "marks": "bold"}) == ""

    def test_non_mapping_children_are_dropped(self, text) -> None:
        node = {"type": "paragraph", "content": [text("a"), None, "b", 3, text("c")]}
        assert render_node(node) == "<p>ac</p>"


class TestDeepNesting:
    """Nodes nested past MAX_NODE_DEPTH render as escaped text."""

    def test_deep_mapping_renders(self) -> None:
        html = render_node(_nested("blockquote", 300, "a < b"))

        assert html.count("<blockquote>") == MAX_NODE_DEPTH
        assert "a &lt; b" in html

    def test_deep_model_chain_renders(self) -> None:
        """Models built directly are bounded at render time."""
        node = RichNode(type="text", text="deep")
        for _ in range(300):
            node = RichNode(type="bulletList", content=[node])

        html = render_node(node)

        assert html.count("<ul>") == MAX_NODE_DEPTH
        assert html.count("</ul>") == MAX_NODE_DEPTH
        assert "deep" in html

    def test_shallow_nesting_is_unchanged(self) -> None:
        html = render_node(_nested("blockquote", 10, "x"))
        assert html == "<blockquote>" * 10 + "x" + "</blockquote>" * 10


class TestDeterminism:
    """Rendering is a pure function of the node."""

    def test_rendering_twice_is_identical(self, text) -> None:
        node = {
            "type": "paragraph",
            "attrs": {"textAlign": "justify"},
            "content": [text("a & b", "bold", "highlight"), {"type": "hardBreak"}],
        }
        assert render_node(node) == render_node(node)

    def test_model_and_mapping_render_the_same(self, paragraph) -> None:
        raw = {"type": "blockquote", "content": [paragraph("x")]}
        assert render_node(RichNode.model_validate(raw)) == render_node(raw)

    def test_input_is_not_mutated(self, text) -> None:
        node = {"type": "paragraph", "content": [text("x", "bold")]}
        snapshot = copy.deepcopy(node)
        render_node(node)
        assert node == snapshot


def _nested(node_type: str, depth: int, leaf: str) -> dict:
    node: dict = {"type": "text", "text": leaf}
    for _ in range(depth):
        node = {"type": node_type, "content": [node]}
    return node
