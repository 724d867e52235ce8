#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_commonmark_renderer.py
"""Unit tests for CommonMarkRenderer.

Tests cover:
- Rendering every node kind
- Block separation and container prefixes
- Wrapping of paragraph text
- Ordered list marker styles
- Error handling for malformed trees
- Output to strings, bytes, paths and streams

"""

from dataclasses import dataclass, field
from io import BytesIO, StringIO
from typing import Any, Optional

import pytest
from utils import doc, para, render

from mdreflow.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
)
from mdreflow.exceptions import InvalidOptionsError, RenderingError, UnknownNodeKindError
from mdreflow.options import CommonMarkRendererOptions, MarkdownParserOptions
from mdreflow.renderers.commonmark import CommonMarkRenderer, render_commonmark


@dataclass
class Footnote(Node):
    """A node kind the renderer does not know."""

    label: str
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any, entering: bool) -> Any:
        return visitor.visit_footnote(self, entering)


def items(*texts: str) -> list:
    return [ListItem(children=[para(text)]) for text in texts]


@pytest.mark.unit
class TestBasicRendering:
    """Tests for basic node rendering."""

    def test_render_empty_document(self):
        """Test an empty document still ends with a line break."""
        assert render() == "\n"

    def test_escaped_paragraph(self):
        """Test literal asterisks in text are escaped."""
        assert render(para("hello *world*")) == "hello \\*world\\*\n\n"

    def test_block_quote(self, quoted_paragraph):
        """Test a quoted paragraph."""
        assert render_commonmark(quoted_paragraph) == "> hi\n\n"

    def test_heading(self):
        """Test ATX heading output."""
        assert render(Heading(level=2, children=[Text("Title")])) == "## Title\n\n"

    def test_heading_never_wraps(self):
        """Test that headings ignore the width."""
        heading = Heading(level=1, children=[Text("a long heading text")])
        assert render(heading, width=5) == "# a long heading text\n\n"

    def test_paragraph_after_heading(self):
        """Test the wrap state is restored after a heading."""
        output = render(Heading(level=3, children=[Text("Head")]), para("aaaa bbbb cccc"), width=10)
        assert output == "### Head\n\naaaa bbbb\ncccc\n\n"

    def test_thematic_break(self):
        """Test thematic breaks are separated by blank lines."""
        assert render(para("a"), ThematicBreak(), para("b")) == "a\n\n-----\n\nb\n\n"

    def test_html_block_verbatim(self):
        """Test raw HTML blocks are not escaped."""
        assert render(HTMLBlock(content="<div>*x*</div>")) == "<div>*x*</div>\n\n"

    def test_consecutive_paragraphs(self):
        """Test paragraphs are separated by exactly one blank line."""
        assert render(para("one"), para("two"), para("three")) == "one\n\ntwo\n\nthree\n\n"


@pytest.mark.unit
class TestInlineRendering:
    """Tests for inline node rendering."""

    def test_strong_and_emphasis(self):
        """Test strong and emphasis markers."""
        paragraph = Paragraph(children=[Strong(children=[Text("b")]), Text(" "), Emphasis(children=[Text("i")])])
        assert render(paragraph) == "**b** *i*\n\n"

    def test_soft_break_becomes_space(self):
        """Test soft breaks render as spaces."""
        paragraph = Paragraph(children=[Text("a"), SoftBreak(), Text("b")])
        assert render(paragraph) == "a b\n\n"

    def test_line_break(self):
        """Test hard breaks render as a backslash at line end."""
        paragraph = Paragraph(children=[Text("a"), LineBreak(), Text("b")])
        assert render(paragraph) == "a\\\nb\n\n"

    def test_code_span(self):
        """Test a simple code span is neither escaped nor padded."""
        paragraph = Paragraph(children=[Text("run "), Code("a*b")])
        assert render(paragraph) == "run `a*b`\n\n"

    def test_code_span_containing_backticks(self):
        """Test code spans use a longer backtick run than their content."""
        assert render(Paragraph(children=[Code("a`b")])) == "``a`b``\n\n"

    def test_code_span_padded_at_backtick_edge(self):
        """Test padding when content starts with a backtick."""
        assert render(Paragraph(children=[Code("`x")])) == "`` `x ``\n\n"

    def test_inline_html_verbatim(self):
        """Test inline HTML is not escaped."""
        paragraph = Paragraph(children=[Text("a "), HTMLInline("<br>")])
        assert render(paragraph) == "a <br>\n\n"

    def test_link(self):
        """Test inline link output."""
        paragraph = Paragraph(children=[Link(url="http://example.com", children=[Text("site")])])
        assert render(paragraph) == "[site](http://example.com)\n\n"

    def test_link_title_with_quotes(self):
        """Test link titles with embedded quotes."""
        link = Link(url="http://x.com", title='say "hi"', children=[Text("x")])
        assert render(Paragraph(children=[link])) == '[x](http://x.com "say \\"hi\\"")\n\n'

    def test_image(self):
        """Test images render alt text from their children."""
        image = Image(url="img.png", children=[Text("alt "), Emphasis(children=[Text("text")])])
        assert render(Paragraph(children=[image])) == "![alt *text*](img.png)\n\n"

    def test_url_is_escaped(self):
        """Test special characters in destinations are escaped."""
        link = Link(url="a_b", children=[Text("x")])
        assert render(Paragraph(children=[link])) == "[x](a\\_b)\n\n"


@pytest.mark.unit
class TestCodeBlocks:
    """Tests for fenced and indented code blocks."""

    def test_indented_code_block(self):
        """Test a block without info string is indented."""
        assert render(CodeBlock(content="x = 1\n")) == "    x = 1\n\n"

    def test_indented_multiline(self):
        """Test every line of indented code gets the indent."""
        assert render(CodeBlock(content="a\nb\n")) == "    a\n    b\n\n"

    def test_fenced_code_block(self):
        """Test a block with info string is fenced."""
        assert render(CodeBlock(content="x = 1\n", info="python")) == "``` python\nx = 1\n```\n\n"

    def test_fenced_code_escaped_by_default(self):
        """Test fenced content is escaped by default."""
        assert render(CodeBlock(content="a*b\n", info="py")) == "``` py\na\\*b\n```\n\n"

    def test_fenced_code_unescaped_option(self):
        """Test fenced content kept literal when escaping is off."""
        options = CommonMarkRendererOptions(escape_fenced_code=False)
        output = CommonMarkRenderer(options).render_to_string(doc(CodeBlock(content="a*b\n", info="py")))
        assert output == "``` py\na*b\n```\n\n"

    def test_fence_longer_than_content_backticks(self):
        """Test fence length grows past backtick runs in the content."""
        assert render(CodeBlock(content="```\n", info="md")) == "```` md\n```\n````\n\n"

    def test_code_block_not_wrapped(self):
        """Test code content ignores the width."""
        content = "aaa bbb ccc ddd eee\n"
        assert render(CodeBlock(content=content), width=5) == "    " + content + "\n"

    def test_code_block_after_paragraph(self):
        """Test code blocks are separated from preceding text."""
        assert render(para("see"), CodeBlock(content="x\n")) == "see\n\n    x\n\n"


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_bullet_list(self, two_item_list):
        """Test bulleted items with paragraph children."""
        assert render_commonmark(two_item_list) == "- a\n\n- b\n\n"

    def test_item_continuation_indent(self):
        """Test later blocks in an item are indented under the marker."""
        item = ListItem(children=[para("a"), para("b")])
        assert render(List(children=[item])) == "- a\n  \n  b\n\n"

    def test_wrapped_item_text_indented(self):
        """Test wrapped lines inside an item align with its content."""
        item = ListItem(children=[para("aaaa bbbb cccc")])
        assert render(List(children=[item]), width=11) == "- aaaa bbbb\n  cccc\n\n"

    def test_ordered_list_fixed_markers(self):
        """Test the default ordered marker is always 1."""
        lst = List(ordered=True, start=3, children=items("a", "b"))
        assert render(lst) == "1.  a\n\n1.  b\n\n"

    def test_ordered_list_sequential_markers(self):
        """Test true ordinals when requested."""
        options = CommonMarkRendererOptions(ordered_list_marker="sequential")
        lst = List(ordered=True, start=9, children=items("a", "b"))
        assert CommonMarkRenderer(options).render_to_string(doc(lst)) == "9.  a\n\n10. b\n\n"

    def test_sequential_marker_wider_than_minimum(self):
        """Test long ordinals widen the marker and continuation indent."""
        options = CommonMarkRendererOptions(ordered_list_marker="sequential")
        lst = List(ordered=True, start=1000, children=[ListItem(children=[para("a"), para("b")])])
        output = CommonMarkRenderer(options).render_to_string(doc(lst))
        assert output == "1000. a\n      \n      b\n\n"

    def test_nested_list_in_quote(self):
        """Test prefixes compose for nested containers."""
        quote = BlockQuote(children=[List(children=items("a", "b"))])
        assert render(quote) == "> - a\n> \n> - b\n\n"

    def test_item_outside_list_raises(self):
        """Test that a list item needs a list parent."""
        with pytest.raises(RenderingError, match="not attached to a List"):
            render(ListItem(children=[para("a")]))


@pytest.mark.unit
class TestWrapping:
    """Tests for width-based wrapping of text."""

    def test_wraps_paragraph(self):
        """Test paragraph text wraps at the width."""
        assert render(para("aaaa bbbb cccc"), width=10) == "aaaa bbbb\ncccc\n\n"

    def test_wraps_inside_quote(self):
        """Test wrapped quote lines keep the quote prefix."""
        assert render(BlockQuote(children=[para("aaa bbb ccc")]), width=10) == "> aaa bbb\n> ccc\n\n"

    def test_nested_quotes(self):
        """Test nested quote prefixes."""
        quote = BlockQuote(children=[BlockQuote(children=[para("x")])])
        assert render(quote) == "> > x\n\n"

    def test_width_zero_never_wraps(self):
        """Test width 0 disables wrapping."""
        text = " ".join(["word"] * 30)
        assert render(para(text), width=0) == text + "\n\n"

    def test_moved_dash_escaped(self):
        """Test a wrapped word starting with a dash cannot become a bullet."""
        assert render(para("aaaa bbbb -cc"), width=10) == "aaaa bbbb\n\\-cc\n\n"

    def test_wrapped_code_span_keeps_content(self):
        """Test a code span wrapped at an inner space gets no backslash."""
        paragraph = Paragraph(children=[Text("aaaa "), Code("x -y")])
        assert render(paragraph, width=8) == "aaaa `x\n-y`\n\n"

    def test_wrapped_inline_html_keeps_content(self):
        """Test inline HTML wrapped at an inner space gets no backslash."""
        paragraph = Paragraph(children=[Text("aaaa "), HTMLInline("<a -b>")])
        assert render(paragraph, width=8) == "aaaa <a\n-b>\n\n"

    def test_text_after_code_still_escaped(self):
        """Test text moved after a code span keeps its line-start escape."""
        paragraph = Paragraph(children=[Code("x"), Text(" aaaa -b")])
        assert render(paragraph, width=9) == "`x` aaaa\n\\-b\n\n"

    def test_options_flags_ignored(self):
        """Test the reserved options value has no effect."""
        tree = doc(para("a *b* c"))
        assert render_commonmark(tree, 12345) == render_commonmark(tree)


@pytest.mark.unit
class TestErrors:
    """Tests for malformed trees and bad options."""

    def test_unknown_node_kind(self):
        """Test an unknown node kind aborts rendering."""
        with pytest.raises(UnknownNodeKindError) as exc_info:
            render(Paragraph(children=[Footnote(label="1")]))
        assert exc_info.value.node_type == "Footnote"
        assert isinstance(exc_info.value, RenderingError)

    def test_wrong_options_type(self):
        """Test options type validation."""
        with pytest.raises(InvalidOptionsError):
            CommonMarkRenderer(MarkdownParserOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestOutputTargets:
    """Tests for the different render entry points."""

    def test_render_to_bytes(self):
        """Test UTF-8 output."""
        renderer = CommonMarkRenderer()
        assert renderer.render_to_bytes(doc(para("café"))) == "café\n\n".encode("utf-8")

    def test_render_to_path(self, tmp_path):
        """Test writing to a file path."""
        target = tmp_path / "out.md"
        CommonMarkRenderer().render(doc(para("x")), target)
        assert target.read_text(encoding="utf-8") == "x\n\n"

    def test_render_to_streams(self):
        """Test writing to text and binary streams."""
        text_stream, binary_stream = StringIO(), BytesIO()
        renderer = CommonMarkRenderer()
        renderer.render(doc(para("x")), text_stream)
        renderer.render(doc(para("x")), binary_stream)
        assert text_stream.getvalue() == "x\n\n"
        assert binary_stream.getvalue() == b"x\n\n"

    def test_renderer_reusable(self):
        """Test each call runs on fresh state."""
        renderer = CommonMarkRenderer(CommonMarkRendererOptions(width=10))
        tree = doc(BlockQuote(children=[para("aaa bbb ccc")]))
        assert renderer.render_to_string(tree) == renderer.render_to_string(tree)

    def test_subtree_render(self):
        """Test rendering a node other than a document."""
        assert CommonMarkRenderer().render_to_string(para("x")) == "x"  # type: ignore[arg-type]

    def test_document_is_not_mutated(self):
        """Test rendering leaves the tree untouched."""
        tree = Document(children=[para("a *b*")])
        before = repr(tree)
        render_commonmark(tree)
        assert repr(tree) == before
