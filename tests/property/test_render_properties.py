#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/property/test_render_properties.py
"""Property-based tests for the CommonMark renderer.

Test Coverage:
- Property: lines never exceed the width unless they hold a single word
- Property: blocks are separated by at most one blank line
- Property: special characters in text get exactly one escape marker
- Property: nested container prefixes compose and are released
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import content_lines, para, render

from mdreflow.ast import BlockQuote, CodeBlock, Heading, List, ListItem, Text, ThematicBreak

words = st.lists(st.text(alphabet="abcdefghij", min_size=1, max_size=15), min_size=1, max_size=40)

blocks = st.lists(
    st.sampled_from(["para", "heading", "rule", "code", "quote", "list"]),
    min_size=1,
    max_size=8,
)


def build_block(kind: str):
    if kind == "para":
        return para("some text here")
    if kind == "heading":
        return Heading(level=2, children=[Text("heading")])
    if kind == "rule":
        return ThematicBreak()
    if kind == "code":
        return CodeBlock(content="x = 1\n")
    if kind == "quote":
        return BlockQuote(children=[para("quoted"), para("again")])
    return List(children=[ListItem(children=[para("item")]), ListItem(children=[para("next")])])


def escape_reference(text: str) -> str:
    """Escape text the way a reader expects, one character at a time."""
    out = []
    for index, char in enumerate(text):
        following = text[index + 1 : index + 2]
        if char in "*_[]<>\\":
            out.append("\\" + char)
        elif char == "&" and following.isalpha():
            out.append("\\&")
        elif char == "!" and following == "[":
            out.append("\\!")
        else:
            out.append(char)
    return "".join(out)


@pytest.mark.property
class TestWidthProperties:
    """Properties of wrapped paragraph text."""

    @given(words, st.integers(min_value=1, max_value=80))
    def test_lines_fit_width(self, word_list, width):
        """Test every line fits the width or is a single overlong word."""
        output = render(para(" ".join(word_list)), width=width)
        for line in content_lines(output):
            assert len(line) <= width or " " not in line

    @given(words, st.integers(min_value=4, max_value=80))
    def test_quoted_lines_fit_width(self, word_list, width):
        """Test the quote prefix counts toward the width."""
        output = render(BlockQuote(children=[para(" ".join(word_list))]), width=width)
        for line in content_lines(output):
            assert line.startswith("> ")
            assert len(line) <= width or " " not in line[2:]

    @given(words, st.integers(min_value=1, max_value=80))
    def test_wrapping_keeps_words(self, word_list, width):
        """Test wrapping only replaces spaces with line breaks."""
        output = render(para(" ".join(word_list)), width=width)
        assert output.split() == word_list

    @given(words)
    def test_width_zero_single_line(self, word_list):
        """Test width 0 leaves the paragraph on one line."""
        text = " ".join(word_list)
        assert render(para(text), width=0) == text + "\n\n"


@pytest.mark.property
class TestBlockSeparation:
    """Properties of line break coalescing between blocks."""

    @given(blocks, st.integers(min_value=0, max_value=80))
    def test_at_most_one_blank_line(self, kinds, width):
        """Test no sequence of blocks yields two blank lines in a row."""
        output = render(*[build_block(kind) for kind in kinds], width=width)
        assert "\n\n\n" not in output
        assert output.endswith("\n\n")
        assert not output.endswith("\n\n\n")

    @given(st.lists(st.sampled_from(["para", "heading", "rule"]), min_size=1, max_size=8))
    def test_one_blank_line_between_top_level_blocks(self, kinds):
        """Test single-line blocks are separated by exactly one blank line."""
        output = render(*[build_block(kind) for kind in kinds])
        assert output.split("\n\n")[:-1] == [line for line in output.split("\n") if line]


@pytest.mark.property
class TestEscapingProperties:
    """Properties of text escaping."""

    @given(st.text(alphabet="ab*_[]<>\\&!", min_size=1, max_size=40))
    def test_escape_markers(self, text):
        """Test each special character is preceded by one escape marker."""
        assert render(para(text), width=0) == escape_reference(text) + "\n\n"


@pytest.mark.property
class TestPrefixProperties:
    """Properties of nested container prefixes."""

    @given(st.integers(min_value=1, max_value=6))
    def test_nested_quotes(self, depth):
        """Test quote prefixes stack once per level."""
        node = para("x")
        for _ in range(depth):
            node = BlockQuote(children=[node])
        assert render(node) == "> " * depth + "x\n\n"

    @given(st.lists(st.booleans(), min_size=1, max_size=6))
    def test_mixed_nesting(self, quote_levels):
        """Test quote and list markers compose from outside in."""
        node = para("x")
        for is_quote in reversed(quote_levels):
            node = BlockQuote(children=[node]) if is_quote else List(children=[ListItem(children=[node])])
        markers = "".join("> " if is_quote else "- " for is_quote in quote_levels)
        assert render(node) == markers + "x\n\n"
