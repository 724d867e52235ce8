#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_node_iterator.py
"""Unit tests for the event-based tree iterator."""

import pytest

from mdreflow.ast import (
    BlockQuote,
    Document,
    EventType,
    NodeIterator,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
    walk,
)


def _trace(root):
    return [(event.value, type(node).__name__) for event, node in walk(root)]


@pytest.mark.unit
class TestNodeIterator:
    """Tests for NodeIterator event order."""

    def test_containers_enter_and_exit(self):
        """Test nested containers produce paired events."""
        doc = Document(children=[BlockQuote(children=[Paragraph(children=[Text("hi")])])])
        assert _trace(doc) == [
            ("enter", "Document"),
            ("enter", "BlockQuote"),
            ("enter", "Paragraph"),
            ("enter", "Text"),
            ("exit", "Paragraph"),
            ("exit", "BlockQuote"),
            ("exit", "Document"),
        ]

    def test_leaves_enter_only(self):
        """Test that leaves yield a single enter event."""
        doc = Document(children=[ThematicBreak(), Paragraph(children=[Text("a"), Strong(children=[Text("b")])])])
        trace = _trace(doc)
        assert trace.count(("enter", "ThematicBreak")) == 1
        assert ("exit", "ThematicBreak") not in trace
        assert ("exit", "Text") not in trace
        assert trace[-3:] == [("exit", "Strong"), ("exit", "Paragraph"), ("exit", "Document")]

    def test_empty_container(self):
        """Test an empty document."""
        assert _trace(Document()) == [("enter", "Document"), ("exit", "Document")]

    def test_leaf_root(self):
        """Test iterating a leaf on its own."""
        assert _trace(Text("x")) == [("enter", "Text")]

    def test_done_is_sticky(self):
        """Test that DONE repeats once traversal has finished."""
        iterator = NodeIterator(Document())
        assert iterator.next_event() is EventType.ENTER
        assert iterator.next_event() is EventType.EXIT
        assert iterator.next_event() is EventType.DONE
        assert iterator.node is None
        assert iterator.next_event() is EventType.DONE

    def test_node_attribute_tracks_current(self):
        """Test that the current node is exposed after each event."""
        text = Text("t")
        paragraph = Paragraph(children=[text])
        iterator = NodeIterator(paragraph)
        iterator.next_event()
        assert iterator.node is paragraph
        iterator.next_event()
        assert iterator.node is text
        assert iterator.event is EventType.ENTER

    def test_single_pass(self):
        """Test that an exhausted iterator yields nothing more."""
        iterator = NodeIterator(Document(children=[Paragraph()]))
        assert len(list(iterator)) == 4
        assert list(iterator) == []
