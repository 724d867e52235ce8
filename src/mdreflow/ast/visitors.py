#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/ast/visitors.py
"""Visitor base class for event-driven node processing.

Visitors receive one call per traversal event. Every visit method takes the
node and an ``entering`` flag: True for the enter event of a container (and
the single event of a leaf), False for the exit event of a container.

Because every method is abstract, a concrete visitor that forgets a node kind
cannot be instantiated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from mdreflow.ast.nodes import (
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
    Paragraph,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
)


class NodeVisitor(ABC):
    """Abstract base class for enter/exit node visitors."""

    @abstractmethod
    def visit_document(self, node: Document, entering: bool) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote, entering: bool) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_list(self, node: List, entering: bool) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem, entering: bool) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_heading(self, node: Heading, entering: bool) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, entering: bool) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock, entering: bool) -> Any:
        """Visit a CodeBlock leaf."""

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock, entering: bool) -> Any:
        """Visit an HTMLBlock leaf."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak, entering: bool) -> Any:
        """Visit a ThematicBreak leaf."""

    @abstractmethod
    def visit_text(self, node: Text, entering: bool) -> Any:
        """Visit a Text leaf."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak, entering: bool) -> Any:
        """Visit a LineBreak leaf."""

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak, entering: bool) -> Any:
        """Visit a SoftBreak leaf."""

    @abstractmethod
    def visit_code(self, node: Code, entering: bool) -> Any:
        """Visit a Code leaf."""

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline, entering: bool) -> Any:
        """Visit an HTMLInline leaf."""

    @abstractmethod
    def visit_strong(self, node: Strong, entering: bool) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis, entering: bool) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_link(self, node: Link, entering: bool) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image, entering: bool) -> Any:
        """Visit an Image node."""
