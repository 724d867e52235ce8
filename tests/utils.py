"""Test utilities for the mdreflow test suite.

Small builders for document trees and helpers for checking rendered output.
"""

from mdreflow.ast import Document, Node, Paragraph, Text
from mdreflow.renderers.commonmark import render_commonmark


def para(text: str) -> Paragraph:
    """Build a paragraph holding a single text run."""
    return Paragraph(children=[Text(text)])


def doc(*blocks: Node) -> Document:
    """Build a document from block nodes."""
    return Document(children=list(blocks))


def render(*blocks: Node, width: int = 65) -> str:
    """Render the given blocks as a document."""
    return render_commonmark(doc(*blocks), width=width)


def content_lines(output: str) -> list[str]:
    """Split rendered output into lines, dropping the empty ones."""
    return [line for line in output.split("\n") if line]
