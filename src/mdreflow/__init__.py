"""mdreflow - canonical re-serialization of CommonMark documents.

mdreflow parses Markdown into a small document tree and renders that tree back
as normalized CommonMark: paragraphs re-wrapped to a fixed width, ATX headings,
``-`` bullets, fenced or indented code, and backslash escapes wherever plain
text could otherwise be read as markup. Rendering its own output again yields
the same text, so it can be used as a formatter or as a check in CI.

Requirements
------------
- Python 3.10+
- mistune 3 for parsing (the renderer itself has no third-party dependency)

Examples
--------
Reformat a string:

    >>> from mdreflow import reformat
    >>> reformat("# Title\\n\\nSome   text.")
    '# Title\\n\\nSome text.\\n\\n'

Render a tree built by hand:

    >>> from mdreflow.ast import Document, Paragraph, Text
    >>> from mdreflow import render_commonmark
    >>> render_commonmark(Document(children=[Paragraph(children=[Text("hello *world*")])]))
    'hello \\\\*world\\\\*\\n\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/mdreflow/__init__.py

from mdreflow.api import reformat, to_ast
from mdreflow.ast import Document, EventType, NodeIterator
from mdreflow.exceptions import (
    DependencyError,
    MdreflowError,
    ParsingError,
    PrefixImbalanceError,
    RenderingError,
    UnknownNodeKindError,
    ValidationError,
)
from mdreflow.options import CommonMarkRendererOptions, MarkdownParserOptions
from mdreflow.parsers import MarkdownParser, parse_markdown
from mdreflow.renderers import CommonMarkRenderer, render_commonmark

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "CommonMarkRenderer",
    "CommonMarkRendererOptions",
    "DependencyError",
    "Document",
    "EventType",
    "MarkdownParser",
    "MarkdownParserOptions",
    "MdreflowError",
    "NodeIterator",
    "ParsingError",
    "PrefixImbalanceError",
    "RenderingError",
    "UnknownNodeKindError",
    "ValidationError",
    "parse_markdown",
    "reformat",
    "render_commonmark",
    "to_ast",
]
