#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that build a document tree from source text."""

from mdreflow.parsers.base import BaseParser
from mdreflow.parsers.markdown import MarkdownParser, parse_markdown

__all__ = ["BaseParser", "MarkdownParser", "parse_markdown"]
