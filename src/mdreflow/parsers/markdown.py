#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/parsers/markdown.py
"""Markdown to AST converter.

This module builds mdreflow document trees from Markdown source using the
mistune parser. It only adapts mistune's token stream to the node classes in
:mod:`mdreflow.ast.nodes`; all parsing decisions are mistune's.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Union

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
from mdreflow.constants import DEPS_MARKDOWN
from mdreflow.exceptions import ParsingError
from mdreflow.options.markdown import MarkdownParserOptions
from mdreflow.parsers.base import BaseParser
from mdreflow.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)


class MarkdownParser(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\n\nThis is **bold**.")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markdown input to parse

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune does not return a token list
        DependencyError
            If mistune is not installed

        """
        import mistune

        markdown_content = self._load_text_content(input_data)
        markdown = mistune.create_markdown(renderer=None)

        with debug_timer(logger, "Parsing (markdown)"):
            tokens, _state = markdown.parse(markdown_content)

        if not isinstance(tokens, list):
            raise ParsingError(
                f"mistune returned {type(tokens).__name__} instead of a token list", parsing_stage="tokenize"
            )

        return Document(children=self._process_tokens(tokens))

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of block-level mistune tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single block-level mistune token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for tokens with no tree counterpart

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            level = token.get("attrs", {}).get("level", 1)
            return Heading(level=level, children=self._process_inline_tokens(token.get("children", [])))
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", "")) if self.options.preserve_html else None
        elif token_type == "blank_line":
            return None

        logger.debug("Skipping unsupported block token %r", token_type)
        return None

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block AST node; fenced blocks without an info string become
            indented blocks on output

        """
        info = token.get("attrs", {}).get("info")
        info = info.strip() if info else None
        return CodeBlock(content=token.get("raw", ""), info=info or None)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1) if ordered else 1
        if start is None:
            start = 1

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if child.get("type") == "list_item"
        ]
        return List(ordered=ordered, start=start, children=items)

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens into inline AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")

        if token_type == "text":
            return Text(content=token.get("raw", ""))
        elif token_type == "emphasis":
            return Emphasis(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "strong":
            return Strong(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "codespan":
            return Code(content=token.get("raw", ""))
        elif token_type == "linebreak":
            return LineBreak()
        elif token_type == "softbreak":
            return SoftBreak()
        elif token_type == "inline_html":
            return HTMLInline(content=token.get("raw", "")) if self.options.preserve_html else None
        elif token_type in ("link", "image"):
            attrs = token.get("attrs", {})
            children = self._process_inline_tokens(token.get("children", []))
            node_class = Link if token_type == "link" else Image
            return node_class(url=attrs.get("url", ""), title=attrs.get("title") or None, children=children)

        logger.debug("Skipping unsupported inline token %r", token_type)
        return None


def parse_markdown(source: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
    """Parse Markdown source with default options.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, a path to it, or a stream

    Returns
    -------
    Document
        Root of the parsed tree

    """
    return MarkdownParser().parse(source)


__all__ = ["MarkdownParser", "parse_markdown"]
