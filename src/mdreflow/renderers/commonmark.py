#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/renderers/commonmark.py
"""CommonMark rendering from AST.

This module provides the CommonMarkRenderer class which serializes a document
tree back into CommonMark source. The output is canonical rather than a copy
of the original formatting: paragraphs are re-wrapped to a fixed width,
headings are always ATX style, bullets are always ``-`` and special
characters are backslash-escaped where they could be misread as markup.

Rendering pulls enter/exit events from a :class:`~mdreflow.ast.NodeIterator`
and hands each one to a per-call dispatcher. The dispatcher turns a node kind
and event into emitter calls; all column, prefix and line-break bookkeeping
lives in :mod:`mdreflow.renderers._emitter`.

"""

from __future__ import annotations

import logging
import re

from mdreflow.ast import (
    NODE_TYPES,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    EventType,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    NodeIterator,
    NodeVisitor,
    Paragraph,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
)
from mdreflow.constants import (
    BLOCK_QUOTE_PREFIX,
    BULLET_ITEM_MARKER,
    BULLET_ITEM_PREFIX,
    CODE_BLOCK_INDENT,
    DEFAULT_WIDTH,
    MIN_CODE_FENCE_LENGTH,
    ORDERED_ITEM_MARKER,
    ORDERED_ITEM_MIN_WIDTH,
    THEMATIC_BREAK,
)
from mdreflow.exceptions import RenderingError, UnknownNodeKindError
from mdreflow.options.markdown import CommonMarkRendererOptions
from mdreflow.renderers._emitter import Emitter, RenderState
from mdreflow.renderers.base import BaseRenderer
from mdreflow.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

_BACKTICK_RUN = re.compile(r"`+")


def _longest_backtick_run(text: str) -> int:
    return max((len(run) for run in _BACKTICK_RUN.findall(text)), default=0)


class _NodeDispatcher(NodeVisitor):
    """Translate traversal events into emitter calls for one render."""

    def __init__(self, emitter: Emitter, options: CommonMarkRendererOptions):
        self.emitter = emitter
        self.state = emitter.state
        self.options = options

    def dispatch(self, node: Node, event: EventType) -> None:
        """Handle one traversal event.

        Raises
        ------
        UnknownNodeKindError
            If the node is not one of the known node kinds

        """
        if not isinstance(node, NODE_TYPES):
            raise UnknownNodeKindError(node)
        node.accept(self, event is EventType.ENTER)

    # Block containers ------------------------------------------------
    def visit_document(self, node: Document, entering: bool) -> None:
        if not entering:
            if not self.emitter.state.buffer:
                # the start of output already satisfies any break request
                self.emitter.literal("\n")
            self.emitter.request_single_break()
            self.emitter.flush_pending_breaks()

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> None:
        if entering:
            self.emitter.literal(BLOCK_QUOTE_PREFIX)
            self.state.push_prefix(BLOCK_QUOTE_PREFIX)
        else:
            self.state.pop_prefix(BLOCK_QUOTE_PREFIX)
            self.emitter.request_blank_line()

    def visit_list(self, node: List, entering: bool) -> None:
        # items carry all list formatting
        pass

    def visit_list_item(self, node: ListItem, entering: bool) -> None:
        marker, prefix = self._item_layout(node)
        if entering:
            self.emitter.literal(marker)
            self.state.push_prefix(prefix)
        else:
            self.state.pop_prefix(prefix)
            self.emitter.request_single_break()

    def _item_layout(self, node: ListItem) -> tuple[str, str]:
        """Return the marker and continuation prefix for a list item."""
        try:
            parent = node.parent_list
        except ValueError as exc:
            raise RenderingError(str(exc), rendering_stage="dispatch", original_error=exc) from exc

        if not parent.ordered:
            return BULLET_ITEM_MARKER, BULLET_ITEM_PREFIX
        if self.options.ordered_list_marker == "fixed":
            return ORDERED_ITEM_MARKER, " " * len(ORDERED_ITEM_MARKER)

        number = f"{node.ordinal()}."
        width = max(ORDERED_ITEM_MIN_WIDTH, len(number) + 1)
        return number.ljust(width), " " * width

    def visit_heading(self, node: Heading, entering: bool) -> None:
        if entering:
            self.emitter.literal("#" * node.level + " ")
            self.state.suppress_wrap = True
        else:
            self.state.suppress_wrap = False
            self.emitter.request_blank_line()

    def visit_paragraph(self, node: Paragraph, entering: bool) -> None:
        if not entering:
            self.emitter.request_blank_line()

    # Block leaves ----------------------------------------------------
    def visit_code_block(self, node: CodeBlock, entering: bool) -> None:
        emitter = self.emitter
        emitter.request_blank_line()
        if not node.is_fenced:
            emitter.literal(CODE_BLOCK_INDENT)
            self.state.push_prefix(CODE_BLOCK_INDENT)
            emitter.emit(node.content, wrap=False, escape=False)
            self.state.pop_prefix(CODE_BLOCK_INDENT)
        else:
            fence = "`" * max(MIN_CODE_FENCE_LENGTH, _longest_backtick_run(node.content) + 1)
            emitter.literal(fence + " ")
            emitter.emit(node.info or "", wrap=False, escape=False)
            emitter.request_single_break()
            emitter.emit(node.content, wrap=False, escape=self.options.escape_fenced_code)
            emitter.request_single_break()
            emitter.literal(fence)
        emitter.request_blank_line()

    def visit_html_block(self, node: HTMLBlock, entering: bool) -> None:
        self.emitter.request_blank_line()
        self.emitter.emit(node.content, wrap=False, escape=False)
        self.emitter.request_blank_line()

    def visit_thematic_break(self, node: ThematicBreak, entering: bool) -> None:
        self.emitter.request_blank_line()
        self.emitter.literal(THEMATIC_BREAK)
        self.emitter.request_blank_line()

    # Inlines ---------------------------------------------------------
    def visit_text(self, node: Text, entering: bool) -> None:
        self.emitter.emit(node.content, wrap=True, escape=True)

    def visit_line_break(self, node: LineBreak, entering: bool) -> None:
        self.emitter.literal("\\")
        self.emitter.request_single_break()

    def visit_soft_break(self, node: SoftBreak, entering: bool) -> None:
        self.emitter.literal(" ", wrap=True)

    def visit_code(self, node: Code, entering: bool) -> None:
        ticks = "`" * (_longest_backtick_run(node.content) + 1)
        padding = " " if node.content.startswith("`") or node.content.endswith("`") else ""
        self.emitter.literal(ticks)
        self.emitter.emit(padding + node.content + padding, wrap=True, escape=False)
        self.emitter.literal(ticks)

    def visit_html_inline(self, node: HTMLInline, entering: bool) -> None:
        self.emitter.emit(node.content, wrap=True, escape=False)

    def visit_strong(self, node: Strong, entering: bool) -> None:
        self.emitter.literal("**")

    def visit_emphasis(self, node: Emphasis, entering: bool) -> None:
        self.emitter.literal("*")

    def visit_link(self, node: Link, entering: bool) -> None:
        if entering:
            self.emitter.literal("[")
        else:
            self._close_destination(node.url, node.title)

    def visit_image(self, node: Image, entering: bool) -> None:
        if entering:
            self.emitter.literal("![")
        else:
            self._close_destination(node.url, node.title)

    def _close_destination(self, url: str, title: str | None) -> None:
        """Write ``](url "title")`` after link text or alt text."""
        emitter = self.emitter
        emitter.literal("](")
        emitter.emit(url, wrap=False, escape=True)
        if title:
            emitter.literal(' "')
            for index, part in enumerate(title.split('"')):
                if index:
                    emitter.literal('\\"')
                emitter.emit(part, wrap=False, escape=True)
            emitter.literal('"')
        emitter.literal(")")


class CommonMarkRenderer(BaseRenderer):
    """Render AST nodes to CommonMark text.

    Every call to a render method runs on fresh state, so one renderer
    instance can be shared between threads.

    Parameters
    ----------
    options : CommonMarkRendererOptions or None, default = None
        Rendering options (wrap width, ordered list markers, ...)

    Examples
    --------
    Basic usage:

        >>> from mdreflow.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=2, children=[Text("Title")])])
        >>> CommonMarkRenderer().render_to_string(doc)
        '## Title\\n\\n'

    """

    def __init__(self, options: CommonMarkRendererOptions | None = None):
        """Initialize the CommonMark renderer with options."""
        BaseRenderer._validate_options_type(options, CommonMarkRendererOptions, "commonmark")
        options = options or CommonMarkRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: CommonMarkRendererOptions = options

    def render_to_bytes(self, doc: Node) -> bytes:
        """Render a tree to UTF-8 encoded CommonMark.

        Parameters
        ----------
        doc : Node
            Root of the tree, normally a :class:`Document`. Rendering a subtree
            works too but omits the final document line break.

        Returns
        -------
        bytes
            CommonMark source

        Raises
        ------
        UnknownNodeKindError
            If the tree contains a node outside the known kinds
        PrefixImbalanceError
            If block prefixes were not released symmetrically

        """
        emitter = Emitter(RenderState(width=self.options.width))
        dispatcher = _NodeDispatcher(emitter, self.options)

        logger.debug("Rendering %s to CommonMark (width=%d)", type(doc).__name__, self.options.width)
        with debug_timer(logger, "Rendering (commonmark)"):
            for event, node in NodeIterator(doc):
                dispatcher.dispatch(node, event)
            result = emitter.detach()

        logger.debug("Rendered %d bytes of CommonMark", len(result))
        return result


def render_commonmark(root: Node, options: int = 0, *, width: int = DEFAULT_WIDTH) -> str:
    """Render a document tree to CommonMark.

    Parameters
    ----------
    root : Node
        Document root
    options : int, default 0
        Reserved option flags; any value is accepted and has no effect
    width : int, default 65
        Soft wrap width (0 disables wrapping)

    Returns
    -------
    str
        CommonMark source

    """
    renderer = CommonMarkRenderer(CommonMarkRendererOptions(width=width, flags=options))
    return renderer.render_to_string(root)  # type: ignore[arg-type]


__all__ = ["CommonMarkRenderer", "render_commonmark"]
