#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing and CommonMark rendering."""
# src/mdreflow/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from mdreflow.constants import (
    DEFAULT_ORDERED_LIST_MARKER,
    DEFAULT_WIDTH,
    OrderedListMarker,
)
from mdreflow.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    preserve_html : bool, default True
        Keep raw HTML blocks and inline HTML in the tree. When False they are
        dropped while building the tree.

    """

    preserve_html: bool = field(
        default=True,
        metadata={"help": "Keep raw HTML blocks and inline HTML", "cli_name": "no-preserve-html"},
    )


@dataclass(frozen=True)
class CommonMarkRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-CommonMark rendering.

    Parameters
    ----------
    width : int, default 65
        Soft wrap width in columns. 0 disables wrapping. Lines may still run
        past the width when they contain no breakable space.
    ordered_list_marker : {"fixed", "sequential"}, default "fixed"
        "fixed" renders every ordered item with a ``1.`` marker and lets the
        reader renumber; "sequential" renders each item's true ordinal.
    escape_fenced_code : bool, default True
        Apply text escaping to the body of fenced code blocks.
    flags : int, default 0
        Reserved integer flags. Accepted and carried, with no effect on output.

    Examples
    --------
    Narrow output with numbered list items:
        >>> options = CommonMarkRendererOptions(width=40, ordered_list_marker="sequential")

    """

    width: int = field(
        default=DEFAULT_WIDTH,
        metadata={"help": "Soft wrap width in columns (0 disables wrapping)", "type": int},
    )
    ordered_list_marker: OrderedListMarker = field(
        default=DEFAULT_ORDERED_LIST_MARKER,
        metadata={
            "help": "Ordered list marker style: 'fixed' (always 1.) or 'sequential' (true ordinal)",
            "choices": ["fixed", "sequential"],
        },
    )
    escape_fenced_code: bool = field(
        default=True,
        metadata={"help": "Escape special characters inside fenced code blocks", "cli_name": "no-escape-fenced-code"},
    )
    flags: int = field(
        default=0,
        metadata={"help": "Reserved option flags (currently unused)", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If width is negative or the ordered list marker style is unknown.

        """
        if self.width < 0:
            raise ValueError(f"width must be non-negative, got {self.width}")
        if self.ordered_list_marker not in ("fixed", "sequential"):
            raise ValueError(
                f"ordered_list_marker must be 'fixed' or 'sequential', got {self.ordered_list_marker!r}"
            )
