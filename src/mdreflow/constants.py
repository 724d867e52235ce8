#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/constants.py
"""Constants shared by the mdreflow parser, renderer and CLI."""

from __future__ import annotations

from typing import Final, Literal

# Soft wrap width used when none is given; 0 disables wrapping
DEFAULT_WIDTH: Final[int] = 65

OrderedListMarker = Literal["fixed", "sequential"]
DEFAULT_ORDERED_LIST_MARKER: OrderedListMarker = "fixed"

# Block prefixes pushed while inside a container
BLOCK_QUOTE_PREFIX: Final[str] = "> "
BULLET_ITEM_MARKER: Final[str] = "- "
BULLET_ITEM_PREFIX: Final[str] = "  "
ORDERED_ITEM_MARKER: Final[str] = "1.  "
ORDERED_ITEM_MIN_WIDTH: Final[int] = 4
CODE_BLOCK_INDENT: Final[str] = "    "

THEMATIC_BREAK: Final[str] = "-----"
MIN_CODE_FENCE_LENGTH: Final[int] = 3

ESCAPE_MARKER: Final[str] = "\\"

# Always escaped inside text spans
ALWAYS_ESCAPED: Final[frozenset[str]] = frozenset("*_[]<>\\")
# Escaped only at the start of a line, where they could open a block
LINE_START_ESCAPED: Final[frozenset[str]] = frozenset("-+#=")
# Escaped only after a digit, where they could complete an ordered list marker
AFTER_DIGIT_ESCAPED: Final[frozenset[str]] = frozenset(".)")

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

ENV_PREFIX: Final[str] = "MDREFLOW_"
