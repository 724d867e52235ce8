#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the mdreflow parser and renderer.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from __future__ import annotations

from mdreflow.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdreflow.options.markdown import CommonMarkRendererOptions, MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "CommonMarkRendererOptions",
    "MarkdownParserOptions",
]
