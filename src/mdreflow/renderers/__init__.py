#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn a document tree into output text."""

from mdreflow.renderers.base import BaseRenderer
from mdreflow.renderers.commonmark import CommonMarkRenderer, render_commonmark

__all__ = ["BaseRenderer", "CommonMarkRenderer", "render_commonmark"]
