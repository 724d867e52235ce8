"""The major exported API functions for reformatting Markdown."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/mdreflow/api.py
import logging
from pathlib import Path
from typing import IO, Optional, Union

from mdreflow.ast.nodes import Document
from mdreflow.options.markdown import CommonMarkRendererOptions, MarkdownParserOptions
from mdreflow.parsers.markdown import MarkdownParser
from mdreflow.renderers.commonmark import CommonMarkRenderer
from mdreflow.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def to_ast(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    parser_options: Optional[MarkdownParserOptions] = None,
) -> Document:
    """Parse Markdown into a document tree.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, a path to it, or a stream
    parser_options : MarkdownParserOptions, optional
        Parser configuration

    Returns
    -------
    Document
        Root of the parsed tree

    """
    return MarkdownParser(parser_options).parse(source)


def reformat(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    width: Optional[int] = None,
    options: Optional[CommonMarkRendererOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    output: Optional[Union[str, Path, IO[bytes], IO[str]]] = None,
) -> Optional[str]:
    """Parse Markdown and render it back as canonical CommonMark.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, a path to it, or a stream
    width : int, optional
        Soft wrap width. Overrides ``options.width`` when given.
    options : CommonMarkRendererOptions, optional
        Rendering options
    parser_options : MarkdownParserOptions, optional
        Parser options
    output : str, Path, IO[bytes], or IO[str], optional
        Destination to write to. When omitted the result is returned.

    Returns
    -------
    str or None
        Reformatted Markdown, or None when written to ``output``

    Raises
    ------
    DependencyError
        If mistune is not installed
    RenderingError
        If the parsed tree cannot be rendered

    Examples
    --------
        >>> reformat("Some   *emphasis*\\nhere.")
        'Some *emphasis* here.\\n\\n'

    """
    options = options or CommonMarkRendererOptions()
    if width is not None:
        options = options.create_updated(width=width)

    with debug_timer(logger, "Reformat"):
        doc = to_ast(source, parser_options)
        renderer = CommonMarkRenderer(options)
        if output is not None:
            renderer.render(doc, output)
            return None
        return renderer.render_to_string(doc)


__all__ = ["reformat", "to_ast"]
