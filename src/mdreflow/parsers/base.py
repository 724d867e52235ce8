#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/parsers/base.py
"""Base class for parsers that build a document tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdreflow.ast import Document
from mdreflow.exceptions import InvalidOptionsError
from mdreflow.options.base import BaseParserOptions
from mdreflow.utils.io_utils import read_text_content


class BaseParser(ABC):
    """Abstract base class for all parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse the input into a Document tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Source text, a path to it, or a stream

        Returns
        -------
        Document
            Root of the parsed tree

        """

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        return read_text_content(input_data)

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )
