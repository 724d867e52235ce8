#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/utils/decorators.py
"""Utility decorators and context managers for mdreflow parsers and renderers."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, Sequence

from mdreflow.exceptions import DependencyError
from mdreflow.utils.packages import Requirement, check_requirements


def requires_dependencies(converter_name: str, packages: Sequence[Requirement]) -> Callable:
    """Refuse to run a parser method until its packages are importable.

    Parameters
    ----------
    converter_name : str
        Name shown in the error message, e.g. "markdown"
    packages : sequence of (install_name, import_name, version_spec)
        Requirements checked on every call

    Raises
    ------
    DependencyError
        Carrying a ready-to-paste ``pip install`` command for whatever is
        missing or too old

    Examples
    --------
        >>> @requires_dependencies("markdown", DEPS_MARKDOWN)
        ... def parse(self, input_data):
        ...     import mistune

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            report = check_requirements(packages)
            if not report.satisfied:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=report.missing,
                    version_mismatches=report.mismatched,
                    original_import_error=report.import_error,
                ) from report.import_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering (commonmark)")

    Notes
    -----
    Nothing is measured when the logger is not enabled for DEBUG.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.4f}s")
    else:
        yield
