#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/logging_utils.py
"""Logging setup for the mdreflow command line.

Library modules only create loggers with ``logging.getLogger(__name__)``; they
never attach handlers. :func:`configure_logging` is called once by the CLI.
Diagnostics always go to stderr so stdout carries nothing but Markdown.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from mdreflow.exceptions import ValidationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name (any case) or number into a logging level.

    Raises
    ------
    ValidationError
        If a name is not one of the standard level names
    """
    if isinstance(log_level, int):
        return log_level
    name = str(log_level).strip().upper()
    if name not in LOG_LEVELS:
        raise ValidationError(
            f"Unknown log level {log_level!r}; expected one of {', '.join(LOG_LEVELS)}",
            parameter_name="log_level",
            parameter_value=log_level,
        )
    return getattr(logging, name)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optionally file) handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name, e.g. "INFO"
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Include timestamps and logger names in every record

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_log_level(log_level)
    formatter = logging.Formatter(
        _TRACE_FORMAT if trace_mode else _PLAIN_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.debug("Logging to file: %s", log_file)

    return root_logger
