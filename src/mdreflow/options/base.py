#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/options/base.py
"""Base classes for parser and renderer options.

Options are frozen dataclasses. Each field documents itself through its
``metadata["help"]`` entry, which the command line reuses for its help text.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdreflow.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning and field help lookup."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a copy with some fields replaced.

        Field validation in ``__post_init__`` runs again on the copy.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with the given fields updated

        Raises
        ------
        ValidationError
            If a keyword does not name a field of this options class

        """
        known = {option.name for option in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ValidationError(
                f"{type(self).__name__} has no option(s) {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=kwargs[unknown[0]],
            )
        return replace(self, **kwargs)

    @classmethod
    def field_help(cls, name: str) -> str:
        """Return the help text declared for field ``name``."""
        for option in fields(cls):  # type: ignore[arg-type]
            if option.name == name:
                return option.metadata.get("help", "")
        raise KeyError(name)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options."""


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options."""
