"""Frozen option dataclasses shared by the parser and the renderer.

Options are immutable once built. ``create_updated`` returns a modified copy,
which is how the API applies keyword overrides and the CLI applies
configuration on top of defaults. Every md2jira option is a flag, so the base
``__post_init__`` rejects any non-bool value for a field with a bool default.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes and field listing for frozen option classes."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Unknown field names raise ``TypeError``, and the copy is validated
        again by ``__post_init__``.
        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Names of the fields accepted by this options class."""
        return frozenset(f.name for f in fields(cls))

    def _check_flags(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(f.default, bool) and not isinstance(value, bool):
                raise TypeError(f"{f.name} must be a bool, got {type(value).__name__}")


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Parent of renderer option classes."""

    def __post_init__(self) -> None:
        self._check_flags()


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Parent of parser option classes."""

    def __post_init__(self) -> None:
        self._check_flags()
