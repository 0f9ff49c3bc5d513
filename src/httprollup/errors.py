"""Exceptions raised by httprollup."""
from __future__ import annotations

import typing as t


class RollupError(Exception):
    """Base class for all httprollup errors."""


class ConfigurationError(RollupError, ValueError):
    """Raised when the rollup configuration is unusable (e.g. empty DELIM)."""


class StructuralConflictError(RollupError, TypeError):
    """Raised when a dotted name collides with an existing value.

    Happens when an intermediate level already holds a scalar or list
    (``a=1;a.b=2``), or when a leaf value would land on an object
    (``a.b=1;a=2``).
    """

    def __init__(self, name: str, path: t.Iterable[str]) -> None:
        self.name = name
        self.path = tuple(path)
        super().__init__(
            f"Cannot store {name!r}: {'.'.join(self.path)!r} already holds"
            " a value of a different kind."
        )
