"""Roost exception hierarchy.

Shared across maps, cells, and events so every module raises and catches
the same types. A missing key is never an error: lookups return
``ABSENT`` instead.
"""

from dataclasses import dataclass
from typing import Any


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when a cell configuration is invalid."""


@dataclass(frozen=True, slots=True)
class PathError(RoostError):
    """A nested write ran into a value that is not a mapping.

    Raised by ``assoc_in`` and ``update_in`` (and by the single-level
    mutators when the root itself is not a mapping). Scalars on a path
    are never overwritten silently.
    """

    path: tuple[Any, ...]
    depth: int
    found: str

    def __str__(self) -> str:
        walked = list(self.path[: self.depth])
        return f"cannot descend into {self.found} at {walked!r} (path {list(self.path)!r})"


class InvalidStateError(RoostError):
    """A cell's validator rejected a candidate value."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid reference state: {value!r}")


class ContentionError(RoostError):
    """``swap`` gave up after exceeding ``CellConfig.max_retries``."""

    def __init__(self, name: str, attempts: int) -> None:
        self.name = name
        self.attempts = attempts
        super().__init__(f"cell {name!r}: swap abandoned after {attempts} conflicting attempts")
