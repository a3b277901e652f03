"""Shared type aliases used across roost modules."""

from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeAlias

# Node key — strings in practice, any hashable is accepted
Key: TypeAlias = Hashable

# Root-to-leaf sequence of keys
Path: TypeAlias = Iterable[Key]

# Function applied to a current value — receives (current, *args, **kwargs)
Updater: TypeAlias = Callable[..., Any]

# Cell watch — receives (key, cell, old, new)
Watch: TypeAlias = Callable[[Hashable, Any, Any, Any], None]
