"""Read access into nested trees.

Reads are total: a missing key, or a non-mapping met while path remains,
yields the default (``ABSENT`` unless given) rather than raising. Reads
never go through ``__missing__``, so a ``defaultdict`` or ``Counter`` is
left untouched and its missing keys read as absent.
"""

from collections.abc import Mapping
from typing import Any

from roost._internal.types import Key, Path
from roost.maps.absent import ABSENT


def _lookup(node: Mapping[Key, Any], key: Key, default: Any) -> Any:
    try:
        if key not in node:
            return default
        return node[key]
    except (KeyError, TypeError):
        return default


def get(node: Any, key: Key, default: Any = ABSENT) -> Any:
    """Return the value for *key* in *node*, or *default* if missing."""
    if not isinstance(node, Mapping):
        return default
    return _lookup(node, key, default)


def get_in(node: Any, path: Path, default: Any = ABSENT) -> Any:
    """Follow *path* key by key and return the value found there.

    An empty path returns *node* itself.

        >>> get_in({"a": {"b": 1}}, ["a", "b"])
        1
        >>> get_in({"a": 1}, ["a", "b"])
        ABSENT
    """
    current = node
    for key in path:
        if not isinstance(current, Mapping):
            return default
        current = _lookup(current, key, ABSENT)
        if current is ABSENT:
            return default
    return current
