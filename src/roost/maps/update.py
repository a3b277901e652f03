"""Persistent updates of nested trees.

Every function returns a new ``Node`` and leaves its input untouched.
Only the nodes along the modified path are copied; every other subtree
is reused by reference. When nothing changes, the input node itself is
returned.

Policy for nested writes: a missing intermediate key gets an empty node,
but a non-mapping value in the way raises ``PathError``. Scalars are
never overwritten to make room for a path.

Deleting a nested key composes ``update_in`` with ``dissoc``::

    update_in(people, ["braden", "pets", "fish"], dissoc, "greg")
"""

from collections.abc import Mapping
from typing import Any

from roost._internal.types import Key, Path, Updater
from roost.errors import PathError
from roost.maps.absent import ABSENT
from roost.maps.node import EMPTY, Node, _check_storable, freeze


def _as_node(value: Any, path: tuple[Key, ...], depth: int) -> Node:
    """Coerce *value* to a Node for writing, or raise ``PathError``."""
    if isinstance(value, Node):
        return value
    if value is ABSENT:
        return EMPTY
    if isinstance(value, Mapping):
        return Node(value)
    raise PathError(path=path, depth=depth, found=type(value).__name__)


def assoc(node: Any, key: Key, value: Any, *kvs: Any) -> Node:
    """Return *node* with *key* set to *value*.

    Further key/value pairs may follow and are applied left to right, so
    a later pair wins over an earlier one with the same key::

        assoc(braden, "age", 25, "name", "Braden Arestides")
    """
    if len(kvs) % 2:
        msg = f"assoc expects key/value pairs, got {len(kvs) + 2} trailing arguments"
        raise TypeError(msg)
    current = _as_node(node, (), 0)
    data = current._data
    pairs = [(key, value), *zip(kvs[::2], kvs[1::2], strict=True)]

    updated: dict[Key, Any] | None = None
    for k, v in pairs:
        v = freeze(v)
        _check_storable(v)
        if updated is None:
            if k in data and data[k] is v:
                continue
            updated = dict(data)
        updated[k] = v
    if updated is None:
        return current
    return Node._adopt(updated)


def dissoc(node: Any, *keys: Key) -> Node:
    """Return *node* without *keys*. Keys that are not present are ignored."""
    current = _as_node(node, (), 0)
    present = [k for k in keys if k in current]
    if not present:
        return current
    data = dict(current._data)
    for k in present:
        data.pop(k, None)
    return Node._adopt(data)


def update(node: Any, key: Key, fn: Updater, *args: Any, **kwargs: Any) -> Node:
    """Return *node* with *key* mapped to ``fn(current, *args, **kwargs)``.

    *fn* receives ``ABSENT`` when *key* is missing.
    """
    current = _as_node(node, (), 0)
    return assoc(current, key, fn(current._data.get(key, ABSENT), *args, **kwargs))


def assoc_in(node: Any, path: Path, value: Any) -> Any:
    """Return *node* with the value at *path* set to *value*.

    Missing intermediate nodes are created empty. An empty path replaces
    the whole tree, so ``get_in(assoc_in(n, p, v), p) == v`` for any path.
    """
    keys = tuple(path)
    if not keys:
        return freeze(value)
    return _update_path(node, keys, 0, lambda _: value)


def update_in(node: Any, path: Path, fn: Updater, *args: Any, **kwargs: Any) -> Any:
    """Return *node* with the value at *path* replaced by ``fn(old, *args, **kwargs)``.

    Same as ``assoc_in(node, path, fn(get_in(node, path), *args, **kwargs))``
    but walks the path once. *fn* is called exactly once and receives
    ``ABSENT`` if nothing is stored at *path*.
    """
    keys = tuple(path)
    if not keys:
        return freeze(fn(node, *args, **kwargs))
    return _update_path(node, keys, 0, lambda old: fn(old, *args, **kwargs))


def _update_path(node: Any, keys: tuple[Key, ...], depth: int, leaf: Updater) -> Node:
    current = _as_node(node, keys, depth)
    key = keys[depth]
    child = current._data.get(key, ABSENT)
    if depth == len(keys) - 1:
        return assoc(current, key, leaf(child))
    return assoc(current, key, _update_path(child, keys, depth + 1, leaf))
