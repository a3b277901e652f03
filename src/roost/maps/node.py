"""Immutable mapping node for nested trees.

Implements ``Mapping`` over a private dict that is never mutated after
construction. Mutators in ``roost.maps.update`` copy only the nodes on a
modified path and hand the copy over with ``Node._adopt`` so unmodified
children are shared by reference.
"""

from collections.abc import Iterator, Mapping, Set
from typing import Any

from roost._internal.types import Key
from roost.maps.absent import ABSENT


class Node(Mapping[Key, Any]):
    """Immutable, hashable mapping from key to value.

    Compares equal to any mapping with the same items once frozen, plain
    ``dict`` included. Values are frozen on construction, so a list is
    stored as a tuple and still compares equal to the list it came from::

        node = Node({"braden": {"age": 22, "tags": ["a"]}})
        node["braden"]["tags"]                            # ('a',)
        node == {"braden": {"age": 22, "tags": ["a"]}}   # True
    """

    __slots__ = ("_data", "_hash")

    _data: dict[Key, Any]
    _hash: int | None

    def __init__(self, data: Mapping[Key, Any] | None = None, **kwargs: Any) -> None:
        items: dict[Key, Any] = {}
        if data is not None:
            for key, value in data.items():
                items[key] = freeze(value)
        for key, value in kwargs.items():
            items[key] = freeze(value)
        for value in items.values():
            _check_storable(value)
        object.__setattr__(self, "_data", items)
        object.__setattr__(self, "_hash", None)

    @classmethod
    def _adopt(cls, data: dict[Key, Any]) -> "Node":
        """Wrap *data* without copying or freezing. Caller gives up *data*."""
        node = object.__new__(cls)
        object.__setattr__(node, "_data", data)
        object.__setattr__(node, "_hash", None)
        return node

    def __getitem__(self, key: Key) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._data
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Key]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Node):
            return self is other or self._data == other._data
        if isinstance(other, Mapping):
            try:
                return self._data == Node(other)._data
            except TypeError:
                # Holds ABSENT, so it cannot equal any Node
                return False
        return NotImplemented

    def __hash__(self) -> int:
        cached = self._hash
        if cached is None:
            cached = hash(frozenset(self._data.items()))
            object.__setattr__(self, "_hash", cached)
        return cached

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[type["Node"], tuple[dict[Key, Any]]]:
        return (type(self), (self._data,))

    def __copy__(self) -> "Node":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Node":
        return self

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"Node({{{items}}})"

    def to_dict(self) -> dict[Key, Any]:
        """Return a plain, mutable deep copy (see ``thaw``)."""
        return thaw(self)


EMPTY = Node._adopt({})


def _check_storable(value: Any) -> None:
    if value is ABSENT:
        msg = "ABSENT marks a missing key and cannot be stored in a Node"
        raise TypeError(msg)


def freeze(value: Any) -> Any:
    """Convert plain data to its immutable form.

    Mappings become ``Node``, lists and tuples become tuples, sets become
    frozensets. Nodes and scalars are returned as-is, so freezing an
    existing tree is free and keeps sharing intact.
    """
    if isinstance(value, Node):
        return value
    if isinstance(value, Mapping):
        return Node(value)
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    if isinstance(value, Set) and not isinstance(value, frozenset):
        return frozenset(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Convert a frozen tree back to plain dicts and lists (e.g. for JSON).

    Frozensets become sets but their members are left frozen, since set
    members must stay hashable.
    """
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    if isinstance(value, frozenset):
        return set(value)
    return value
