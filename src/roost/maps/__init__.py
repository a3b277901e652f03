"""Nested immutable maps.

Read and transform values at any depth of a tree of mappings without
mutating it::

    from roost.maps import Node, assoc_in, get_in, update_in

    people = Node({"anne": {"pets": {"birds": {"allie": {"age": 11}}}}})
    older = update_in(people, ["anne", "pets", "birds", "allie", "age"], lambda n: n + 1)
    get_in(older, ["anne", "pets", "birds", "allie", "age"])   # 12
    get_in(people, ["anne", "pets", "birds", "allie", "age"])  # still 11

Missing keys read as ``ABSENT``; nothing here raises for them.
"""

from roost.maps.absent import ABSENT, is_absent
from roost.maps.access import get, get_in
from roost.maps.node import EMPTY, Node, freeze, thaw
from roost.maps.update import assoc, assoc_in, dissoc, update, update_in

__all__ = [
    "ABSENT",
    "EMPTY",
    "Node",
    "assoc",
    "assoc_in",
    "dissoc",
    "freeze",
    "get",
    "get_in",
    "is_absent",
    "thaw",
    "update",
    "update_in",
]
