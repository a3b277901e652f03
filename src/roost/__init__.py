"""Roost — nested immutable maps and atomic cells.

Read and update deeply nested data without mutating it, and keep the
one piece of state that must change in a thread-safe cell.
Built for free-threaded Python.

Nested maps::

    from roost import assoc_in, get_in, update_in

    people = {"braden": {"pets": {"cats": {"luke": {"age": 1}}}}}
    older = update_in(people, ["braden", "pets", "cats", "luke", "age"], lambda n: n + 1)
    get_in(older, ["braden", "pets", "cats", "luke", "age"])   # 2

Shared state::

    from roost import EMPTY, Cell, assoc

    state = Cell(EMPTY)
    state.swap(assoc, "braden", {"age": 22})
    state.read()   # Node({'braden': Node({'age': 22})})
"""

from importlib import import_module

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0.dev0"
__all__ = [
    "ABSENT",
    "EMPTY",
    "Cell",
    "CellConfig",
    "ChangeBus",
    "ChangeEvent",
    "ConfigurationError",
    "ContentionError",
    "InvalidStateError",
    "Node",
    "PathError",
    "RoostError",
    "assoc",
    "assoc_in",
    "dissoc",
    "freeze",
    "get",
    "get_in",
    "thaw",
    "update",
    "update_in",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ABSENT": "roost.maps",
    "EMPTY": "roost.maps",
    "Node": "roost.maps",
    "assoc": "roost.maps",
    "assoc_in": "roost.maps",
    "dissoc": "roost.maps",
    "freeze": "roost.maps",
    "get": "roost.maps",
    "get_in": "roost.maps",
    "thaw": "roost.maps",
    "update": "roost.maps",
    "update_in": "roost.maps",
    "Cell": "roost.cell",
    "CellConfig": "roost.config",
    "ChangeBus": "roost.events",
    "ChangeEvent": "roost.events",
    "ConfigurationError": "roost.errors",
    "ContentionError": "roost.errors",
    "InvalidStateError": "roost.errors",
    "PathError": "roost.errors",
    "RoostError": "roost.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
