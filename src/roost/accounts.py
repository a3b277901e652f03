"""Account/pet state on top of a cell.

A small illustration of the pieces working together: one cell holds a
node of account name -> account info, and each action is a single
``swap`` with a map function. There is no validation; creating an
existing account overwrites it and deleting a missing one does nothing.

    state = new_state()
    create_account(state, "braden", 22)
    add_pet(state, "braden", "bird", {"name": "Dante", "age": 13, "color": "red"})
    state.read()
    # {'braden': {'age': 22, 'pets': {'bird': {'name': 'Dante', ...}}}}
    delete_account(state, "braden")
"""

from collections.abc import Mapping
from typing import Any

from roost.cell import Cell
from roost.config import CellConfig
from roost.maps import EMPTY, Node, assoc, assoc_in, dissoc

AGE = "age"
PETS = "pets"


def new_state() -> Cell[Node]:
    """Return an empty accounts cell."""
    return Cell(EMPTY, CellConfig(name="accounts"))


def create_account(state: Cell[Node], name: str, age: int) -> Node:
    return state.swap(assoc, name, {AGE: age})


def delete_account(state: Cell[Node], name: str) -> Node:
    return state.swap(dissoc, name)


def add_pet(state: Cell[Node], name: str, species: str, pet_info: Mapping[str, Any]) -> Node:
    """Store *pet_info* under ``[name, "pets", species]``.

    Creates the account entry if it does not exist yet.
    """
    return state.swap(assoc_in, [name, PETS, species], pet_info)
