"""People and their pets — a tour of nested maps and cells.

Run it to print each step::

    python examples/pets/walkthrough.py

The module keeps one global ``state`` cell, the way a small web backend
would keep its in-memory store. Only the ``roost.accounts`` actions
write to it.
"""

import logging

from roost import Cell, CellConfig, Node, assoc, assoc_in, dissoc, get, get_in, update, update_in
from roost.accounts import add_pet, create_account, delete_account, new_state

logger = logging.getLogger("roost.examples.pets")

people = Node(
    {
        "braden": {
            "name": "Braden",
            "age": 22,
            "pets": {
                "cats": {
                    "dana": {"age": 3, "color": "black"},
                    "luke": {"age": 1, "color": "grey"},
                },
                "fish": {
                    "jorge": {"species": "molly", "color": "white"},
                    "greg": {"species": "Tetra", "color": "blue"},
                },
            },
        },
        "anne": {
            "name": "Anne",
            "age": 54,
            "pets": {"birds": {"allie": {"age": 11, "color": "grey"}}},
        },
    }
)

braden = get(people, "braden")


def inc(n: int) -> int:
    return n + 1


# -- One level --

def renamed() -> Node:
    return assoc(braden, "age", 25, "name", "Braden Arestides")


def without_pets() -> Node:
    return dissoc(braden, "pets", "age")


def a_year_older() -> Node:
    return update(braden, "age", inc)


# -- Any depth --

def jorge_species() -> str:
    return get_in(people, ["braden", "pets", "fish", "jorge", "species"])


def allie_painted_red() -> Node:
    return assoc_in(people, ["anne", "pets", "birds", "allie", "color"], "red")


def luke_birthday() -> Node:
    return update_in(people, ["braden", "pets", "cats", "luke", "age"], inc)


def greg_rehomed() -> Node:
    return update_in(people, ["braden", "pets", "fish"], dissoc, "greg")


# -- Shared state --

number = Cell(1, CellConfig(name="number"))


def inc_number() -> int:
    return number.swap(inc)


state = new_state()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    logger.info("renamed:         %r", renamed())
    logger.info("without pets:    %r", without_pets())
    logger.info("a year older:    %r", a_year_older())
    logger.info("jorge's species: %r", jorge_species())
    logger.info("allie painted:   %r", allie_painted_red())
    logger.info("luke's birthday: %r", luke_birthday())
    logger.info("greg rehomed:    %r", greg_rehomed())

    logger.info("number:          %r", inc_number())
    number.reset(1)
    logger.info("number reset:    %r", number.read())

    create_account(state, "braden", 22)
    logger.info("state:           %r", state.read())
    add_pet(state, "braden", "bird", {"name": "Dante", "age": 13, "color": "red"})
    logger.info("state:           %r", state.read())
    delete_account(state, "braden")
    logger.info("state:           %r", state.read())


if __name__ == "__main__":
    main()
