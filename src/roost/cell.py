"""Cell — a single slot of shared mutable state.

A cell holds one immutable value at a time and swaps it wholesale. All
coordinated mutation in a program goes through cells; the values they
hold are never mutated in place.

Free-threading safety:
    - ``read()`` is a single attribute load, never a torn value
    - ``swap()`` computes outside the lock and installs with a
      compare-and-set under a short ``threading.Lock`` section, retrying
      against the newer value on conflict (no lost updates)
    - Watches run after the install, outside the lock

Example::

    counter = Cell(1)
    counter.swap(lambda n: n + 1)   # 2
    counter.reset(1)                # 1
"""

import logging
import threading
from collections.abc import Hashable
from typing import Any, Generic, TypeVar

from roost._internal.types import Updater, Watch
from roost.config import CellConfig
from roost.errors import ContentionError, InvalidStateError

logger = logging.getLogger("roost.cell")

T = TypeVar("T")


class Cell(Generic[T]):
    """Thread-safe holder of one immutable value.

    Only ``reset``, ``swap``, ``compare_and_set`` and their ``_vals``
    variants change the value. A failing update function or validator
    leaves the cell exactly as it was.
    """

    __slots__ = ("_config", "_lock", "_value", "_watches")

    def __init__(self, initial: T, config: CellConfig | None = None) -> None:
        self._config = config or CellConfig()
        self._validate(initial)
        self._value: T = initial
        self._lock = threading.Lock()
        self._watches: dict[Hashable, Watch] = {}

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def config(self) -> CellConfig:
        return self._config

    def __repr__(self) -> str:
        return f"<Cell {self._config.name!r} value={self._value!r}>"

    # -- Reads --

    def read(self) -> T:
        """Return the latest installed value. Never blocks."""
        return self._value

    # -- Writes --

    def reset(self, new_value: T) -> T:
        """Install *new_value* unconditionally and return it."""
        return self.reset_vals(new_value)[1]

    def reset_vals(self, new_value: T) -> tuple[T, T]:
        """Install *new_value* unconditionally; return ``(old, new)``."""
        self._validate(new_value)
        with self._lock:
            old = self._value
            self._value = new_value
        self._notify(old, new_value)
        return old, new_value

    def swap(self, fn: Updater, *args: Any, **kwargs: Any) -> T:
        """Atomically replace the value with ``fn(value, *args, **kwargs)``.

        *fn* may run more than once when other writers get in first, so it
        must not have side effects. Returns the installed value.
        """
        return self.swap_vals(fn, *args, **kwargs)[1]

    def swap_vals(self, fn: Updater, *args: Any, **kwargs: Any) -> tuple[T, T]:
        """Like ``swap`` but return ``(old, new)`` for the winning attempt."""
        max_retries = self._config.max_retries
        conflicts = 0
        while True:
            old = self._value
            new = fn(old, *args, **kwargs)
            self._validate(new)
            with self._lock:
                if self._value is old:
                    self._value = new
                    break
            conflicts += 1
            if max_retries and conflicts > max_retries:
                logger.debug("cell %r: giving up after %d conflicts", self._config.name, conflicts)
                raise ContentionError(self._config.name, conflicts)
            logger.debug("cell %r: value changed during swap, retrying (%d)", self._config.name, conflicts)
        self._notify(old, new)
        return old, new

    def compare_and_set(self, expected: T, new_value: T) -> bool:
        """Install *new_value* only if the current value *is* *expected*.

        Compares by identity, not equality. Returns whether it installed.
        """
        self._validate(new_value)
        with self._lock:
            if self._value is not expected:
                return False
            self._value = new_value
        self._notify(expected, new_value)
        return True

    # -- Watches --

    def add_watch(self, key: Hashable, fn: Watch) -> None:
        """Call ``fn(key, cell, old, new)`` after every install.

        Adding a watch under an existing key replaces it.
        """
        with self._lock:
            self._watches[key] = fn

    def remove_watch(self, key: Hashable) -> None:
        """Remove the watch registered under *key*, if any."""
        with self._lock:
            self._watches.pop(key, None)

    def _notify(self, old: T, new: T) -> None:
        with self._lock:
            watches = list(self._watches.items())
        for key, fn in watches:
            try:
                fn(key, self, old, new)
            except Exception:
                # The new value is already installed; report and keep going
                logger.exception("cell %r: watch %r failed", self._config.name, key)

    def _validate(self, value: Any) -> None:
        validator = self._config.validator
        if validator is not None and not validator(value):
            raise InvalidStateError(value)
