"""The ``ABSENT`` marker returned for missing keys.

Distinct from every storable value, ``None`` included.
"""

from typing import Any


class _Absent:
    __slots__ = ()

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        # Pickle by reference to the module-level name
        return "ABSENT"

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Absent":
        return self


ABSENT = _Absent()


def is_absent(value: Any) -> bool:
    """Return True if *value* is the ``ABSENT`` marker."""
    return value is ABSENT
