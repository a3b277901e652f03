"""Cell configuration.

CellConfig is a frozen dataclass — immutable after creation, checked once
when it is built.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from roost.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class CellConfig:
    """Per-cell options. All fields have defaults::

        config = CellConfig(name="accounts", validator=lambda v: isinstance(v, Mapping))
    """

    # Shown in reprs, log records, and change events
    name: str = "cell"

    # Called with every candidate value; a falsy result rejects it
    validator: Callable[[Any], bool] | None = None

    # Conflicting attempts tolerated by swap before giving up (0 = no limit)
    max_retries: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            msg = "CellConfig.name must not be empty"
            raise ConfigurationError(msg)
        if self.max_retries < 0:
            msg = f"CellConfig.max_retries must be >= 0, got {self.max_retries}"
            raise ConfigurationError(msg)
