"""Shared pytest configuration for roost tests."""

import pytest


@pytest.fixture(scope="module")
def anyio_backend() -> str:
    """roost.events is built on asyncio; run anyio-marked tests on asyncio only."""
    return "asyncio"
