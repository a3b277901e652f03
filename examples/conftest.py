"""Shared pytest configuration for roost examples.

Provides the ``example_module`` fixture that loads a fresh copy of the
``walkthrough.py`` file in the same directory as the test.  Each call
re-executes the module in an isolated namespace, so every test starts
with clean state (e.g. the global ``state`` cell is empty).
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_module(request: pytest.FixtureRequest):
    """Load a fresh walkthrough.py from next to the test file."""
    module_path = Path(request.path).parent / "walkthrough.py"
    module_name = f"example_{module_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, module_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
