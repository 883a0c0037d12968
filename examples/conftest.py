"""Shared pytest configuration for waypoint examples.

Each example directory holds an ``app.py`` that declares its graphs and
registry at import time. Registering a graph freezes it, so a module
loaded once could not be reused by a test that adds destinations. The
``example_app`` fixture therefore executes ``app.py`` afresh per test and
hands back the module, giving access to its graphs, decorated screen
functions, and ``registry``.
"""

from pathlib import Path
from types import ModuleType
import importlib.util

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> ModuleType:
    """Execute the sibling ``app.py`` under a private module name and return it."""
    app_file = Path(request.path).with_name("app.py")
    loader_spec = importlib.util.spec_from_file_location(
        f"waypoint_example_{app_file.parent.name}", app_file
    )
    if loader_spec is None or loader_spec.loader is None:
        pytest.fail(f"cannot load example module from {app_file}")
    module = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(module)
    return module
