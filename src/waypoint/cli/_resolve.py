"""Registry import resolution — resolves ``"module:attribute"`` strings to registries.

Shared utility used by every ``waypoint`` subcommand to locate the
navigation registry from a user-supplied import string.
"""

import importlib

from waypoint.routing.graph import Graph
from waypoint.routing.registry import CompositeRegistry


def resolve_registry(import_string: str) -> CompositeRegistry:
    """Resolve an import string to a CompositeRegistry.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"registry"`` (e.g. ``"myapp.nav"`` resolves
    to ``myapp.nav.registry``).

    A single ``Graph`` is wrapped in a one-graph registry. Factory
    functions are called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is neither a registry nor a graph.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "registry"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (CompositeRegistry, Graph)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, Graph):
        return CompositeRegistry([obj])
    if not isinstance(obj, CompositeRegistry):
        msg = (
            f"{import_string!r} resolved to {type(obj).__name__}, "
            "not a waypoint CompositeRegistry or Graph"
        )
        raise TypeError(msg)

    return obj
