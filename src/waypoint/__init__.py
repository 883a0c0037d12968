"""Waypoint — typed route descriptors for screen-based navigation.

Declare destinations, build navigable paths from typed arguments, and
resolve an observed path back to the destination that produced it.

Basic usage::

    from waypoint import CompositeRegistry, Graph

    main = Graph("MainGraph")

    @main.destination(paths=["param1", "param2"])
    def SecondDestination(param1: str, param2: int): ...

    registry = CompositeRegistry([main])

    path = SecondDestination.destination.path("Ciao", 2)  # "SecondDestination/Ciao/2"
    registry.resolve(path)                                 # the SecondDestination descriptor
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "TITLE_KEY",
    "ArgumentError",
    "CompositeRegistry",
    "ConfigurationError",
    "Destination",
    "EncodingMismatch",
    "Graph",
    "MalformedPath",
    "MissingArgument",
    "NavConfig",
    "PathMatch",
    "PathResolver",
    "UnexpectedArgument",
    "UnknownDestination",
    "WaypointError",
    "build_path",
    "decode_segment",
    "encode_segment",
    "route_pattern",
    "screen_title",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "TITLE_KEY": "waypoint.routing.params",
    "ArgumentError": "waypoint.errors",
    "CompositeRegistry": "waypoint.routing.registry",
    "ConfigurationError": "waypoint.errors",
    "Destination": "waypoint.routing.destination",
    "EncodingMismatch": "waypoint.errors",
    "Graph": "waypoint.routing.graph",
    "MalformedPath": "waypoint.errors",
    "MissingArgument": "waypoint.errors",
    "NavConfig": "waypoint.config",
    "PathMatch": "waypoint.routing.resolver",
    "PathResolver": "waypoint.routing.resolver",
    "UnexpectedArgument": "waypoint.errors",
    "UnknownDestination": "waypoint.errors",
    "WaypointError": "waypoint.errors",
    "build_path": "waypoint.routing.builder",
    "decode_segment": "waypoint.routing.encoding",
    "encode_segment": "waypoint.routing.encoding",
    "route_pattern": "waypoint.routing.pattern",
    "screen_title": "waypoint.title",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
