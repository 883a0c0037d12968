"""Composite registry — one resolution entry point across many graphs.

Graphs are registered during setup, in order. Registration order is
precedence: when two graphs declare the same destination name, the
graph registered first wins, on every call.
"""

import logging
from collections.abc import Iterable, Iterator

from waypoint.config import NavConfig
from waypoint.errors import ConfigurationError, UnknownDestination
from waypoint.routing.destination import Destination
from waypoint.routing.graph import Graph
from waypoint.routing.resolver import PathMatch, PathResolver, destination_name, match_destination

logger = logging.getLogger("waypoint.routing")


class CompositeRegistry:
    """Resolves paths across an ordered sequence of graphs.

    Usage::

        registry = CompositeRegistry([main, feature])
        registry.resolve("SecondDestination/Ciao/2")   # from main
        registry.resolve("testname/x")                 # from feature
        registry.title("ThirdDestination/Hello")       # "Hello"

    The registry holds references to graphs it did not create; it never
    copies or mutates their destinations. Registering a graph freezes it,
    so every destination must be added first. Registration itself is
    single-writer and closes at ``freeze()``, which the first lookup
    calls implicitly.
    """

    __slots__ = ("_frozen", "_resolvers", "config")

    def __init__(
        self,
        graphs: Iterable[Graph | PathResolver] = (),
        *,
        config: NavConfig | None = None,
    ) -> None:
        self.config = config or NavConfig()
        self._resolvers: list[PathResolver] = []
        self._frozen = False
        for graph in graphs:
            self.register(graph)

    def __repr__(self) -> str:
        names = ", ".join(resolver.graph.name for resolver in self._resolvers)
        return f"CompositeRegistry([{names}], strict={self.config.strict})"

    # -- Registration --

    def register(self, graph: Graph | PathResolver) -> PathResolver:
        """Append a graph (or a ready-made resolver) after those already registered."""
        if self._frozen:
            msg = (
                "Cannot register graphs after the registry has started resolving paths. "
                "Register every graph during setup."
            )
            raise ConfigurationError(msg)
        if isinstance(graph, PathResolver):
            resolver = graph
        elif isinstance(graph, Graph):
            resolver = PathResolver(graph, strict=self.config.strict)
        else:
            msg = f"Expected a Graph or PathResolver, got {type(graph).__name__}."
            raise TypeError(msg)
        self._resolvers.append(resolver)
        logger.debug(
            "registry: registered graph %s at position %d",
            resolver.graph.name,
            len(self._resolvers) - 1,
        )
        return resolver

    def freeze(self) -> None:
        """Close registration. Lookups call this implicitly."""
        self._frozen = True

    # -- Introspection --

    @property
    def graphs(self) -> tuple[Graph, ...]:
        """Registered graphs, in precedence order."""
        return tuple(resolver.graph for resolver in self._resolvers)

    def destinations(self) -> Iterator[tuple[Graph, Destination]]:
        """Yield ``(graph, destination)`` pairs in precedence order."""
        for resolver in self._resolvers:
            for destination in resolver.graph:
                yield resolver.graph, destination

    # -- Resolution --

    def find(self, path: str) -> tuple[Graph, Destination] | None:
        """Return the first ``(graph, destination)`` matching *path*. Never raises."""
        self.freeze()
        for resolver in self._resolvers:
            destination = resolver.find(path)
            if destination is not None:
                return resolver.graph, destination
        return None

    def resolve(self, path: str) -> Destination | None:
        """Resolve *path* to a destination from the first graph that declares it.

        Returns ``None`` when no graph matches, or raises
        ``UnknownDestination`` when the registry is configured strict.
        """
        found = self.find(path)
        if found is None:
            return self._miss(path)
        return found[1]

    def match(self, path: str) -> PathMatch | None:
        """Resolve *path* and decode its arguments."""
        destination = self.resolve(path)
        if destination is None:
            return None
        return match_destination(destination, path)

    def title(self, path: str) -> str | None:
        """Compute the screen title for the destination currently showing *path*."""
        from waypoint.title import screen_title

        match = self.match(path)
        if match is None:
            return None
        return screen_title(
            match,
            max_length=self.config.title_max_length,
            ellipsis=self.config.title_ellipsis,
        )

    def _miss(self, path: str) -> None:
        name = destination_name(path)
        if self.config.strict:
            raise UnknownDestination(path, name)
        logger.debug("registry: no graph declares %r", name)
        return None
