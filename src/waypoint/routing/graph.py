"""Destination graphs — named, independently registered groups of destinations.

Destinations are added during setup. The graph is frozen into a read-only
name lookup when a resolver is built for it, which happens when it is
registered with a ``CompositeRegistry``.
"""

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypeVar

from waypoint.errors import ConfigurationError
from waypoint.routing.destination import Destination

logger = logging.getLogger("waypoint.routing")

F = TypeVar("F", bound=Callable[..., Any])


class Graph:
    """A named set of destinations, keyed by destination name.

    Usage::

        main = Graph("MainGraph")

        @main.destination(paths=["param1", "param2"])
        def SecondDestination(param1: str, param2: int): ...

        main.add(Destination("FifthDestination"))
        main.freeze()
        main["SecondDestination"].pattern  # "SecondDestination/{param1}/{param2}"

    The host framework mounts the graph as a nested section under
    ``main.namespace`` (``"maingraph"``) starting at ``main.start``.
    """

    __slots__ = ("_destinations", "_frozen", "name")

    def __init__(self, name: str, destinations: Sequence[Destination] = ()) -> None:
        if not name:
            raise ConfigurationError("Graph name must not be empty.")
        self.name = name
        self._destinations: dict[str, Destination] = {}
        self._frozen = False
        for destination in destinations:
            self.add(destination)

    def __repr__(self) -> str:
        return f"Graph({self.name!r}, destinations={len(self._destinations)})"

    @property
    def namespace(self) -> str:
        """Lowercase token the host framework mounts this graph under."""
        return self.name.lower()

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- Registration --

    def add(self, destination: Destination) -> Destination:
        """Add a destination. Must be called before freeze()."""
        self._check_not_frozen()
        if destination.name in self._destinations:
            msg = f"Graph {self.name!r} already has a destination named {destination.name!r}."
            raise ConfigurationError(msg)
        self._destinations[destination.name] = destination
        logger.debug("graph %s: registered %s", self.name, destination.pattern)
        return destination

    def destination(
        self,
        *,
        name: str = "",
        title: str = "",
        dynamic_title: bool = False,
        paths: Sequence[str] = (),
        query_params: Sequence[str] = (),
    ) -> Callable[[F], F]:
        """Register a destination for a screen function via decorator.

        The destination is named after the decorated function unless
        *name* gives an explicit alias. The function is returned
        unchanged, with the registered descriptor attached as
        ``func.destination``::

            @feature.destination(name="testname", paths=["test"])
            def SixthDestination(): ...

            SixthDestination.destination.path("x")  # "testname/x"
        """

        def decorator(func: F) -> F:
            destination = Destination(
                name=name or func.__name__,
                positional_params=paths,  # type: ignore[arg-type]
                query_params=query_params,  # type: ignore[arg-type]
                dynamic_title=dynamic_title,
                title=title,
            )
            self.add(destination)
            func.destination = destination  # type: ignore[attr-defined]
            return func

        return decorator

    def freeze(self) -> None:
        """Freeze the graph. No more destinations can be added."""
        if not self._frozen:
            self._frozen = True
            logger.debug("graph %s: frozen with %d destinations", self.name, len(self))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                f"Cannot add destinations to graph {self.name!r} after it has been frozen. "
                "Register destinations before resolving paths."
            )
            raise ConfigurationError(msg)

    # -- Lookup --

    @property
    def destinations(self) -> Mapping[str, Destination]:
        """Read-only name -> destination view, in registration order."""
        return MappingProxyType(self._destinations)

    @property
    def start(self) -> Destination:
        """The first registered destination, where the graph's section starts."""
        if not self._destinations:
            msg = f"Graph {self.name!r} has no destinations."
            raise ConfigurationError(msg)
        return next(iter(self._destinations.values()))

    def get(self, name: str) -> Destination | None:
        """Return the destination called *name* (exact, case-sensitive), or None."""
        return self._destinations.get(name)

    def __getitem__(self, name: str) -> Destination:
        return self._destinations[name]

    def __contains__(self, name: object) -> bool:
        return name in self._destinations

    def __iter__(self) -> Iterator[Destination]:
        return iter(self._destinations.values())

    def __len__(self) -> int:
        return len(self._destinations)
