"""Per-graph path resolution.

Maps an observed path back to the destination that produced it. The
destination name is the literal text before the first ``/`` or ``?``;
lookup is a single dict access, no pattern matching.
"""

import logging
from dataclasses import dataclass

from waypoint.errors import MalformedPath, UnknownDestination
from waypoint.routing.destination import Destination
from waypoint.routing.encoding import decode_segment
from waypoint.routing.graph import Graph
from waypoint.routing.params import NAME_TERMINATORS

logger = logging.getLogger("waypoint.routing")


@dataclass(frozen=True, slots=True)
class PathMatch:
    """Result of matching a concrete path against its destination.

    Hashable: query values are held as ``(key, value)`` pairs in path order.
    """

    destination: Destination
    path: str
    title: str | None = None
    positional: tuple[str, ...] = ()
    query_items: tuple[tuple[str, str], ...] = ()

    @property
    def query(self) -> dict[str, str]:
        """Decoded query values keyed by parameter name."""
        return dict(self.query_items)

    @property
    def arguments(self) -> dict[str, str]:
        """Positional values keyed by parameter name, merged with query values."""
        named = dict(zip(self.destination.positional_params, self.positional, strict=True))
        return {**named, **self.query}


def destination_name(path: str) -> str:
    """Return the destination name at the head of *path*.

    Examples::

        "SecondDestination/Ciao/2"    -> "SecondDestination"
        "FourthDestination?query2=b"  -> "FourthDestination"
        "FirstDestination"            -> "FirstDestination"
    """
    end = len(path)
    for char in NAME_TERMINATORS:
        index = path.find(char)
        if index != -1 and index < end:
            end = index
    return path[:end]


def match_destination(destination: Destination, path: str) -> PathMatch:
    """Split *path* into the decoded arguments of *destination*.

    Raises ``MalformedPath`` if the number of path segments doesn't fit
    the destination, and ``EncodingMismatch`` if a value can't be decoded.
    """
    head, _, query_string = path.partition("?")
    segments = head.split("/")[1:]

    expected = len(destination.positional_params) + int(destination.dynamic_title)
    if len(segments) != expected:
        detail = f"{destination.name} expects {expected} path segments, got {len(segments)}"
        raise MalformedPath(path, detail)

    title = None
    if destination.dynamic_title:
        title = decode_segment(segments.pop(0))
    positional = tuple(decode_segment(segment) for segment in segments)

    query: dict[str, str] = {}
    for pair in query_string.split("&") if query_string else ():
        key, _, value = pair.partition("=")
        if key not in destination.query_params:
            logger.debug("%s: ignoring undeclared query key %r", destination.name, key)
            continue
        query[key] = decode_segment(value)

    return PathMatch(
        destination=destination,
        path=path,
        title=title,
        positional=positional,
        query_items=tuple(query.items()),
    )


class PathResolver:
    """Resolves paths against a single graph.

    Usage::

        resolver = PathResolver(main)
        resolver.resolve("SecondDestination/Ciao/2")  # Destination("SecondDestination", ...)
        resolver.resolve("Expired/link")              # None

    With ``strict=True`` an unknown name raises ``UnknownDestination``
    instead of returning ``None``. Creating a resolver freezes the graph.
    """

    __slots__ = ("graph", "strict")

    def __init__(self, graph: Graph, *, strict: bool = False) -> None:
        graph.freeze()
        self.graph = graph
        self.strict = strict

    def __repr__(self) -> str:
        return f"PathResolver({self.graph.name!r}, strict={self.strict})"

    def find(self, path: str) -> Destination | None:
        """Look up the destination for *path*. Never raises."""
        return self.graph.get(destination_name(path))

    def resolve(self, path: str) -> Destination | None:
        """Resolve *path* to its destination, applying the resolution policy."""
        destination = self.find(path)
        if destination is None:
            return self._miss(path)
        return destination

    def match(self, path: str) -> PathMatch | None:
        """Resolve *path* and decode its arguments."""
        destination = self.resolve(path)
        if destination is None:
            return None
        return match_destination(destination, path)

    def _miss(self, path: str) -> None:
        name = destination_name(path)
        if self.strict:
            raise UnknownDestination(path, name)
        logger.debug("graph %s: no destination named %r", self.graph.name, name)
        return None
