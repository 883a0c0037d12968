"""Destination and Argument frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from waypoint.errors import ConfigurationError
from waypoint.routing.params import (
    NAME_TERMINATORS,
    PARAM_FORBIDDEN,
    POSITIONAL,
    QUERY,
    TITLE,
    TITLE_KEY,
)


@dataclass(frozen=True, slots=True)
class Argument:
    """One placeholder of a destination's route pattern.

    Title:       ``{appTitle}``  (kind="title", optional=False)
    Positional:  ``/{param1}``   (kind="positional", optional=False)
    Query:       ``q={q}``       (kind="query", optional=True)
    """

    key: str
    kind: str
    optional: bool = False


@dataclass(frozen=True, slots=True)
class Destination:
    """A frozen destination declaration.

    Created during registration and never mutated afterwards. The name
    is the literal leading segment of every path built for it::

        second = Destination("SecondDestination", positional_params=("param1", "param2"))
        second.pattern          # "SecondDestination/{param1}/{param2}"
        second.path("Ciao", 2)  # "SecondDestination/Ciao/2"

    Raises ``ConfigurationError`` when the shape is invalid: empty name,
    ``/`` or ``?`` in the name, empty or duplicate parameter names,
    separator characters (``/ ? & = { }``) in a parameter name,
    overlap between positional and query parameters, or a parameter
    named like the reserved title key.
    """

    name: str
    positional_params: tuple[str, ...] = ()
    query_params: tuple[str, ...] = ()
    dynamic_title: bool = False
    title: str = ""

    def __post_init__(self) -> None:
        for attr in ("positional_params", "query_params"):
            if isinstance(getattr(self, attr), str):
                msg = f"Destination {self.name!r}: {attr} must be a sequence of names, not a string."
                raise ConfigurationError(msg)
        # Accept lists from callers; store tuples
        object.__setattr__(self, "positional_params", tuple(self.positional_params))
        object.__setattr__(self, "query_params", tuple(self.query_params))
        _validate(self)

    @property
    def pattern(self) -> str:
        """The route pattern registered with the host framework."""
        from waypoint.routing.pattern import route_pattern

        return route_pattern(self)

    @property
    def arguments(self) -> tuple[Argument, ...]:
        """All placeholders in pattern order: title, positional, query."""
        args: list[Argument] = []
        if self.dynamic_title:
            args.append(Argument(TITLE_KEY, TITLE))
        args.extend(Argument(key, POSITIONAL) for key in self.positional_params)
        args.extend(Argument(key, QUERY, optional=True) for key in self.query_params)
        return tuple(args)

    def path(self, *positional: Any, title: str | None = None, **query: str | None) -> str:
        """Build a navigable path with positional values and keyword query values.

        Shorthand for :func:`waypoint.routing.builder.build_path`. A query
        parameter named ``title`` on a destination without a dynamic title
        is filled from the *title* keyword. When a destination has both, the
        keyword is the dynamic title; pass the query value through ``build()``.
        """
        from waypoint.routing.builder import build_path

        if title is not None and not self.dynamic_title and "title" in self.query_params:
            query = {**query, "title": title}
            title = None
        return build_path(self, positional, query, title=title)

    def build(
        self,
        positional: tuple[Any, ...] | list[Any] = (),
        query: Mapping[str, Any] | None = None,
        *,
        title: str | None = None,
    ) -> str:
        """Build a navigable path. Same arguments as ``build_path``."""
        from waypoint.routing.builder import build_path

        return build_path(self, positional, query, title=title)


def _validate(destination: Destination) -> None:
    name = destination.name
    if not name:
        raise ConfigurationError("Destination name must not be empty.")
    for char in NAME_TERMINATORS:
        if char in name:
            msg = f"Destination name {name!r} must not contain {char!r}."
            raise ConfigurationError(msg)

    seen: set[str] = set()
    for key in (*destination.positional_params, *destination.query_params):
        if not key:
            msg = f"Destination {name!r} declares an empty parameter name."
            raise ConfigurationError(msg)
        for char in PARAM_FORBIDDEN:
            if char in key:
                msg = f"Destination {name!r}: parameter name {key!r} must not contain {char!r}."
                raise ConfigurationError(msg)
        if key == TITLE_KEY:
            msg = (
                f"Destination {name!r} declares parameter {key!r}, which is reserved "
                f"for dynamic titles. Use dynamic_title=True instead."
            )
            raise ConfigurationError(msg)
        if key in seen:
            msg = f"Destination {name!r} declares parameter {key!r} more than once."
            raise ConfigurationError(msg)
        seen.add(key)
