"""Waypoint exception hierarchy.

Shared across destinations, graphs, builders, and resolvers so every
module raises and catches the same types.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when a destination or graph declaration is invalid.

    Typically raised during registration, before any navigation happens.
    """


class ArgumentError(WaypointError):
    """Raised when arguments passed to the path builder don't fit a destination."""

    def __init__(self, destination: str, key: str, detail: str) -> None:
        self.destination = destination
        self.key = key
        super().__init__(f"{destination}: {detail}")


class MissingArgument(ArgumentError):  # noqa: N818 — reads as a condition, like NotFound
    """A required positional parameter or dynamic title was not supplied."""

    def __init__(self, destination: str, key: str) -> None:
        super().__init__(destination, key, f"missing required argument {key!r}")


class UnexpectedArgument(ArgumentError):  # noqa: N818
    """An argument was supplied that the destination does not declare."""

    def __init__(self, destination: str, key: str, detail: str = "") -> None:
        super().__init__(destination, key, detail or f"unexpected argument {key!r}")


class UnknownDestination(WaypointError):  # noqa: N818
    """No registered destination matches the name at the head of a path.

    Only raised under the strict resolution policy; the optional policy
    returns ``None`` instead.
    """

    def __init__(self, path: str, name: str) -> None:
        self.path = path
        self.name = name
        super().__init__(f"No destination named {name!r} (path {path!r})")


class MalformedPath(WaypointError):  # noqa: N818
    """A path names a known destination but its segments don't fit its shape."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{detail}: {path!r}")


class EncodingMismatch(WaypointError):  # noqa: N818
    """A path segment holds a malformed percent-encoded sequence."""

    def __init__(self, text: str, detail: str = "malformed percent-encoding") -> None:
        self.text = text
        super().__init__(f"{detail} in {text!r}")
