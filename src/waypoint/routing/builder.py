"""Navigable path building.

Turns a destination plus concrete argument values into the path string
handed to the host framework's ``navigate`` call::

    build_path(second, ("Ciao", 2))                  # "SecondDestination/Ciao/2"
    build_path(fourth, query={"query2": "b"})        # "FourthDestination?query2=b"
    build_path(third, title="Third destination")     # "ThirdDestination/Third%20destination"

Positional values are required and matched by position. Query values
are optional: ``None`` and ``""`` are left out of the path entirely.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from waypoint.errors import MissingArgument, UnexpectedArgument
from waypoint.routing.encoding import encode_segment
from waypoint.routing.params import TITLE_KEY

if TYPE_CHECKING:
    from waypoint.routing.destination import Destination


def _present(value: Any) -> bool:
    return value is not None and value != ""


def build_path(
    destination: "Destination",
    positional: Sequence[Any] = (),
    query: Mapping[str, Any] | None = None,
    *,
    title: str | None = None,
) -> str:
    """Build a navigable path for *destination*.

    Args:
        destination: The destination to navigate to.
        positional: One value per declared positional parameter, in order.
            Non-string values are converted with ``str()``.
        query: Query parameter name to optional value.
        title: Dynamic title value; required when the destination has
            ``dynamic_title=True`` and rejected otherwise.

    Raises:
        MissingArgument: A positional slot or the dynamic title is absent.
        UnexpectedArgument: Too many positional values, an undeclared query
            key, or a title for a destination without a dynamic title.
    """
    name = destination.name
    parts = [name]

    if destination.dynamic_title:
        if not _present(title):
            raise MissingArgument(name, TITLE_KEY)
        parts.append("/" + encode_segment(str(title)))
    elif title is not None:
        raise UnexpectedArgument(name, TITLE_KEY, "destination has no dynamic title")

    params = destination.positional_params
    if len(positional) > len(params):
        detail = f"expected {len(params)} positional values, got {len(positional)}"
        raise UnexpectedArgument(name, f"positional[{len(params)}]", detail)
    for index, param in enumerate(params):
        value = positional[index] if index < len(positional) else None
        if not _present(value):
            raise MissingArgument(name, param)
        parts.append("/" + encode_segment(str(value)))

    query = query or {}
    for key in query:
        if key not in destination.query_params:
            raise UnexpectedArgument(name, key)

    pairs = [
        f"{key}={encode_segment(str(query[key]))}"
        for key in destination.query_params
        if _present(query.get(key))
    ]
    if pairs:
        parts.append("?" + "&".join(pairs))

    return "".join(parts)
