"""Route pattern synthesis.

A pattern is the template a host navigation framework registers for a
destination::

    "SecondDestination/{param1}/{param2}"
    "ThirdDestination/{appTitle}"
    "FourthDestination?query1={query1}&query2={query2}"
"""

from typing import TYPE_CHECKING

from waypoint.routing.params import TITLE_KEY

if TYPE_CHECKING:
    from waypoint.routing.destination import Destination


def placeholder(key: str) -> str:
    """Return the ``{key}`` placeholder for a parameter name."""
    return "{" + key + "}"


def route_pattern(destination: "Destination") -> str:
    """Build the route pattern for *destination*.

    Title placeholder first (when the title is dynamic), then positional
    placeholders in declared order, then the query template.
    """
    parts = [destination.name]
    if destination.dynamic_title:
        parts.append("/" + placeholder(TITLE_KEY))
    for param in destination.positional_params:
        parts.append("/" + placeholder(param))
    if destination.query_params:
        query = "&".join(f"{key}={placeholder(key)}" for key in destination.query_params)
        parts.append("?" + query)
    return "".join(parts)
