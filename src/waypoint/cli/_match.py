"""``waypoint resolve`` — resolve a path to its destination.

Prints the owning graph, destination, decoded arguments, and the
screen title the registry computes for the path.
"""

import argparse
import sys

from waypoint.cli._load import load_registry
from waypoint.errors import WaypointError
from waypoint.routing.resolver import match_destination
from waypoint.title import screen_title


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.path`` and print what it points at.

    Exits 1 when nothing matches (with ``--strict``) or when the path
    is malformed for its destination.
    """
    registry = load_registry(args)
    found = registry.find(args.path)

    if found is None:
        if args.strict:
            print(f"Error: no destination matches {args.path!r}", file=sys.stderr)
            raise SystemExit(1)
        print(f"No destination matches {args.path!r}.")
        return

    graph, destination = found
    try:
        match = match_destination(destination, args.path)
    except WaypointError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"graph:        {graph.namespace}")
    print(f"destination:  {destination.name}")
    print(f"pattern:      {destination.pattern}")
    if match.title is not None:
        print(f"title:        {match.title}")
    for key, value in match.arguments.items():
        print(f"  {key} = {value}")
    config = registry.config
    title = screen_title(match, max_length=config.title_max_length, ellipsis=config.title_ellipsis)
    print(f"screen title: {title}")
