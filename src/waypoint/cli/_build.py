"""``waypoint build`` — build a navigable path from the command line."""

import argparse
import sys

from waypoint.cli._load import load_registry
from waypoint.errors import WaypointError
from waypoint.routing.builder import build_path


def _parse_query(pairs: list[str]) -> dict[str, str]:
    query: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            print(f"Error: --query expects KEY=VALUE, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        query[key] = value
    return query


def run_build(args: argparse.Namespace) -> None:
    """Build a path for ``args.destination`` and print it."""
    registry = load_registry(args)
    found = registry.find(args.destination)
    if found is None:
        print(f"Error: no destination named {args.destination!r}", file=sys.stderr)
        raise SystemExit(1)
    _, destination = found

    try:
        path = build_path(
            destination,
            args.values,
            _parse_query(args.query),
            title=args.title,
        )
    except WaypointError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(path)
