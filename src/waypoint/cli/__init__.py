"""Waypoint CLI — inspect, resolve, and build navigation paths.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint — typed route descriptors for screen-based navigation.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registration and resolution details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered route patterns")
    routes_parser.add_argument("app", help="Import string (e.g. myapp.nav:registry)")

    # -- waypoint resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve a path to its destination and arguments"
    )
    resolve_parser.add_argument("app", help="Import string (e.g. myapp.nav:registry)")
    resolve_parser.add_argument("path", help="Navigable path (e.g. SecondDestination/Ciao/2)")
    resolve_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when no destination matches instead of reporting no match",
    )

    # -- waypoint build ---------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Build a navigable path")
    build_parser.add_argument("app", help="Import string (e.g. myapp.nav:registry)")
    build_parser.add_argument("destination", help="Destination name")
    build_parser.add_argument("values", nargs="*", help="Positional values, in order")
    build_parser.add_argument("--title", default=None, help="Dynamic title value")
    build_parser.add_argument(
        "--query",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query value (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from waypoint.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from waypoint.cli._match import run_resolve

        run_resolve(args)
    elif args.command == "build":
        from waypoint.cli._build import run_build

        run_build(args)
