"""Shared loader for subcommands: import string -> registry, or exit 1."""

import argparse
import sys

from waypoint.cli._resolve import resolve_registry
from waypoint.routing.registry import CompositeRegistry


def load_registry(args: argparse.Namespace) -> CompositeRegistry:
    try:
        return resolve_registry(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
