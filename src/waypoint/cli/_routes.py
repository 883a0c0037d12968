"""``waypoint routes`` — list registered route patterns.

Resolves an import string to a registry and prints every destination
with its graph namespace and route pattern, in precedence order.
"""

import argparse

from waypoint.cli._load import load_registry


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of GRAPH, DESTINATION, and PATTERN."""
    registry = load_registry(args)

    rows: list[tuple[str, str, str]] = [
        (graph.namespace, destination.name, destination.pattern)
        for graph, destination in registry.destinations()
    ]
    if not rows:
        print("No destinations registered.")
        return

    max_graph = max(max(len(r[0]) for r in rows), 5)  # "GRAPH" header
    max_name = max(max(len(r[1]) for r in rows), 11)  # "DESTINATION" header

    fmt = f"{{:<{max_graph}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("GRAPH", "DESTINATION", "PATTERN"))
    sep_len = max_graph + max_name + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for namespace, name, pattern in rows:
        print(fmt.format(namespace, name, pattern))
