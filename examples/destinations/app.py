"""Destinations — two graphs, a tiny back stack, and screen titles.

Declares a main graph and a feature graph with decorated screen
functions, registers both in a composite registry, and drives them with
a minimal navigator standing in for a host UI framework.

Run from this directory:
    waypoint routes app
    waypoint resolve app "ThirdDestination/Third%20destination"
"""

from waypoint import CompositeRegistry, Graph

main = Graph("MainGraph")
feature = Graph("FeatureGraph")


@main.destination(title="Destination builder")
def FirstDestination() -> str:
    return "first"


@main.destination(paths=["param1", "param2"])
def SecondDestination(param1: str, param2: int) -> str:
    return f"First param is {param1}, second param (Int) is {param2}"


@main.destination(dynamic_title=True)
def ThirdDestination() -> str:
    return "Third destination"


@main.destination(query_params=["query1", "query2", "query3"])
def FourthDestination(query1: str | None, query2: str | None, query3: str | None) -> str:
    return f"First query is {query1}, second query is {query2}, third query is {query3}"


@main.destination(paths=["param1", "param2"], query_params=["query1", "query2", "query3"])
def FifthDestination() -> str:
    return "fifth"


@feature.destination(name="testname", paths=["test"])
def SixthDestination() -> str:
    return "Hello"


registry = CompositeRegistry([main, feature])


class Navigator:
    """Back stack of paths, resolved through the registry."""

    def __init__(self, registry: CompositeRegistry) -> None:
        self.registry = registry
        start = registry.graphs[0].start
        self.stack: list[str] = [start.path()]

    @property
    def current(self) -> str:
        return self.stack[-1]

    def navigate(self, path: str) -> None:
        self.stack.append(path)

    def back(self) -> None:
        if len(self.stack) > 1:
            self.stack.pop()

    def title(self) -> str:
        return self.registry.title(self.current) or self.current


def walkthrough() -> list[str]:
    """Visit every screen in order and collect the titles shown."""
    nav = Navigator(registry)
    titles = [nav.title()]
    nav.navigate(SecondDestination.destination.path("Ciao", 2))
    titles.append(nav.title())
    nav.navigate(ThirdDestination.destination.path(title="Third destination"))
    titles.append(nav.title())
    nav.navigate(FourthDestination.destination.path(query1="https://www.google.it"))
    titles.append(nav.title())
    nav.navigate(SixthDestination.destination.path("test"))
    titles.append(nav.title())
    return titles
