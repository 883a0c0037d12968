"""Tests for waypoint.cli._resolve — registry import resolution."""

import types

import pytest

from waypoint.cli._resolve import resolve_registry
from waypoint.routing.destination import Destination
from waypoint.routing.graph import Graph
from waypoint.routing.registry import CompositeRegistry


@pytest.fixture
def _fake_nav_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with registries, a graph, and a factory."""
    mod = types.ModuleType("_fake_waypoint_registry")
    mod.registry = CompositeRegistry([Graph("MainGraph", [Destination("Home")])])  # type: ignore[attr-defined]
    mod.custom = CompositeRegistry()  # type: ignore[attr-defined]
    mod.graph = Graph("FeatureGraph", [Destination("Feature")])  # type: ignore[attr-defined]
    mod.factory = lambda: CompositeRegistry()  # type: ignore[attr-defined]
    mod.broken_factory = lambda: 1 / 0  # type: ignore[attr-defined]
    mod.not_a_registry = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_fake_waypoint_registry", mod)


@pytest.mark.usefixtures("_fake_nav_module")
class TestResolveRegistry:
    def test_explicit_attribute(self) -> None:
        registry = resolve_registry("_fake_waypoint_registry:custom")
        assert isinstance(registry, CompositeRegistry)

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'registry'."""
        registry = resolve_registry("_fake_waypoint_registry")
        assert registry.resolve("Home") is not None

    def test_graph_wrapped(self) -> None:
        registry = resolve_registry("_fake_waypoint_registry:graph")
        assert [g.name for g in registry.graphs] == ["FeatureGraph"]

    def test_factory_called(self) -> None:
        assert isinstance(resolve_registry("_fake_waypoint_registry:factory"), CompositeRegistry)

    def test_factory_error(self) -> None:
        with pytest.raises(TypeError, match="raised an error"):
            resolve_registry("_fake_waypoint_registry:broken_factory")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_registry("nonexistent_module_xyz:registry")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_registry("_fake_waypoint_registry:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="not a waypoint CompositeRegistry or Graph"):
            resolve_registry("_fake_waypoint_registry:not_a_registry")
