"""Tests for waypoint.config — NavConfig frozen dataclass."""

import pytest

from waypoint.config import NavConfig
from waypoint.errors import ConfigurationError


class TestNavConfig:
    def test_defaults(self) -> None:
        cfg = NavConfig()

        assert cfg.strict is False
        assert cfg.title_max_length == 30
        assert cfg.title_ellipsis == "..."

    def test_override(self) -> None:
        cfg = NavConfig(strict=True, title_max_length=40, title_ellipsis="…")

        assert cfg.strict is True
        assert cfg.title_max_length == 40
        assert cfg.title_ellipsis == "…"

    def test_frozen(self) -> None:
        cfg = NavConfig()

        with pytest.raises(AttributeError):
            cfg.strict = True  # type: ignore[misc]

    def test_max_length_must_exceed_ellipsis(self) -> None:
        with pytest.raises(ConfigurationError, match="title_max_length"):
            NavConfig(title_max_length=3)
