"""Navigation configuration.

NavConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from waypoint.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class NavConfig:
    """Resolution and title settings. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = NavConfig(strict=True, title_max_length=40)
    """

    # Resolution policy: False returns None for unknown destinations,
    # True raises UnknownDestination.
    strict: bool = False

    # Screen titles longer than this are truncated and end with title_ellipsis
    title_max_length: int = 30
    title_ellipsis: str = "..."

    def __post_init__(self) -> None:
        if self.title_max_length <= len(self.title_ellipsis):
            msg = (
                f"title_max_length ({self.title_max_length}) must be longer than "
                f"title_ellipsis ({self.title_ellipsis!r})"
            )
            raise ConfigurationError(msg)
