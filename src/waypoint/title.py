"""Screen titles for the destination currently on screen.

A destination with a dynamic title carries its title in the path; other
destinations fall back to their declared title, then to their pattern.
"""

from waypoint.routing.resolver import PathMatch


def truncate(text: str, max_length: int = 30, ellipsis: str = "...") -> str:
    """Shorten *text* to *max_length* characters, ending with *ellipsis*.

    Examples::

        truncate("Short")                  -> "Short"
        truncate("x" * 40, max_length=10)  -> "xxxxxxx..."
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ellipsis)] + ellipsis


def screen_title(match: PathMatch, *, max_length: int = 30, ellipsis: str = "...") -> str:
    """Return the title to display for *match*."""
    destination = match.destination
    text = match.title or destination.title or destination.pattern
    return truncate(text, max_length, ellipsis)
