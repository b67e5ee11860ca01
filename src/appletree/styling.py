"""ANSI styling for tree output."""

from typing import IO, Optional

from humanfriendly.terminal import ansi_wrap, terminal_supports_colors

COLOR_CHOICES = ("auto", "always", "never")


def use_color(policy: str, stream: Optional[IO[str]] = None) -> bool:
    """Resolve a --color policy against an output stream.

    "auto" enables styling only if the stream is a terminal that supports it.
    """
    if policy == "always":
        return True
    if policy == "never":
        return False
    return bool(terminal_supports_colors(stream))


def bold(text: str, enabled: bool) -> str:
    """Bold text when styling is enabled."""
    return ansi_wrap(text, bold=True) if enabled and text else text


def muted(text: str, enabled: bool) -> str:
    """Grey text when styling is enabled."""
    return ansi_wrap(text, color="white") if enabled and text else text
