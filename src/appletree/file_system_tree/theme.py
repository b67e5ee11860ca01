"""Glyph themes for drawing tree branches."""

from enum import Enum

from appletree.exceptions import InvalidThemeError


class Theme(str, Enum):
    """Set of glyphs used to draw branch and continuation lines.

    Values:
        CLASSIC: Square corners for the last sibling (default)
        ROUND: Rounded corners for the last sibling
    """

    CLASSIC = "classic"
    ROUND = "round"

    @classmethod
    def from_name(cls, name: str) -> "Theme":
        """Look up a theme by its command-line name.

        Raises:
            InvalidThemeError: If no theme has that name.

        Example:
            >>> Theme.from_name("round") is Theme.ROUND
            True
        """
        try:
            return cls(name)
        except ValueError:
            raise InvalidThemeError(name) from None

    def branch(self, is_last: bool) -> str:
        """Connector drawn in front of an entry name."""
        if not is_last:
            return "├── "
        return "╰── " if self is Theme.ROUND else "└── "

    def vertical(self, is_last: bool) -> str:
        """Prefix continuation for the children of an entry."""
        return "    " if is_last else "│   "
