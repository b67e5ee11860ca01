"""Tests for the Theme glyph sets."""

import pytest

from appletree.exceptions import InvalidThemeError
from appletree.file_system_tree.theme import Theme


@pytest.mark.parametrize(
    "theme,is_last,expected",
    [
        (Theme.CLASSIC, False, "├── "),
        (Theme.CLASSIC, True, "└── "),
        (Theme.ROUND, False, "├── "),
        (Theme.ROUND, True, "╰── "),
    ],
)
def test_branch(theme, is_last, expected):
    assert theme.branch(is_last) == expected


@pytest.mark.parametrize("theme", list(Theme))
def test_vertical(theme):
    assert theme.vertical(False) == "│   "
    assert theme.vertical(True) == "    "


def test_from_name():
    assert Theme.from_name("classic") is Theme.CLASSIC
    assert Theme.from_name("round") is Theme.ROUND


def test_from_name_unknown():
    with pytest.raises(InvalidThemeError) as excinfo:
        Theme.from_name("Round")
    assert excinfo.value.theme == "Round"
