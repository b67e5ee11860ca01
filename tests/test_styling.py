"""Tests for ANSI styling helpers."""

import io
from unittest.mock import patch

from humanfriendly.terminal import ansi_wrap

from appletree.styling import bold, muted, use_color


def test_bold():
    assert bold("src/", True) == ansi_wrap("src/", bold=True)
    assert bold("src/", False) == "src/"
    assert bold("", True) == ""


def test_muted():
    assert muted(" (1 B)", True) == ansi_wrap(" (1 B)", color="white")
    assert muted(" (1 B)", False) == " (1 B)"
    assert muted("", True) == ""


def test_use_color_policies():
    stream = io.StringIO()
    assert use_color("always", stream) is True
    assert use_color("never", stream) is False
    assert use_color("auto", stream) is False


def test_use_color_auto_on_terminal():
    with patch("appletree.styling.terminal_supports_colors", return_value=True) as mock_supports:
        assert use_color("auto", None) is True
        mock_supports.assert_called_once_with(None)
