"""Test configuration and fixtures for appletree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project tree.

    Layout::

        .git/config              5 bytes
        docs/readme.md           4 bytes
        node_modules/pkg/index.js
        src/main.txt             12 bytes
        src/util/log.h           3 bytes
        web/node_modules/lib.js
    """
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_bytes(b"x" * 5)
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "readme.md").write_bytes(b"# hi")
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "pkg" / "index.js").write_text("export default {}\n")
    (tmp_path / "src" / "util").mkdir(parents=True)
    (tmp_path / "src" / "main.txt").write_bytes(b"hello world\n")
    (tmp_path / "src" / "util" / "log.h").write_bytes(b"#if")
    (tmp_path / "web" / "node_modules").mkdir(parents=True)
    (tmp_path / "web" / "node_modules" / "lib.js").write_text("// lib\n")
    return tmp_path


@pytest.fixture
def deep_project(tmp_path):
    """Create a tree nested four directory levels deep: a/b/c/d/leaf.txt."""
    deepest = tmp_path / "a" / "b" / "c" / "d"
    deepest.mkdir(parents=True)
    (deepest / "leaf.txt").write_text("leaf")
    (tmp_path / "a" / "top.txt").write_text("top")
    return tmp_path
