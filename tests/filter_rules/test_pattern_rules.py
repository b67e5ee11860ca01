"""Tests for the name/path pattern rules behind -e and -o."""

import pytest

from appletree.filter_rules.pattern_rules import OnlyInclusionRules, PatternExclusionRules, matches_subtree


@pytest.mark.parametrize(
    "relative_path,pattern,expected",
    [
        ("src", "src", True),
        ("src/main.cpp", "src", True),
        ("src/util/log.h", "src/util", True),
        ("srcfoo", "src", False),
        ("src/utility", "src/util", False),
        ("lib/src", "src", False),
    ],
)
def test_matches_subtree(relative_path, pattern, expected):
    assert matches_subtree(relative_path, pattern) is expected


class TestPatternExclusionRules:
    def test_no_patterns_excludes_nothing(self):
        rules = PatternExclusionRules()
        assert not rules.exclude("anything", "anything")
        assert not rules.exclude(".hidden", ".hidden")

    def test_bare_name_matches_basename_at_any_depth(self):
        rules = PatternExclusionRules(["node_modules"])
        assert rules.exclude("node_modules", "node_modules")
        assert rules.exclude("node_modules", "web/node_modules")
        assert rules.exclude("node_modules", "a/b/c/node_modules")
        assert not rules.exclude("node_modules_backup", "node_modules_backup")

    def test_bare_name_does_not_match_inside_path(self):
        rules = PatternExclusionRules(["build"])
        # Only the basename is compared; children of a matching directory are never visited anyway
        assert not rules.exclude("out.o", "build/out.o")

    def test_path_pattern_matches_exact_path_and_subtree(self):
        rules = PatternExclusionRules(["src/main.cpp", "web/assets"])
        assert rules.exclude("main.cpp", "src/main.cpp")
        assert rules.exclude("assets", "web/assets")
        assert rules.exclude("logo.png", "web/assets/logo.png")

    def test_path_pattern_leaves_same_basename_elsewhere(self):
        rules = PatternExclusionRules(["src/main.cpp"])
        assert not rules.exclude("main.cpp", "main.cpp")
        assert not rules.exclude("main.cpp", "test/src/main.cpp")
        assert not rules.exclude("main.cpp.bak", "src/main.cpp.bak")

    def test_dot_pattern_hides_hidden_entries(self):
        rules = PatternExclusionRules(["."])
        assert rules.exclude(".git", ".git")
        assert rules.exclude(".env", "config/.env")
        assert not rules.exclude("visible", "visible")

    def test_dot_pattern_is_not_a_literal_name(self):
        rules = PatternExclusionRules(["."])
        # A name that merely contains a dot is not hidden
        assert not rules.exclude("setup.py", "setup.py")

    def test_matching_is_case_sensitive(self):
        rules = PatternExclusionRules(["Build", "Docs/api"])
        assert not rules.exclude("build", "build")
        assert not rules.exclude("api", "docs/api")
        assert rules.exclude("Build", "Build")

    def test_patterns_are_frozen(self):
        rules = PatternExclusionRules(["dist", "dist"])
        assert rules.patterns == frozenset({"dist"})
        assert rules.exclude("dist", "dist")


class TestOnlyInclusionRules:
    def test_no_patterns_excludes_nothing(self):
        rules = OnlyInclusionRules()
        assert not rules.exclude("docs", "docs")

    def test_target_and_descendants_are_kept(self):
        rules = OnlyInclusionRules(["src"])
        assert not rules.exclude("src", "src")
        assert not rules.exclude("main.txt", "src/main.txt")
        assert not rules.exclude("log.h", "src/util/log.h")

    def test_unrelated_entries_are_excluded(self):
        rules = OnlyInclusionRules(["src"])
        assert rules.exclude("docs", "docs")
        assert rules.exclude("src2", "src2")
        assert rules.exclude("readme.md", "docs/readme.md")

    def test_ancestors_of_deep_target_are_kept(self):
        rules = OnlyInclusionRules(["src/util/log.h"])
        assert not rules.exclude("src", "src")
        assert not rules.exclude("util", "src/util")
        assert not rules.exclude("log.h", "src/util/log.h")
        assert rules.exclude("main.txt", "src/main.txt")
        assert rules.exclude("other", "src/util/other")

    def test_multiple_targets(self):
        rules = OnlyInclusionRules(["src", "docs/readme.md"])
        assert not rules.exclude("src", "src")
        assert not rules.exclude("docs", "docs")
        assert not rules.exclude("readme.md", "docs/readme.md")
        assert rules.exclude("changelog.md", "docs/changelog.md")
        assert rules.exclude("web", "web")

    def test_trailing_separator_is_not_normalised(self):
        rules = OnlyInclusionRules(["src/"])
        # "src" survives only as an ancestor; its children match neither rule
        assert not rules.exclude("src", "src")
        assert rules.exclude("main.txt", "src/main.txt")
