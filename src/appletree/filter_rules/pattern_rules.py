"""Name and path pattern rules for the exclude (-e) and only (-o) options.

Patterns are matched literally and case-sensitively; there is no globbing. A
pattern without a forward slash is compared against the entry's basename and
therefore matches at any depth. A pattern with a slash is compared against the
entry's path relative to the root and matches that path and its subtree.
"""

from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules

HIDDEN_PATTERN = "."


def matches_subtree(relative_path: str, pattern: str) -> bool:
    """Check whether a relative path is the pattern path or lies below it.

    Example:
        >>> matches_subtree("src/util/log.h", "src/util")
        True
        >>> matches_subtree("src/utility", "src/util")
        False
    """
    return relative_path == pattern or relative_path.startswith(pattern + "/")


class PatternExclusionRules(BaseExclusionRules):
    """Exclusion rules built from names and relative paths.

    The special pattern "." is never matched literally; it hides every entry
    whose basename starts with a dot.

    Attributes:
        patterns (FrozenSet[str]): The exclude patterns.

    Example:
        >>> rules = PatternExclusionRules(["src/main.cpp", "."])
        >>> rules.exclude("main.cpp", "src/main.cpp")
        True
        >>> rules.exclude("main.cpp", "test/main.cpp")
        False
        >>> rules.exclude(".git", ".git")
        True
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self.patterns: FrozenSet[str] = frozenset(patterns)

    def exclude(self, name: str, relative_path: str) -> bool:
        if HIDDEN_PATTERN in self.patterns and name.startswith("."):
            return True

        for pattern in self.patterns:
            if pattern == HIDDEN_PATTERN:
                continue
            if "/" in pattern:
                if matches_subtree(relative_path, pattern):
                    return True
            elif name == pattern:
                return True
        return False


class OnlyInclusionRules(BaseExclusionRules):
    """Rules that exclude everything outside a set of target paths.

    An entry is kept when it is a target, lies inside a target, or is a
    directory on the way down to a target. With no patterns nothing is
    excluded.

    Example:
        >>> rules = OnlyInclusionRules(["src/util/log.h"])
        >>> rules.exclude("src", "src")
        False
        >>> rules.exclude("log.h", "src/util/log.h")
        False
        >>> rules.exclude("docs", "docs")
        True
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self.patterns: FrozenSet[str] = frozenset(patterns)

    def exclude(self, name: str, relative_path: str) -> bool:
        if not self.patterns:
            return False

        for pattern in self.patterns:
            if matches_subtree(relative_path, pattern):
                return False
            # Ancestor of a deeper target
            if pattern.startswith(relative_path + "/"):
                return False
        return True
