"""Immutable rendering configuration.

A TreeConfig is built once, usually from command-line arguments, and passed
explicitly to the tree renderer and the filter rules. It is never mutated
during traversal.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from appletree.exceptions import InvalidDepthError
from appletree.file_system_tree.theme import Theme


@dataclass(frozen=True)
class TreeConfig:
    """Settings that control which entries are shown and how they are drawn.

    Attributes:
        exclude_patterns: Names or relative paths to hide. The special pattern
            "." hides every entry whose name starts with a dot.
        include_patterns: Names or relative paths to restrict the output to.
            Ancestors and descendants of a match stay visible.
        max_depth: Number of directory levels below the root to list, or None
            for no limit.
        show_sizes: Whether to annotate entries with their size.
        theme: Glyph theme for branches.
        color: Whether to emit ANSI styling.

    Example:
        >>> config = TreeConfig(exclude_patterns=["node_modules", "."], max_depth=2)
        >>> sorted(config.exclude_patterns)
        ['.', 'node_modules']
    """

    exclude_patterns: FrozenSet[str] = field(default_factory=frozenset)
    include_patterns: FrozenSet[str] = field(default_factory=frozenset)
    max_depth: Optional[int] = None
    show_sizes: bool = False
    theme: Theme = Theme.CLASSIC
    color: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable of patterns but store frozensets so configs stay hashable
        object.__setattr__(self, "exclude_patterns", _as_patterns(self.exclude_patterns))
        object.__setattr__(self, "include_patterns", _as_patterns(self.include_patterns))
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 0:
                raise InvalidDepthError(self.max_depth)
        if not isinstance(self.theme, Theme):
            object.__setattr__(self, "theme", Theme.from_name(str(self.theme)))


def _as_patterns(patterns: Iterable[str]) -> FrozenSet[str]:
    if isinstance(patterns, str):
        return frozenset([patterns])
    return frozenset(patterns)
