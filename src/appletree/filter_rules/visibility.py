"""Entry visibility decisions for a rendering configuration."""

from functools import lru_cache

from appletree.config import TreeConfig

from .composite_rules import CompositeExclusionRules
from .pattern_rules import OnlyInclusionRules, PatternExclusionRules


@lru_cache(maxsize=32)
def rules_from_config(config: TreeConfig) -> CompositeExclusionRules:
    """Build the filter rules described by a configuration.

    Exclude patterns are placed first so that they win over include patterns.
    Results are cached per configuration; the returned object must not be
    modified.
    """
    return CompositeExclusionRules(
        [
            PatternExclusionRules(config.exclude_patterns),
            OnlyInclusionRules(config.include_patterns),
        ]
    )


def should_show(name: str, relative_path: str, config: TreeConfig) -> bool:
    """Decide whether an entry is visible under a configuration.

    Args:
        name: Basename of the entry.
        relative_path: Path of the entry relative to the root, with forward slashes.
        config: Active configuration.

    Returns:
        True if the entry should be rendered.

    Example:
        >>> config = TreeConfig(exclude_patterns=["."], include_patterns=["src"])
        >>> should_show("src", "src", config)
        True
        >>> should_show(".git", ".git", config)
        False
    """
    return not rules_from_config(config).exclude(name, relative_path)
