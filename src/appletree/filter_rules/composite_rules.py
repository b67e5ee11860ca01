"""Composite exclusion rules for combining multiple rule types."""

from typing import Sequence, Tuple

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite rules that exclude an entry if ANY constituent rule does.

    Rules are evaluated in the order given, stopping at the first rule that
    excludes. Because every constituent can only remove entries, placing the
    exclude patterns next to the only patterns gives exclude precedence over
    include regardless of pattern specificity.

    Attributes:
        rules (Tuple[BaseExclusionRules, ...]): The constituent rules.

    Example:
        >>> from appletree.filter_rules.pattern_rules import OnlyInclusionRules, PatternExclusionRules
        >>> composite = CompositeExclusionRules(
        ...     [PatternExclusionRules(["secret.txt"]), OnlyInclusionRules(["src"])]
        ... )
        >>> composite.exclude("secret.txt", "src/secret.txt")
        True
        >>> composite.exclude("main.txt", "src/main.txt")
        False
        >>> composite.exclude("docs", "docs")
        True
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite rules.

        Args:
            rules: Sequence of rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: Tuple[BaseExclusionRules, ...] = tuple(rules)

    def exclude(self, name: str, relative_path: str) -> bool:
        return any(rule.exclude(name, relative_path) for rule in self.rules)
