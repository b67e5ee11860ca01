"""Filter rules deciding which entries appear in the tree."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .pattern_rules import OnlyInclusionRules, PatternExclusionRules
from .visibility import rules_from_config, should_show

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "OnlyInclusionRules",
    "PatternExclusionRules",
    "rules_from_config",
    "should_show",
]
