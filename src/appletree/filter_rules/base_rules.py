from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry filtering rules.

    Concrete rules decide, from an entry's basename and its path relative to
    the traversal root, whether that entry should be left out of the rendered
    tree.

    Example:
        >>> from appletree.filter_rules.pattern_rules import PatternExclusionRules
        >>> rules = PatternExclusionRules(["node_modules"])
        >>> rules.exclude("node_modules", "web/node_modules")
        True
        >>> rules.exclude("main.py", "src/main.py")
        False
    """

    @abstractmethod
    def exclude(self, name: str, relative_path: str) -> bool:
        """
        Determine if an entry should be excluded.

        Args:
            name (str): The basename of the entry.
            relative_path (str): The entry's path relative to the traversal root,
                using forward slashes.

        Returns:
            bool: True if the entry should be excluded, False if it should be shown.
        """
        pass
