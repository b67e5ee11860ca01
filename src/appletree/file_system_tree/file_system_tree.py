"""Directory tree rendering with configurable filtering.

This module provides the FileSystemTree class, which walks a directory
depth-first and renders it line by line, applying the exclude/include rules,
depth ceiling, size annotations and glyph theme of a TreeConfig.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from appletree.config import TreeConfig
from appletree.file_system_tree.entry import FileSystemEntry
from appletree.file_system_tree.sizes import entry_size, size_suffix
from appletree.filter_rules.visibility import rules_from_config
from appletree.styling import bold, muted
from appletree.types import PathType

logger = logging.getLogger(__name__)


class FileSystemTree:
    """A renderable view of a directory structure.

    The tree is not built up front. Each directory is listed when the
    renderer reaches it, its children are filtered and sorted, and the
    resulting entries are discarded once their subtrees have been rendered.

    Filtering:
        Entries are matched by basename and by their path relative to the
        root. Relative paths are computed from each entry's canonical form, so
        "." / ".." components and symlinks are resolved first. Exclude
        patterns always win over include patterns.

    Error Handling:
        Traversal is best-effort. A directory that cannot be listed renders
        without children, and an entry that cannot be examined is skipped.
        Neither aborts the run; skips are logged at DEBUG level.

    Attributes:
        root_path (Path): The root directory, as given.
        config (TreeConfig): The rendering configuration.

    Example:
        >>> tree = FileSystemTree(".", TreeConfig(max_depth=1))  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
         project/
         ├── src/
         └── README.md
    """

    def __init__(self, root_path: PathType, config: Optional[TreeConfig] = None) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory. Can be any path-like object.
            config: Rendering configuration. Defaults to an unfiltered,
                unlimited tree without sizes.
        """
        self.root_path = Path(root_path)
        self.config = config if config is not None else TreeConfig()
        self._rules = rules_from_config(self.config)

    def get_root_entry(self) -> FileSystemEntry:
        """Create the entry for the root of the tree.

        The root is never filtered and sits at depth 0.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
        """
        if not self.root_path.exists():
            raise FileNotFoundError(f"The specified path '{self.root_path}' does not exist.")

        canonical_root = self.root_path.resolve()
        name = canonical_root.name or str(canonical_root)
        is_dir = self.root_path.is_dir()
        size = entry_size(self.root_path, is_dir) if self.config.show_sizes else None
        return FileSystemEntry(self.root_path, name, "", is_dir=is_dir, size=size)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        The first line is the root; every further line is one visible entry.

        Yields:
            Lines of the tree representation, without trailing newlines.

        Raises:
            FileNotFoundError: If the root path doesn't exist.

        Example:
            >>> tree = FileSystemTree("src")  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
             src/
             ├── main.py
             └── utils/
                 └── helpers.py
        """
        root = self.get_root_entry()
        yield f" {bold(root.label, self.config.color)}{muted(size_suffix(root.size), self.config.color)}"
        if root.is_dir:
            yield from self._render(root.path, root.path.resolve(), "", 0)

    def get_tree_representation(self) -> str:
        """Get the complete tree representation as a string.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
        """
        return "\n".join(self.stream_tree_representation())

    def _render(self, current: Path, canonical_root: Path, prefix: str, depth: int) -> Iterator[str]:
        """Recursively render the children of a directory.

        Relative paths of the children are computed against canonical_root.
        """
        if self.config.max_depth is not None and depth >= self.config.max_depth:
            return

        entries = self._list_entries(current, canonical_root)
        for i, entry in enumerate(entries):
            is_last = i == len(entries) - 1
            yield self._format_line(entry, prefix, is_last)
            if entry.is_dir:
                yield from self._render(
                    entry.path, canonical_root, prefix + self.config.theme.vertical(is_last), depth + 1
                )

    def _format_line(self, entry: FileSystemEntry, prefix: str, is_last: bool) -> str:
        color = self.config.color
        label = bold(entry.label, color) if entry.is_dir else entry.label
        return f" {prefix}{self.config.theme.branch(is_last)}{label}{muted(size_suffix(entry.size), color)}"

    def _list_entries(self, directory: Path, canonical_root: Path) -> List[FileSystemEntry]:
        """List, filter and sort the visible children of a directory."""
        try:
            names = os.listdir(directory)
        except OSError as e:
            logger.debug("Cannot list %s: %s", directory, e)
            return []

        entries = []
        for name in names:
            entry = self._create_entry(directory / name, canonical_root)
            if entry is not None:
                entries.append(entry)

        # Directories and files are interleaved
        entries.sort(key=lambda entry: entry.name)
        return entries

    def _create_entry(self, path: Path, canonical_root: Path) -> Optional[FileSystemEntry]:
        """Create the entry for a child path, or None if it is skipped or filtered out."""
        try:
            canonical = path.resolve()
            relative_path = os.path.relpath(canonical, canonical_root).replace(os.sep, "/")
        except (OSError, RuntimeError, ValueError) as e:
            logger.debug("Skipping %s: cannot resolve path: %s", path, e)
            return None

        if self._rules.exclude(path.name, relative_path):
            return None

        try:
            is_dir = path.is_dir()
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            is_dir = False

        size = entry_size(path, is_dir) if self.config.show_sizes else None
        return FileSystemEntry(path, path.name, relative_path, is_dir=is_dir, size=size)
