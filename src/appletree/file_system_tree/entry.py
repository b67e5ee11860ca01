"""Entry representation for file system elements visited during traversal."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class FileSystemEntry:
    """A file or directory encountered while rendering the tree.

    Entries are created when their parent directory is listed and dropped once
    their subtree has been rendered; no tree of entries is kept around.

    Attributes:
        path (Path): The path as listed from the parent directory.
        name (str): The basename of the entry.
        relative_path (str): Path of the canonical entry relative to the canonical
            root, using forward slashes.
        is_dir (bool): True if the entry is (or links to) a directory.
        size (Optional[int]): Resolved size in bytes, if sizes were requested and
            could be determined.

    Example:
        >>> entry = FileSystemEntry(Path("/tmp/src/main.txt"), "main.txt", "src/main.txt", is_dir=False)
        >>> entry.label
        'main.txt'
        >>> FileSystemEntry(Path("/tmp/src"), "src", "src", is_dir=True).label
        'src/'
    """

    path: Path
    name: str
    relative_path: str
    is_dir: bool = False
    size: Optional[int] = None

    @property
    def label(self) -> str:
        """Display name, with a trailing slash for directories."""
        return f"{self.name}/" if self.is_dir else self.name
