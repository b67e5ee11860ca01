"""Size aggregation and human-readable formatting for tree annotations.

Sizes always reflect what is on disk: directory totals are computed by an
unfiltered walk, independent of the exclude/include patterns and the depth
ceiling of the rendered tree. Anything that cannot be measured is skipped.
"""

import logging
import os
import stat
from typing import Optional

from appletree.types import PathType

logger = logging.getLogger(__name__)

SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def file_size(path: PathType) -> Optional[int]:
    """Get the size of a regular file, following symlinks.

    Args:
        path: File to measure.

    Returns:
        The size in bytes, or None if the path is not a regular file or cannot
        be examined.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        logger.debug("Cannot determine size of %s: %s", path, e)
        return None
    if not stat.S_ISREG(st.st_mode):
        return None
    return st.st_size


def directory_size(path: PathType) -> int:
    """Sum the sizes of all regular files below a directory.

    Directory symlinks are not descended into; symlinks to regular files count
    with the size of their target. Unreadable subdirectories and files that
    vanish during the walk are skipped, so the result may be a partial sum.

    Args:
        path: Directory to measure.

    Returns:
        Total size in bytes.
    """

    def on_error(error: OSError) -> None:
        logger.debug("Skipping unreadable directory during size walk: %s", error)

    total = 0
    for dirpath, _dirnames, filenames in os.walk(path, onerror=on_error):
        for filename in filenames:
            size = file_size(os.path.join(dirpath, filename))
            if size is not None:
                total += size
    return total


def entry_size(path: PathType, is_dir: bool) -> Optional[int]:
    """Resolve the size annotation for a single entry."""
    if is_dir:
        return directory_size(path)
    return file_size(path)


def format_size(num_bytes: int) -> str:
    """Format a byte count using binary units.

    The value is divided by 1024 until it drops below 1024 or the largest unit
    is reached. Scaled values below 10 keep one decimal place; everything else,
    including plain bytes, is rounded to an integer.

    Args:
        num_bytes: Number of bytes.

    Returns:
        Human-readable size such as "1.5 KiB".

    Example:
        >>> format_size(900)
        '900 B'
        >>> format_size(1536)
        '1.5 KiB'
        >>> format_size(10240)
        '10 KiB'
        >>> format_size(2000)
        '2.0 KiB'
    """
    value = float(num_bytes)
    index = 0
    while value >= 1024.0 and index < len(SIZE_UNITS) - 1:
        value /= 1024.0
        index += 1

    if value < 10.0 and index > 0:
        return f"{value:.1f} {SIZE_UNITS[index]}"
    return f"{value:.0f} {SIZE_UNITS[index]}"


def size_suffix(size: Optional[int]) -> str:
    """Parenthesised size annotation, or an empty string when unknown."""
    if size is None:
        return ""
    return f" ({format_size(size)})"
