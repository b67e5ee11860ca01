"""Directory tree visualization utilities.

This package provides tools for rendering directory structures as Unicode
trees, with include/exclude filtering, depth limiting and size annotations.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("appletree")
except PackageNotFoundError:
    __version__ = "unknown"
