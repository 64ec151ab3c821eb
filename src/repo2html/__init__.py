"""Directory to HTML conversion utilities.

This package provides tools for turning a directory tree (typically a cloned
source repository) into one or more browsable HTML documents, each capped at an
approximate content-length budget.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("repo2html")
except PackageNotFoundError:
    __version__ = "unknown"
