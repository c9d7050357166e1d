"""Directory tree rendering utilities.

This package renders a directory subtree as an indented Unicode tree, with
ignore and stop lists and optional .gitignore-aware dimming or pruning.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("project-tree")
except PackageNotFoundError:
    __version__ = "unknown"
