"""In-memory repository tree: nodes, directory walk, incremental builder and path lookup."""

from .builder import TreeBuilder, build_tree
from .nodes import FileNode, FolderNode
from .resolver import resolve
from .walker import walk

__all__ = ["FileNode", "FolderNode", "TreeBuilder", "build_tree", "resolve", "walk"]
