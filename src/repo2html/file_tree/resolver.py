"""Lookup of tree nodes by slash-delimited path."""

from typing import Optional, Union

from repo2html.file_tree.nodes import FileNode, FolderNode


def resolve(root: FolderNode, slash_path: str) -> Optional[Union[FolderNode, FileNode]]:
    """Return the node reached by following ``slash_path`` from ``root``.

    The path is split on ``/`` regardless of platform. A leading segment equal to
    the root's own name is dropped, so both ``"repo/src/a.txt"`` and ``"src/a.txt"``
    resolve against a root named ``repo``. Empty segments are ignored.

    Args:
        root: The tree's root folder.
        slash_path: Path of child names separated by ``/``.

    Returns:
        The matching node, or None if any segment has no matching child.

    Example:
        >>> root = FolderNode("repo")
        >>> src = FolderNode("src", parent=root)
        >>> resolve(root, "repo/src") is src
        True
        >>> resolve(root, "src/missing.txt") is None
        True
    """
    segments = [segment for segment in slash_path.split("/") if segment]
    if segments and segments[0] == root.name:
        segments = segments[1:]

    node: Union[FolderNode, FileNode] = root
    for segment in segments:
        if not isinstance(node, FolderNode):
            return None
        child = node.child(segment)
        if child is None:
            return None
        node = child
    return node
