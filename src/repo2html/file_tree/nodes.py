"""Folder and file nodes of the in-memory repository tree."""

from typing import Any, Optional

from anytree import Node


class FolderNode(Node):  # type: ignore
    """Node representing a folder in the repository tree.

    Extends anytree.Node; children keep the order in which they were attached,
    which is the order their first descendant file was discovered during the walk.

    Attributes:
        name (str): The folder's name (a single path segment).
        tree_path (str): Path accumulated from the root, joined with the OS separator.
            anytree already uses ``path`` for the tuple of ancestor nodes.
        parent (Optional[FolderNode]): The parent folder, None for the root.

    Example:
        >>> root = FolderNode("repo", tree_path="repo")
        >>> src = FolderNode("src", parent=root, tree_path="repo/src")
        >>> [child.name for child in root.children]
        ['src']
        >>> src.is_dir
        True
    """

    is_dir = True

    def __init__(
        self,
        name: str,
        parent: Optional["FolderNode"] = None,
        tree_path: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.tree_path = name if tree_path is None else tree_path

    def child(self, name: str) -> Optional[Node]:
        """Return the child whose name is exactly ``name``, or None."""
        for node in self.children:
            if node.name == name:
                return node
        return None


class FileNode(Node):  # type: ignore
    """Node representing an included file and its full text content.

    ``content`` holds the raw decoded text; escaping for HTML happens when the
    file is rendered. ``rendered`` flips to True once, during the pass that emits
    the file, and never reverts.

    Attributes:
        name (str): The file's name, including its extension.
        tree_path (str): Path accumulated from the root.
        extension (str): Lowercased extension without the leading dot.
        content (str): Full decoded text of the file.
        content_length (int): Character count of ``content``, fixed at construction.
        file_size (int): Size in bytes reported by the walk.
        rendered (bool): Whether the file has been emitted into some document.

    Example:
        >>> node = FileNode("a.txt", tree_path="repo/a.txt", extension="txt", content="hello")
        >>> node.content_length, node.rendered
        (5, False)
    """

    is_dir = False

    def __init__(
        self,
        name: str,
        parent: Optional[FolderNode] = None,
        tree_path: Optional[str] = None,
        extension: str = "",
        content: str = "",
        file_size: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.tree_path = name if tree_path is None else tree_path
        self.extension = extension
        self.content = content
        self.content_length = len(content)
        self.file_size = file_size
        self.rendered = False

    def mark_rendered(self) -> None:
        self.rendered = True
