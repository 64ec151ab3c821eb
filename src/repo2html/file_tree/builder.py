"""Incremental construction of the repository tree from a directory walk.

The builder is an explicit accumulator: it owns the root FolderNode and is
handed to the walker as the visitor, so every visited file either lands in the
tree or is accounted for in ``skipped`` or ``read_errors``.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

from repo2html.file_tree.nodes import FileNode, FolderNode
from repo2html.file_tree.walker import walk
from repo2html.filter_policy import FilterDecision, FilterPolicy, file_extension
from repo2html.ignore_rules import IgnoreRules
from repo2html.types import PathType

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Stateful visitor that grows a folder/file tree one file at a time.

    Intermediate folders are created on demand the first time a file below them is
    accepted, so folders without included files never appear, and there is at most
    one FolderNode per path prefix however many files share it.

    Attributes:
        root_path (Path): The directory being walked.
        root (FolderNode): The tree's root, named after the basename of root_path.
        policy (FilterPolicy): Extension and hidden-file policy.
        ignore_rules (Optional[IgnoreRules]): Gitignore-style patterns checked first.
        encoding (str): Encoding used to decode file contents.
        errors (str): Decode error handler passed to ``open``.
        skipped (List[str]): Paths rejected with a warning (unlisted extension).
        read_errors (List[Tuple[str, Exception]]): Files that could not be read.

    Example:
        >>> builder = TreeBuilder("repo")  # doctest: +SKIP
        >>> walk("repo", builder.visit)  # doctest: +SKIP
        >>> [node.name for node in builder.root.children]  # doctest: +SKIP
        ['src', 'README.txt']
    """

    def __init__(
        self,
        root_path: PathType,
        policy: Optional[FilterPolicy] = None,
        ignore_rules: Optional[IgnoreRules] = None,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        if errors not in ("strict", "ignore", "replace"):
            raise ValueError(f"Invalid error handler '{errors}'. Must be one of: strict, ignore, replace")

        self.root_path = Path(root_path)
        name = self.root_path.resolve().name
        self.root = FolderNode(name, tree_path=name)
        self.policy = policy if policy is not None else FilterPolicy()
        self.ignore_rules = ignore_rules
        self.encoding = encoding
        self.errors = errors
        self.skipped: List[str] = []
        self.read_errors: List[Tuple[str, Exception]] = []

    def visit(self, file_path: str, stat_result: Optional[os.stat_result] = None) -> None:
        """Add one walked file to the tree, unless it is filtered out or unreadable."""
        relative = Path(os.path.relpath(file_path, self.root_path))
        *folders, filename = relative.parts

        if self.ignore_rules and self.ignore_rules.matches(relative.as_posix()):
            logger.debug("Ignored %s", file_path)
            return

        decision = self.policy.check(filename)
        if decision.warns:
            logger.warning("Did not include %s (%s)", file_path, file_extension(filename))
            self.skipped.append(file_path)
            return
        if decision is not FilterDecision.INCLUDED:
            logger.debug("Skipped %s (%s)", file_path, decision.value)
            return

        try:
            with open(file_path, "r", encoding=self.encoding, errors=self.errors, newline="") as f:
                content = f.read()
        except (OSError, UnicodeError) as e:
            logger.error("Failed to read %s: %s", file_path, e)
            self.read_errors.append((file_path, e))
            return

        # Folders are only created once the file is known to be readable
        node = self._ensure_folders(folders)
        FileNode(
            filename,
            parent=node,
            tree_path=node.tree_path + os.sep + filename,
            extension=file_extension(filename),
            content=content,
            file_size=stat_result.st_size if stat_result is not None else len(content.encode(self.encoding)),
        )

    __call__ = visit

    def _ensure_folders(self, segments: List[str]) -> FolderNode:
        node = self.root
        for segment in segments:
            child = node.child(segment)
            if child is None:
                child = FolderNode(segment, parent=node, tree_path=node.tree_path + os.sep + segment)
            node = child
        return node


def build_tree(
    root_path: PathType,
    policy: Optional[FilterPolicy] = None,
    ignore_rules: Optional[IgnoreRules] = None,
    *,
    follow_symlinks: bool = False,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> TreeBuilder:
    """Walk ``root_path`` and return the populated TreeBuilder.

    Raises:
        FileNotFoundError: If the root path doesn't exist.
        NotADirectoryError: If the root path isn't a directory.
        PermissionError: If the walk itself is denied access.
    """
    builder = TreeBuilder(root_path, policy, ignore_rules, encoding=encoding, errors=errors)
    walk(root_path, builder.visit, follow_symlinks=follow_symlinks)
    return builder
