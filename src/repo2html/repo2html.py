"""Directory to HTML conversion.

This module ties the pieces together: the directory walk feeds the tree
builder, and the finished tree is handed to the paginated renderer, whose
documents are either yielded or written to numbered files.
"""

import logging
import math
from pathlib import Path
from typing import Iterator, List, Optional, Union

from anytree import PreOrderIter

from repo2html.file_tree.builder import TreeBuilder
from repo2html.file_tree.nodes import FileNode, FolderNode
from repo2html.file_tree.walker import walk
from repo2html.filter_policy import FilterPolicy
from repo2html.html_renderer import PaginatedRenderer, write_documents
from repo2html.ignore_rules import IgnoreRules
from repo2html.types import PathType

logger = logging.getLogger(__name__)


class Repo2Html:
    """Converts a directory into one or more paginated HTML documents.

    The tree is built on first access and its files' contents are held in memory
    until the object is discarded. Rendering consumes the tree: every file is
    marked rendered as it is emitted, so documents can only be produced once.

    Counts describing the tree are available as soon as it is built;
    ``document_count`` grows as documents are produced.

    Attributes:
        directory (Path): Directory being converted.
        policy (FilterPolicy): Extension and hidden-file policy.
        ignore_rules (Optional[IgnoreRules]): Gitignore-style patterns excluded first.
        budget (float): Maximum cumulative content length per document.
        follow_symlinks (bool): Whether the walk follows symbolic links.

    Example:
        >>> converter = Repo2Html("repo", budget=500000)  # doctest: +SKIP
        >>> converter.write("repo.html")  # doctest: +SKIP
        [PosixPath('repo0.html'), PosixPath('repo1.html')]
        >>> converter.file_count  # doctest: +SKIP
        42

    Raises:
        ValueError: If directory is not a directory or the budget is negative.
        FileNotFoundError: If the directory disappears before the walk starts.
        PermissionError: If the walk is denied access.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        policy: Optional[FilterPolicy] = None,
        ignore_rules: Optional[IgnoreRules] = None,
        budget: Union[int, float] = math.inf,
        follow_symlinks: bool = False,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        self.directory = Path(directory)
        if not self.directory.is_dir():
            raise ValueError(f"'{directory}' is not a valid directory")
        if budget < 0:
            raise ValueError(f"Budget must not be negative: {budget}")

        self.policy = policy if policy is not None else FilterPolicy()
        self.ignore_rules = ignore_rules
        self.budget = budget
        self.follow_symlinks = follow_symlinks

        self._builder = TreeBuilder(self.directory, self.policy, ignore_rules, encoding=encoding, errors=errors)
        self._built = False
        self._rendering_started = False
        self._document_count = 0

    @property
    def tree(self) -> FolderNode:
        """Root of the repository tree, built on first access."""
        self._ensure_built()
        return self._builder.root

    def _ensure_built(self) -> None:
        if not self._built:
            walk(self.directory, self._builder.visit, follow_symlinks=self.follow_symlinks)
            self._built = True

    def _files(self) -> Iterator[FileNode]:
        return PreOrderIter(self.tree, filter_=lambda node: not node.is_dir)

    @property
    def file_count(self) -> int:
        """Number of files included in the tree."""
        return sum(1 for _ in self._files())

    @property
    def directory_count(self) -> int:
        """Number of folders in the tree, excluding the root."""
        return sum(1 for node in PreOrderIter(self.tree) if node.is_dir) - 1

    @property
    def character_count(self) -> int:
        """Total content length of the included files."""
        return sum(node.content_length for node in self._files())

    @property
    def skipped_count(self) -> int:
        """Number of files rejected because their extension is not whitelisted."""
        self._ensure_built()
        return len(self._builder.skipped)

    @property
    def read_error_count(self) -> int:
        """Number of files that were accepted but could not be read."""
        self._ensure_built()
        return len(self._builder.read_errors)

    @property
    def document_count(self) -> int:
        """Number of documents produced so far."""
        return self._document_count

    @property
    def rendering_complete(self) -> bool:
        return self._rendering_started and all(node.rendered for node in self._files())

    def stream_documents(self) -> Iterator[str]:
        """Yield HTML documents until every included file has been rendered.

        Raises:
            RuntimeError: If documents have already been produced.
        """
        if self._rendering_started:
            raise RuntimeError("Documents have already been rendered")
        self._rendering_started = True

        for document in PaginatedRenderer(self.tree, self.budget):
            self._document_count += 1
            yield document

    def write(self, html_path: PathType) -> List[Path]:
        """Write every document to ``html_path`` with a zero-based index before the suffix.

        Returns:
            The paths written, in order.
        """
        logger.info("Generating %s", html_path)
        return write_documents(self.stream_documents(), html_path)
