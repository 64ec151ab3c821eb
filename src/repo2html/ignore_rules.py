"""Gitignore-style ignore patterns applied before the filter policy."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec import PathSpec

from repo2html.types import PathType


class IgnoreRules:
    """Ordered collection of gitignore-style patterns.

    Patterns are matched against paths relative to the walked root, using forward
    slashes. Later patterns override earlier ones, so negations (``!keep.txt``)
    work the way they do in a ``.gitignore`` file. Patterns may be added one at a
    time or loaded from files; the order of additions is preserved.

    Example:
        >>> rules = IgnoreRules(["build/", "*.log"])
        >>> rules.matches("build/out.txt")
        True
        >>> rules.add_pattern("!keep.log")
        >>> rules.matches("keep.log")
        False
        >>> bool(IgnoreRules())
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None) -> None:
        self._lines: List[str] = []
        self._spec = PathSpec.from_lines("gitwildmatch", [])
        if patterns is not None:
            for pattern in patterns:
                self.add_pattern(pattern)

    def __bool__(self) -> bool:
        return bool(self._lines)

    @property
    def patterns(self) -> List[str]:
        return list(self._lines)

    def add_pattern(self, pattern: str) -> None:
        self._lines.append(pattern)
        self._spec = PathSpec.from_lines("gitwildmatch", self._lines)

    def load_file(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns found in one or more ignore files.

        Raises:
            FileNotFoundError: If any of the files does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")
            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._spec = PathSpec.from_lines("gitwildmatch", self._lines)

    def matches(self, relative_path: str) -> bool:
        return self._spec.match_file(relative_path)
