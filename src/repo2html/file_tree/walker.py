"""Recursive directory walk that hands every regular file to a visitor."""

import os
import stat
from pathlib import Path
from typing import Callable, NamedTuple, Set

from repo2html.types import PathType

Visitor = Callable[[str, os.stat_result], None]


class FileIdentifier(NamedTuple):
    """Device and inode pair identifying a directory, used to cut symlink loops."""

    device_id: int
    inode_number: int

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentifier":
        return cls(stat_result.st_dev, stat_result.st_ino)


def walk(
    root_path: PathType,
    visit: Visitor,
    *,
    follow_symlinks: bool = False,
    sort_entries: bool = True,
) -> None:
    """Visit every regular file under ``root_path``, depth-first.

    Directories are descended into but never passed to ``visit``. Each directory
    listing is processed in the order returned by ``os.listdir``, sorted by name
    unless ``sort_entries`` is False.

    Args:
        root_path: Directory to walk. Can be any path-like object.
        visit: Called as ``visit(file_path, stat_result)`` once per regular file.
        follow_symlinks: Whether symlinked files and directories are followed.
            When False, symlinks are skipped entirely.
        sort_entries: Whether to sort each directory listing by name.

    Raises:
        FileNotFoundError: If the root path doesn't exist.
        NotADirectoryError: If the root path isn't a directory.
        PermissionError: If a directory cannot be listed or a file cannot be stat'ed.

    Example:
        >>> seen = []
        >>> walk("src", lambda path, stat: seen.append(path))  # doctest: +SKIP
        >>> seen  # doctest: +SKIP
        ['src/main.py', 'src/utils/helpers.py']
    """
    root = Path(root_path)
    if not root.exists():
        raise FileNotFoundError(f"Root path does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Root path is not a directory: {root}")

    visited: Set[FileIdentifier] = set()
    _walk_directory(str(root), visit, follow_symlinks, sort_entries, visited)


def _walk_directory(
    directory: str,
    visit: Visitor,
    follow_symlinks: bool,
    sort_entries: bool,
    visited: Set[FileIdentifier],
) -> None:
    identifier = FileIdentifier.from_stat(os.stat(directory))
    if identifier in visited:
        return
    visited.add(identifier)

    try:
        entries = os.listdir(directory)
    except PermissionError as e:
        raise PermissionError(f"Access denied to {directory}: {e}") from e
    if sort_entries:
        entries = sorted(entries)

    for entry in entries:
        entry_path = os.path.join(directory, entry)
        if os.path.islink(entry_path) and not follow_symlinks:
            continue
        try:
            stat_result = os.stat(entry_path)
        except OSError:
            # Dangling or self-referencing symlink
            continue
        if stat.S_ISDIR(stat_result.st_mode):
            _walk_directory(entry_path, visit, follow_symlinks, sort_entries, visited)
        elif stat.S_ISREG(stat_result.st_mode):
            visit(entry_path, stat_result)

    # Allow the same directory to be reached again through an unrelated path
    visited.discard(identifier)
