"""Remote repository cloning and post-clone cleanup."""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from repo2html.exceptions import CleanupError, CloneError
from repo2html.types import PathType

logger = logging.getLogger(__name__)


def repo_name_from_url(url: str) -> str:
    """Derive a local directory name from a repository URL.

    Example:
        >>> repo_name_from_url("https://github.com/user/project.git")
        'project'
        >>> repo_name_from_url("git@github.com:user/project/")
        'project'
    """
    name = url.rstrip("/").rsplit("/", 1)[-1].rsplit(":", 1)[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    if not name:
        raise ValueError(f"Cannot derive a repository name from {url!r}")
    return name


def clone_repo(url: str, destination: Optional[PathType] = None) -> Path:
    """Clone ``url`` into ``destination`` (default: the repository name in the cwd).

    Returns:
        The path of the cloned working tree.

    Raises:
        CloneError: If ``git`` is missing or exits with a non-zero status.
    """
    target = Path(destination) if destination is not None else Path(repo_name_from_url(url))
    logger.info("Cloning %s into %s", url, target)
    try:
        subprocess.run(
            ["git", "clone", url, str(target)],
            check=True,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise CloneError(url, detail=f"git executable not found ({e})") from e
    except subprocess.CalledProcessError as e:
        raise CloneError(url, e.returncode, (e.stderr or "").strip()) from e
    return target


def remove_git_dir(directory: PathType) -> None:
    """Delete ``directory/.git`` if it exists.

    Raises:
        CleanupError: If the directory exists but cannot be removed.
    """
    git_dir = Path(directory) / ".git"
    if not git_dir.exists():
        return
    logger.debug("Removing %s", git_dir)
    try:
        shutil.rmtree(git_dir)
    except OSError as e:
        raise CleanupError(str(git_dir), str(e)) from e
