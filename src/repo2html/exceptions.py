from typing import Optional


class Repo2HtmlError(Exception):
    """
    Base class for the fatal errors raised by repo2html collaborators.

    Errors local to a single file (an unlisted extension, an unreadable file) are
    logged and absorbed while the tree is built; the exceptions in this module
    are reserved for failures that abort the whole run.
    """

    pass


class CloneError(Repo2HtmlError):
    """
    Exception raised when a remote repository cannot be cloned.

    Attributes:
        url (str): The repository URL that failed to clone.
        returncode (Optional[int]): Exit status of the ``git`` process, or None if
            the process could not be started at all.

    Example:
        >>> error = CloneError("https://example.com/repo.git", 128)
        >>> str(error)
        'Failed to clone https://example.com/repo.git (git exited with status 128)'
    """

    def __init__(self, url: str, returncode: Optional[int] = None, detail: str = "") -> None:
        """
        Initialize the exception with the failing URL.

        Args:
            url (str): The repository URL that failed to clone.
            returncode (int, optional): Exit status of ``git``. Defaults to None.
            detail (str, optional): Extra diagnostic text, usually git's stderr.
        """
        self.url = url
        self.returncode = returncode
        self.detail = detail
        if returncode is None:
            message = f"Failed to clone {url}"
        else:
            message = f"Failed to clone {url} (git exited with status {returncode})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class CleanupError(Repo2HtmlError):
    """
    Exception raised when the ``.git`` directory of a fresh clone cannot be removed.

    Example:
        >>> error = CleanupError("repo/.git", "permission denied")
        >>> str(error)
        'Failed to remove repo/.git: permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to remove {path}: {reason}")


class ConfigError(Repo2HtmlError):
    """
    Exception raised when a configuration file exists but cannot be read or parsed.

    Example:
        >>> error = ConfigError("config/config.json", "Expecting value: line 1 column 1 (char 0)")
        >>> str(error)
        'Invalid configuration file config/config.json: Expecting value: line 1 column 1 (char 0)'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid configuration file {path}: {reason}")
