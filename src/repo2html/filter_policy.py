"""Extension and hidden-file inclusion policy.

The policy is a pure function of the file name, its extension, and the
configured allow/deny lists, so it can be exercised without touching the
filesystem. Callers decide what to do with a rejection; only ``UNLISTED``
carries a warning signal.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Sequence

HIDDEN_FILE_MARKER = "."
DEFAULT_EXTENSION_WHITELIST = ("txt",)


class FilterDecision(str, Enum):
    """Outcome of applying the filter policy to a single file.

    Values:
        INCLUDED: The file is accepted into the tree.
        HIDDEN: The file name starts with the hidden-file marker and hidden files are excluded.
        BLACKLISTED: The extension appears in the deny-list.
        UNLISTED: The extension does not appear in the allow-list (reported as a warning).
    """

    INCLUDED = "included"
    HIDDEN = "hidden"
    BLACKLISTED = "blacklisted"
    UNLISTED = "unlisted"

    @property
    def included(self) -> bool:
        return self is FilterDecision.INCLUDED

    @property
    def warns(self) -> bool:
        """Whether the caller should surface a warning for this rejection."""
        return self is FilterDecision.UNLISTED


def file_extension(filename: str) -> str:
    """Return the lowercased text after the last ``.`` in ``filename``, or ``""``.

    Example:
        >>> file_extension("README.TXT")
        'txt'
        >>> file_extension("archive.tar.gz")
        'gz'
        >>> file_extension("Makefile")
        ''
    """
    _, dot, extension = filename.rpartition(".")
    return extension.lower() if dot else ""


def normalize_extensions(extensions: Iterable[str]) -> List[str]:
    """Lowercase extensions and strip a leading dot so ``.TXT`` and ``txt`` compare equal."""
    return [ext.strip().lower().lstrip(".") for ext in extensions]


def decide(
    filename: str,
    extension: str,
    include_hidden: bool,
    whitelist: Sequence[str],
    blacklist: Sequence[str],
) -> FilterDecision:
    """Decide whether a file is included.

    The deny-list is consulted before the allow-list, and the hidden-file check
    comes first of all.

    Args:
        filename: The file's name (a single path segment).
        extension: The lowercased extension, without the leading dot.
        include_hidden: Whether names starting with ``.`` may be included.
        whitelist: Extensions that are allowed.
        blacklist: Extensions that are always rejected.

    Returns:
        The FilterDecision for this file.

    Example:
        >>> decide("notes.md", "md", False, ["txt"], [])
        <FilterDecision.UNLISTED: 'unlisted'>
        >>> decide(".env", "env", False, ["env"], [])
        <FilterDecision.HIDDEN: 'hidden'>
    """
    if filename.startswith(HIDDEN_FILE_MARKER) and not include_hidden:
        return FilterDecision.HIDDEN
    if extension in blacklist:
        return FilterDecision.BLACKLISTED
    if extension not in whitelist:
        return FilterDecision.UNLISTED
    return FilterDecision.INCLUDED


@dataclass
class FilterPolicy:
    """Configured filter policy.

    Attributes:
        extension_whitelist: Allowed extensions. Defaults to ``["txt"]``.
        extension_blacklist: Rejected extensions. Defaults to empty.
        include_hidden_files: Whether dot-files may be included. Defaults to False.

    Example:
        >>> policy = FilterPolicy(extension_whitelist=[".PY", "txt"])
        >>> policy.check("main.py")
        <FilterDecision.INCLUDED: 'included'>
        >>> policy.check("notes.md").warns
        True
    """

    extension_whitelist: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSION_WHITELIST))
    extension_blacklist: List[str] = field(default_factory=list)
    include_hidden_files: bool = False

    def __post_init__(self) -> None:
        self.extension_whitelist = normalize_extensions(self.extension_whitelist)
        self.extension_blacklist = normalize_extensions(self.extension_blacklist)

    def check(self, filename: str) -> FilterDecision:
        return decide(
            filename,
            file_extension(filename),
            self.include_hidden_files,
            self.extension_whitelist,
            self.extension_blacklist,
        )
