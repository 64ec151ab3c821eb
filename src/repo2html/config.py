"""JSON configuration loading.

Configuration files hold one object per package, keyed by package name::

    {
        "repo2html": {
            "extensionWhitelist": ["txt", "py"],
            "extensionBlacklist": ["lock"],
            "includeHiddenFiles": false,
            "lengthLimitPerFile": 500000,
            "ignorePatterns": ["node_modules/"]
        }
    }

A missing file or a missing section yields the defaults. The values are coerced
to the expected types but otherwise not validated.
"""

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from repo2html.exceptions import ConfigError
from repo2html.filter_policy import DEFAULT_EXTENSION_WHITELIST, FilterPolicy
from repo2html.ignore_rules import IgnoreRules
from repo2html.types import PathType

DEFAULT_CONFIG_PATH = Path("config") / "config.json"
DEFAULT_SECTION = "repo2html"


@dataclass
class Repo2HtmlConfig:
    """Settings read from a configuration file.

    Attributes:
        extension_whitelist: Allowed file extensions.
        extension_blacklist: Rejected file extensions.
        include_hidden_files: Whether dot-files may be included.
        budget: Maximum cumulative content length per document, or None if unset.
        ignore_patterns: Gitignore-style patterns excluded before filtering.
    """

    extension_whitelist: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSION_WHITELIST))
    extension_blacklist: List[str] = field(default_factory=list)
    include_hidden_files: bool = False
    budget: Optional[Union[int, float]] = None
    ignore_patterns: List[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Repo2HtmlConfig":
        config = cls()
        if "extensionWhitelist" in values:
            config.extension_whitelist = [str(ext) for ext in values["extensionWhitelist"]]
        if "extensionBlacklist" in values:
            config.extension_blacklist = [str(ext) for ext in values["extensionBlacklist"]]
        if "includeHiddenFiles" in values:
            config.include_hidden_files = bool(values["includeHiddenFiles"])
        if values.get("lengthLimitPerFile") is not None:
            config.budget = parse_budget(values["lengthLimitPerFile"])
        if "ignorePatterns" in values:
            config.ignore_patterns = [str(pattern) for pattern in values["ignorePatterns"]]
        return config

    def filter_policy(self) -> FilterPolicy:
        return FilterPolicy(
            extension_whitelist=list(self.extension_whitelist),
            extension_blacklist=list(self.extension_blacklist),
            include_hidden_files=self.include_hidden_files,
        )

    def ignore_rules(self) -> IgnoreRules:
        return IgnoreRules(self.ignore_patterns)


def parse_budget(value: Union[str, int, float]) -> Union[int, float]:
    """Parse a content-length budget; ``"inf"`` (any case) means unbounded.

    Example:
        >>> parse_budget("500000")
        500000
        >>> parse_budget("Infinity")
        inf

    Raises:
        ValueError: If the value is not a number or is negative.
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("inf", "infinity", "unbounded"):
            return math.inf
        number: Union[int, float]
        try:
            number = int(text)
        except ValueError:
            number = float(text)
    elif isinstance(value, bool):
        raise ValueError(f"Invalid budget: {value!r}")
    else:
        number = value
    if math.isnan(number):
        raise ValueError(f"Invalid budget: {value!r}")
    if number < 0:
        raise ValueError(f"Budget must not be negative: {value!r}")
    return number


def load_config(path: Optional[PathType] = None, section: str = DEFAULT_SECTION) -> Repo2HtmlConfig:
    """Load the ``section`` object from a JSON configuration file.

    Args:
        path: Configuration file. Defaults to ``config/config.json``.
        section: Top-level key to read. Defaults to ``"repo2html"``.

    Returns:
        The parsed configuration, or the defaults if the file or section is absent.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or holds
            values of the wrong shape.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        return Repo2HtmlConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(str(config_path), str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(str(config_path), "top-level value must be an object")
    values = data.get(section)
    if values is None:
        return Repo2HtmlConfig()
    if not isinstance(values, dict):
        raise ConfigError(str(config_path), f"section {section!r} must be an object")

    try:
        return Repo2HtmlConfig.from_mapping(values)
    except (TypeError, ValueError) as e:
        raise ConfigError(str(config_path), str(e)) from e
