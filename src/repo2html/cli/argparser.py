"""Command-line argument parsing for repo2html.

This module defines the command-line interface for repo2html,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from repo2html import __version__
from repo2html.config import parse_budget
from repo2html.ignore_rules import IgnoreRules


def create_ignore_action(ignore_rules: IgnoreRules) -> Type[argparse.Action]:
    """Create a custom action class that feeds ignore options into ``ignore_rules``.

    Patterns given with -i/--ignore and files given with -e/--exclude are added in
    the exact order they appear on the command line, so a later negation can
    re-include what an earlier pattern or file excluded.

    Args:
        ignore_rules: The rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class IgnoreRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    ignore_rules.load_file(values)
                else:
                    ignore_rules.load_file(Path(str(values)))
            else:  # -i/--ignore
                ignore_rules.add_pattern(str(values))

            items = getattr(namespace, self.dest, None) or []
            items.append(values)
            setattr(namespace, self.dest, items)

    return IgnoreRulesAction


def budget_type(value: str) -> Union[int, float]:
    """argparse type for --budget; reports bad values as usage errors."""
    try:
        return parse_budget(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_parser(ignore_rules: IgnoreRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        ignore_rules: The ignore rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with repo2html's options.
    """
    description = """
    repo2html: render a repository or directory as browsable HTML documents.

    The directory tree is walked, files are filtered by extension (and by the
    hidden-file policy and optional gitignore-style patterns), and the resulting
    folder/file tree is written as standalone HTML documents. Each document holds at
    most roughly BUDGET characters of file content; the remaining files spill into
    additional documents numbered from zero (repo0.html, repo1.html, ...).

    SOURCE may be a local directory or a git repository URL. A URL is cloned into a
    directory named after the repository (unless that directory already exists), and
    the clone's .git directory is removed afterwards.
    """

    epilog = """
    Examples:
      # Render a local directory, allowing Python and text files
      repo2html -w py -w txt /path/to/project

      # Clone and render a repository into project0.html, project1.html, ...
      repo2html https://github.com/user/project.git

      # One document per 100000 characters of content, written under out/
      repo2html -b 100000 -o out/project.html /path/to/project

      # No size limit
      repo2html -b inf /path/to/project

      # Include dot-files, but never .lock files
      repo2html -H -x lock /path/to/project

      # Exclude paths with gitignore-style patterns or files
      repo2html -e .gitignore -i "docs/" -i "!docs/index.txt" /path/to/project

      # Read settings from a JSON config file and print a summary
      repo2html -c config/config.json -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="repo2html",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"repo2html {__version__}", help="Show the version and exit"
    )

    IgnoreAction = create_ignore_action(ignore_rules)

    parser.add_argument(
        "source",
        help="Directory to render, or a git repository URL to clone and render.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help=(
            "Base output file name; a zero-based index is inserted before the suffix. "
            "Defaults to <directory name>.html in the current directory."
        ),
    )
    parser.add_argument(
        "-b",
        "--budget",
        type=budget_type,
        metavar="CHARS",
        help="Approximate maximum characters of file content per document, or 'inf' (default: 500000).",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="FILE",
        help="JSON configuration file (default: config/config.json if it exists).",
    )
    parser.add_argument(
        "-w",
        "--whitelist",
        action="append",
        metavar="EXT",
        help="Allowed file extension (can be specified multiple times; replaces the configured list).",
    )
    parser.add_argument(
        "-x",
        "--blacklist",
        action="append",
        metavar="EXT",
        help="Rejected file extension (can be specified multiple times; replaces the configured list).",
    )
    parser.add_argument(
        "-H",
        "--include-hidden",
        action="store_true",
        default=None,
        help="Include files whose names start with a dot.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=IgnoreAction,
        help="Path to an ignore file (e.g., .gitignore) whose patterns exclude paths (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=IgnoreAction,
        help=(
            "Individual gitignore-style pattern to exclude paths. Can be specified multiple times, and "
            "patterns are processed in the order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links during traversal. By default, symlinks are skipped.",
    )
    parser.add_argument(
        "--clone-dir",
        type=Path,
        metavar="DIR",
        help="Directory to clone into when SOURCE is a URL (default: the repository name).",
    )
    parser.add_argument(
        "--keep-git",
        action="store_true",
        help="Keep the .git directory of a fresh clone instead of removing it.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print a summary report. Valid destinations: stderr, stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Report progress (-v) or debugging detail (-vv) on stderr.",
    )

    return parser


def is_repository_url(source: str) -> bool:
    """Tell a clonable URL apart from a local path.

    Example:
        >>> is_repository_url("https://github.com/user/project")
        True
        >>> is_repository_url("git@github.com:user/project.git")
        True
        >>> is_repository_url("./project")
        False
    """
    return "://" in source or source.startswith("git@")


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.clone_dir is not None and not is_repository_url(args.source):
        raise ValueError("--clone-dir requires SOURCE to be a repository URL")
    if args.config is not None and not args.config.exists():
        raise ValueError(f"Configuration file not found: {args.config}")
