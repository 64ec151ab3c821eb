"""Command-line interface for repo2html.

This module provides the command-line entry point: it parses arguments, loads
configuration, clones the source repository when given a URL, and writes the
paginated HTML documents.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Render a local directory
    $ repo2html /path/to/dir

    # Clone a repository and render it in 100000-character documents
    $ repo2html https://github.com/user/project.git -b 100000

    # Display version information
    $ repo2html --version
"""

import argparse
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Union

from repo2html.cli.argparser import create_parser, is_repository_url, validate_args
from repo2html.config import Repo2HtmlConfig, load_config
from repo2html.filter_policy import FilterPolicy
from repo2html.git import clone_repo, remove_git_dir, repo_name_from_url
from repo2html.ignore_rules import IgnoreRules
from repo2html.repo2html import Repo2Html

logger = logging.getLogger("repo2html")

DEFAULT_BUDGET = 500000


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr; -v shows progress and -vv debugging detail."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing various count metrics.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Characters: {counts['characters']}",
        f"Documents: {counts['documents']}",
    ]
    if counts["skipped"]:
        result.append(f"Skipped (unlisted extension): {counts['skipped']}")
    if counts["read_errors"]:
        result.append(f"Unreadable: {counts['read_errors']}")
    return "\n".join(result)


def build_policy(args: argparse.Namespace, config: Repo2HtmlConfig) -> FilterPolicy:
    """Combine configured filter settings with command-line overrides."""
    return FilterPolicy(
        extension_whitelist=args.whitelist if args.whitelist is not None else list(config.extension_whitelist),
        extension_blacklist=args.blacklist if args.blacklist is not None else list(config.extension_blacklist),
        include_hidden_files=args.include_hidden if args.include_hidden is not None else config.include_hidden_files,
    )


def resolve_budget(args: argparse.Namespace, config: Repo2HtmlConfig) -> Union[int, float]:
    if args.budget is not None:
        return args.budget
    if config.budget is not None:
        return config.budget
    return DEFAULT_BUDGET


def prepare_source(args: argparse.Namespace) -> Path:
    """Return the directory to render, cloning it first when SOURCE is a URL.

    As with a plain ``git clone``, an existing directory is reused rather than
    cloned again.
    """
    if not is_repository_url(args.source):
        return Path(args.source)

    directory = args.clone_dir if args.clone_dir is not None else Path(repo_name_from_url(args.source))
    if directory.exists():
        logger.info("Using existing clone at %s", directory)
        return directory

    clone_repo(args.source, directory)
    if not args.keep_git:
        remove_git_dir(directory)
    return directory


def main() -> None:
    """Main entry point for the repo2html command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
    """
    try:
        # Populated by -i/-e as the arguments are parsed
        cli_ignore_rules = IgnoreRules()
        parser = create_parser(cli_ignore_rules)
        args = parser.parse_args()

        validate_args(args)
        configure_logging(args.verbose)

        config = load_config(args.config)
        policy = build_policy(args, config)
        ignore_rules = IgnoreRules(config.ignore_patterns + cli_ignore_rules.patterns)
        budget = resolve_budget(args, config)

        directory = prepare_source(args)
        output = args.output if args.output else Path(f"{directory.resolve().name}.html")

        converter = Repo2Html(
            directory,
            policy=policy,
            ignore_rules=ignore_rules or None,
            budget=budget,
            follow_symlinks=args.follow_symlinks,
        )
        written = converter.write(output)
        if not written:
            logger.warning("No files matched the filters; no documents were written.")

        if args.summary:
            counts = {
                "directories": converter.directory_count,
                "files": converter.file_count,
                "characters": converter.character_count,
                "documents": converter.document_count,
                "skipped": converter.skipped_count,
                "read_errors": converter.read_error_count,
            }
            stream = sys.stdout if args.summary == "stdout" else sys.stderr
            print(format_counts(counts), file=stream)

    except KeyboardInterrupt:
        sys.exit(130)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
