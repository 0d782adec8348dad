#!/usr/bin/env python3
"""CLI interface for the vcs module."""

import argparse
import json
from pathlib import Path

from common.env import env
from common.logger import console, error, get_logger, setup_logging

from .errors import GitCommandError
from .repository import GitRepository

logger = get_logger(__name__)


def _print_records(records) -> None:
    console.print_json(json.dumps(records, ensure_ascii=False))


def _find_repository(path: Path) -> GitRepository | None:
    repo = GitRepository.find(path)
    if repo is None:
        error(f"{path} is not inside a git repository")
    return repo


def cmd_diff(args):
    """Print uncommitted changes as JSON.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    repo = _find_repository(args.path)
    if repo is None:
        return 1

    try:
        changes = repo.get_diff()
    except GitCommandError as e:
        error(str(e))
        return 1

    _print_records([change.to_dict() for change in changes])
    return 0


def cmd_log(args):
    """Print the most recent commits as JSON."""
    if args.count < 0:
        error(f"--count must be non-negative, got {args.count}")
        return 1

    repo = _find_repository(args.path)
    if repo is None:
        return 1

    try:
        commits = repo.get_history(
            count=args.count,
            include_stats=not args.no_stats,
            max_workers=args.workers,
        )
    except GitCommandError as e:
        error(str(e))
        return 1

    logger.info(f"Collected {len(commits)} commit(s) from {repo.root_path}")
    _print_records([commit.to_dict() for commit in commits])
    return 0


def cmd_files(args):
    """Print tracked and unignored untracked files as JSON."""
    repo = _find_repository(args.path)
    if repo is None:
        return 1

    try:
        files = repo.list_tracked_files()
    except GitCommandError as e:
        error(str(e))
        return 1

    _print_records(files)
    return 0


def cmd_root(args):
    """Print the repository's top-level directory."""
    repo = _find_repository(args.path)
    if repo is None:
        return 1

    console.print(repo.root_path, markup=False, highlight=False, soft_wrap=True)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vcs-meta",
        description="Extract working-tree changes and commit history from a git repository",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING, LOG_LEVEL overrides)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_path(subparser: argparse.ArgumentParser) -> None:
        subparser.add_argument(
            "path",
            type=Path,
            nargs="?",
            default=Path("."),
            help="File or directory inside the repository (default: .)",
        )

    diff_parser = subparsers.add_parser("diff", help="List uncommitted changes")
    add_path(diff_parser)
    diff_parser.set_defaults(func=cmd_diff)

    log_parser = subparsers.add_parser("log", help="List recent commits with their files")
    add_path(log_parser)
    log_parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=env.history_count(),
        help="Number of commits (default: GIT_HISTORY_COUNT or 5)",
    )
    log_parser.add_argument(
        "--no-stats",
        action="store_true",
        help="Skip the per-commit shortstat query",
    )
    log_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Concurrent per-commit queries (default: GIT_HISTORY_WORKERS or 1)",
    )
    log_parser.set_defaults(func=cmd_log)

    files_parser = subparsers.add_parser(
        "files", help="List tracked files and untracked files not ignored by git"
    )
    add_path(files_parser)
    files_parser.set_defaults(func=cmd_files)

    root_parser = subparsers.add_parser("root", help="Print the repository root")
    add_path(root_parser)
    root_parser.set_defaults(func=cmd_root)

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
