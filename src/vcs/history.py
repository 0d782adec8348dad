"""Commit history collection.

One ``git log`` query yields the metadata of the last N commits; each commit
then gets its own ``git show`` queries for the file list and, optionally,
the shortstat summary. Those per-commit details are not available from the
single-line log format.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from common.constants import DEFAULT_HISTORY_COUNT, LOG_FORMAT
from common.env import env
from common.logger import get_logger

from .models import Commit, FileChange
from .parsing import CommitHeader, parse_log, parse_name_status
from .runner import CommandRunner

logger = get_logger(__name__)

# Merge commits are diffed against their first parent only
_SHOW_ARGS = ["show", "--format=", "--diff-merges=first-parent"]


class GitHistory:
    """Collects recent commits with their changed files and statistics.

    Example:
        >>> history = GitHistory("/path/to/repo")
        >>> for commit in history.get_commits(count=3):
        ...     print(commit.short_hash, commit.subject)
        3f2a9c1 Fix rename handling
    """

    def __init__(
        self,
        root_path: str | Path,
        runner: CommandRunner | None = None,
        max_workers: int | None = None,
    ):
        """Initialize the collector.

        Args:
            root_path: Repository directory
            runner: CommandRunner to use, a default one when omitted
            max_workers: Upper bound on concurrent per-commit queries.
                Defaults to GIT_HISTORY_WORKERS; 1 runs them sequentially.
        """
        self.root_path = str(root_path)
        self.runner = runner or CommandRunner()
        self.max_workers = max(1, max_workers or env.history_workers())

    def get_commits(
        self, count: int = DEFAULT_HISTORY_COUNT, include_stats: bool = True
    ) -> list[Commit]:
        """Get the last ``count`` commits, most recent first.

        Args:
            count: Maximum number of commits to return
            include_stats: Also fetch the shortstat summary of each commit

        Returns:
            At most ``count`` fully populated commits

        Raises:
            ValueError: If count is negative
            GitCommandError: If the log or a file-list query fails
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        output = self.runner.execute(
            ["log", "-n", str(count), f"--format={LOG_FORMAT}"],
            self.root_path,
        )
        headers = parse_log(output)
        logger.debug(f"Parsed {len(headers)} commit(s) from log of {self.root_path}")

        if self.max_workers == 1 or len(headers) <= 1:
            return [self._build_commit(header, include_stats) for header in headers]

        # map() yields results in submission order, not completion order
        with ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(headers)),
            thread_name_prefix="GitHistory",
        ) as executor:
            return list(
                executor.map(lambda header: self._build_commit(header, include_stats), headers)
            )

    def get_files_for_commit(self, commit_hash: str) -> list[FileChange]:
        """Get the files changed by one commit relative to its first parent."""
        output = self.runner.execute([*_SHOW_ARGS, "--name-status", commit_hash], self.root_path)
        return parse_name_status(output)

    def get_stats_for_commit(self, commit_hash: str) -> str:
        """Get the shortstat line of one commit, or "" if git cannot provide it."""
        result = self.runner.run([*_SHOW_ARGS, "--shortstat", commit_hash], self.root_path)
        if not result.ok:
            logger.warning(f"Stats unavailable for {commit_hash}: {result.stderr.strip()}")
            return ""
        return result.stdout.strip()

    def _build_commit(self, header: CommitHeader, include_stats: bool) -> Commit:
        files = self.get_files_for_commit(header.hash)
        stats = self.get_stats_for_commit(header.hash) if include_stats else ""

        return Commit(
            hash=header.hash,
            short_hash=header.short_hash,
            author=header.author,
            email=header.email,
            date=header.date,
            subject=header.subject,
            body=header.body,
            files=files,
            stats=stats,
        )
