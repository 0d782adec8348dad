"""Repository facade tying discovery, diff and history together."""

from pathlib import Path

from common.constants import DEFAULT_HISTORY_COUNT
from common.logger import get_logger

from .diff import GitDiff
from .history import GitHistory
from .models import Commit, FileChange
from .runner import CommandRunner, resolve_directory

logger = get_logger(__name__)


class GitRepository:
    """A git working tree, identified by its top-level directory.

    Usage:
        repo = GitRepository.find("src/vcs/runner.py")
        if repo is None:
            ...  # not inside a repository
        files = repo.list_tracked_files()
        changes = repo.get_diff()
        commits = repo.get_history(count=10, include_stats=True)
    """

    def __init__(self, root_path: str | Path, runner: CommandRunner | None = None):
        self.root_path = str(root_path)
        self.runner = runner or CommandRunner()

    @classmethod
    def find(cls, path: str | Path, runner: CommandRunner | None = None) -> "GitRepository | None":
        """Find the repository containing ``path`` (a file or a directory).

        Returns:
            GitRepository rooted at the top-level directory, or None when git
            reports that ``path`` is not inside a repository
        """
        runner = runner or CommandRunner()
        result = runner.run(["rev-parse", "--show-toplevel"], resolve_directory(path))
        if not result.ok:
            logger.debug(f"No repository found for {path}: {result.stderr.strip()}")
            return None
        return cls(result.stdout.strip(), runner=runner)

    def list_tracked_files(self) -> list[str]:
        """List tracked files plus untracked files that .gitignore does not exclude.

        Returns:
            Paths relative to the repository root
        """
        return self.runner.execute_lines(
            ["ls-files", "--cached", "--others", "--exclude-standard"],
            self.root_path,
        )

    def get_diff(self) -> list[FileChange]:
        """Get uncommitted (staged and unstaged) changes."""
        return GitDiff(self.root_path, runner=self.runner).get_uncommitted_changes()

    def get_history(
        self,
        count: int = DEFAULT_HISTORY_COUNT,
        include_stats: bool = True,
        max_workers: int | None = None,
    ) -> list[Commit]:
        """Get the last ``count`` commits, most recent first."""
        history = GitHistory(self.root_path, runner=self.runner, max_workers=max_workers)
        return history.get_commits(count=count, include_stats=include_stats)
