"""Uncommitted working-tree changes."""

from pathlib import Path

from .models import FileChange
from .parsing import parse_name_status
from .runner import CommandRunner

UNCOMMITTED_CHANGES_ARGS = ["diff", "--name-status", "HEAD"]


class GitDiff:
    """Reads staged and unstaged changes relative to HEAD.

    Example:
        >>> diff = GitDiff("/path/to/repo")
        >>> for change in diff.get_uncommitted_changes():
        ...     print(change.status, change.path)
        M README.md
    """

    def __init__(self, root_path: str | Path, runner: CommandRunner | None = None):
        self.root_path = str(root_path)
        self.runner = runner or CommandRunner()

    def get_uncommitted_changes(self) -> list[FileChange]:
        """Get working tree changes (staged and unstaged) in git's order.

        Returns:
            FileChange per changed path; empty for a clean working tree

        Raises:
            GitCommandError: If the directory is missing or not a repository
        """
        output = self.runner.execute(UNCOMMITTED_CHANGES_ARGS, self.root_path)
        return parse_name_status(output)
