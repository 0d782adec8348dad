"""Version-control metadata extraction: working-tree changes and commit history."""

from .diff import GitDiff
from .errors import GitCommandError, GitError, GitTimeoutError
from .history import GitHistory
from .models import STATUS_CODES, Commit, FileChange
from .repository import GitRepository
from .runner import CommandResult, CommandRunner, resolve_directory

__all__ = [
    "CommandResult",
    "CommandRunner",
    "Commit",
    "FileChange",
    "GitCommandError",
    "GitDiff",
    "GitError",
    "GitHistory",
    "GitRepository",
    "GitTimeoutError",
    "STATUS_CODES",
    "resolve_directory",
]
