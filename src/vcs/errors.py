"""Exceptions raised by git invocations."""

from collections.abc import Sequence


class GitError(Exception):
    """Base exception for version-control metadata errors."""

    pass


class GitCommandError(GitError):
    """A git invocation exited non-zero or could not be started.

    Carries the full argument list and the captured standard error so the
    message is a complete diagnostic on its own.
    """

    def __init__(self, command: Sequence[str], stderr: str = "", returncode: int | None = None):
        self.command = list(command)
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"{' '.join(self.command)} failed: {self.stderr.strip()}"


class GitTimeoutError(GitCommandError):
    """A git invocation exceeded its allowed wait and was killed."""

    def __init__(self, command: Sequence[str], timeout: float, stderr: str = ""):
        self.timeout = timeout
        super().__init__(command, stderr)

    def _describe(self) -> str:
        message = f"{' '.join(self.command)} timed out after {self.timeout:g}s"
        if self.stderr.strip():
            message += f": {self.stderr.strip()}"
        return message
