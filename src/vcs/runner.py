"""Execution of git commands rooted at a directory.

Every invocation has the form ``git -C <directory> <args...>``. Standard
output and standard error are captured with ``subprocess.run``, whose
``communicate()`` drains both pipes concurrently while the child runs, so
output larger than the OS pipe buffer cannot deadlock the call.
"""

import subprocess
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from common.env import env
from common.logger import get_logger

from .errors import GitCommandError, GitTimeoutError

logger = get_logger(__name__)

_UNSET = object()


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one git invocation, successful or not.

    ``returncode`` is None when the process produced no exit status of its
    own: it could not be started, or it was killed after ``timeout`` seconds.
    """

    command: list[str]
    returncode: int | None
    stdout: str
    stderr: str
    timeout: float | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def timed_out(self) -> bool:
        return self.timeout is not None

    def check(self) -> "CommandResult":
        """Return self, or raise if the command did not succeed.

        Raises:
            GitTimeoutError: If the process was killed for running too long
            GitCommandError: If git exited non-zero or could not be started
        """
        if self.timed_out:
            raise GitTimeoutError(self.command, self.timeout, self.stderr)
        if not self.ok:
            raise GitCommandError(self.command, self.stderr, self.returncode)
        return self


def resolve_directory(path: str | Path) -> str:
    """Return the directory to run git in for ``path``.

    An existing directory is returned unchanged and an existing file is
    mapped to its parent directory. A path that does not exist is returned
    as-is so that git reports the failure when the command runs.
    """
    candidate = Path(path)
    if candidate.is_file():
        return str(candidate.parent)
    return str(path)


class CommandRunner:
    """Runs git sub-commands against a working directory.

    Example:
        >>> runner = CommandRunner()
        >>> runner.execute(["rev-parse", "--abbrev-ref", "HEAD"], "/path/to/repo")
        'main'
    """

    def __init__(self, binary: str | None = None, timeout=_UNSET):
        """Initialize the runner.

        Args:
            binary: git executable, defaults to GIT_BINARY from the environment
            timeout: Seconds to wait for each invocation before killing it.
                Defaults to GIT_TIMEOUT; None waits indefinitely.
        """
        self.binary = binary or env.git_binary()
        self.timeout: float | None = env.git_timeout() if timeout is _UNSET else timeout

    def build_command(self, arguments: Sequence[str], directory: str | Path) -> list[str]:
        return [self.binary, "-C", str(directory), *arguments]

    def run(self, arguments: Sequence[str], directory: str | Path) -> CommandResult:
        """Run git and capture its outcome. Never raises for a failed command.

        Args:
            arguments: git sub-command and its arguments
            directory: Directory passed to ``git -C``

        Returns:
            CommandResult with decoded, untrimmed stdout and stderr
        """
        command = self.build_command(arguments, directory)
        logger.debug(f"Running {' '.join(command)}")
        started = time.monotonic()

        try:
            completed = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            # subprocess.run has already killed and reaped the child
            logger.debug(f"Killed after {e.timeout}s: {' '.join(command)}")
            return CommandResult(
                command=command,
                returncode=None,
                stdout=_decode(e.stdout),
                stderr=_decode(e.stderr),
                timeout=e.timeout,
            )
        except OSError as e:
            logger.debug(f"Could not start {self.binary}: {e}")
            return CommandResult(command=command, returncode=None, stdout="", stderr=str(e))

        logger.debug(
            f"Exit {completed.returncode} after {time.monotonic() - started:.3f}s: "
            f"{' '.join(command)}"
        )
        return CommandResult(
            command=command,
            returncode=completed.returncode,
            stdout=_decode(completed.stdout),
            stderr=_decode(completed.stderr),
        )

    def execute(self, arguments: Sequence[str], directory: str | Path) -> str:
        """Run git and return its trimmed standard output.

        Raises:
            GitCommandError: If git exits non-zero (carries captured stderr)
            GitTimeoutError: If git outlives the configured timeout
        """
        return self.run(arguments, directory).check().stdout.strip()

    def execute_lines(self, arguments: Sequence[str], directory: str | Path) -> list[str]:
        """Run git and return the non-empty lines of its standard output."""
        return [line for line in self.execute(arguments, directory).split("\n") if line]
