"""Environment configuration interface for vcs-meta.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

from common.constants import (
    DEFAULT_GIT_BINARY,
    DEFAULT_GIT_TIMEOUT,
    DEFAULT_HISTORY_COUNT,
    DEFAULT_HISTORY_WORKERS,
)

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def git_binary() -> str:
        """Get the git executable to invoke.

        Returns:
            Executable name or path, defaults to 'git' (looked up on PATH)
        """
        return os.getenv("GIT_BINARY", DEFAULT_GIT_BINARY)

    @staticmethod
    def git_timeout() -> float | None:
        """Get the maximum wait for a single git invocation.

        Returns:
            Timeout in seconds, defaults to 60. None when GIT_TIMEOUT is
            zero or negative (wait indefinitely).
        """
        timeout = float(os.getenv("GIT_TIMEOUT", str(DEFAULT_GIT_TIMEOUT)))
        return timeout if timeout > 0 else None

    @staticmethod
    def history_workers() -> int:
        """Get the number of workers for per-commit sub-queries.

        Returns:
            Worker count, defaults to 1 (sequential)
        """
        return max(1, int(os.getenv("GIT_HISTORY_WORKERS", str(DEFAULT_HISTORY_WORKERS))))

    @staticmethod
    def history_count() -> int:
        """Get the default number of commits to collect.

        Returns:
            Commit count, defaults to 5
        """
        return int(os.getenv("GIT_HISTORY_COUNT", str(DEFAULT_HISTORY_COUNT)))


# Singleton instance for convenient access
env = Environment()
