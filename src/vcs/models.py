"""Data models for version-control metadata."""

from dataclasses import asdict, dataclass, field
from typing import Any

# Name-status codes: modified, added, deleted, renamed, copied,
# type-changed, unmerged, unknown, broken
STATUS_CODES: frozenset[str] = frozenset("MADRCTUXB")


@dataclass(frozen=True)
class FileChange:
    """One changed path as reported by name-status output."""

    status: str  # M, A, D, R100, C75, ...
    path: str

    @property
    def kind(self) -> str:
        """Status letter without any similarity score (R100 -> R)."""
        return self.status.rstrip("0123456789")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Commit:
    """A single commit with its file list and optional shortstat summary."""

    hash: str
    short_hash: str
    author: str
    email: str
    date: str  # %ai, e.g. 2025-12-16 10:30:00 +0100
    subject: str
    body: str
    files: list[FileChange] = field(default_factory=list)
    stats: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
