"""Parsers for git's name-status and sentinel-delimited log output.

These functions are pure: they take the text a git command printed and
return records. Anything that does not fit the expected shape is dropped
rather than reported, so one odd line never aborts a whole query.
"""

from dataclasses import dataclass

from common.constants import (
    COMMIT_SENTINEL,
    LOG_FIELD_SEPARATOR,
    MIN_HEADER_FIELDS,
    NAME_STATUS_SEPARATOR,
)
from common.logger import get_logger

from .models import FileChange

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommitHeader:
    """Metadata decoded from one commit block of the primary log query."""

    hash: str
    short_hash: str
    author: str
    email: str
    date: str
    subject: str
    body: str


def parse_name_status_line(line: str) -> FileChange | None:
    """Parse one ``<status>\\t<path>`` line.

    Only the first tab separates status from path. For a rename line
    ``R100\\told\\tnew`` the path is therefore ``old\\tnew``; callers that
    need the two paths apart must split it themselves.

    Returns:
        FileChange, or None when the line lacks a status or a path
    """
    parts = line.split(NAME_STATUS_SEPARATOR, 1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    status, path = parts
    return FileChange(status=status, path=path)


def parse_name_status(output: str) -> list[FileChange]:
    """Parse ``--name-status`` output into FileChange records, in order.

    Example:
        >>> parse_name_status("M\\tREADME.md\\nA\\tsrc/new.py")
        [FileChange(status='M', path='README.md'), FileChange(status='A', path='src/new.py')]
    """
    changes: list[FileChange] = []

    for line in output.split("\n"):
        if not line:
            continue

        change = parse_name_status_line(line)
        if change is None:
            logger.debug(f"Skipping unparseable name-status line: {line!r}")
            continue

        changes.append(change)

    return changes


def split_commit_blocks(output: str) -> list[str]:
    """Split primary log output into one block per commit.

    Blocks are separated by the sentinel followed by a newline. The runner
    strips trailing whitespace, which leaves the final sentinel without its
    newline, so a sentinel at the very end of the text also terminates a
    block. Blocks that are blank after trimming are discarded.
    """
    if output.endswith(COMMIT_SENTINEL):
        output += "\n"

    return [block for block in output.split(COMMIT_SENTINEL + "\n") if block.strip()]


def parse_commit_block(block: str) -> CommitHeader | None:
    """Decode one commit block.

    The first line holds ``hash|short|author|email|date|subject`` followed by
    the first line of the body. Fields past the sixth are rejoined with ``|``
    since the body itself may contain the separator; the block's remaining
    lines are the rest of the body.

    Returns:
        CommitHeader, or None when the first line has fewer than six fields
    """
    first_line, *rest = block.split("\n")
    fields = first_line.split(LOG_FIELD_SEPARATOR)
    if len(fields) < MIN_HEADER_FIELDS:
        logger.debug(f"Skipping malformed commit block: {first_line!r}")
        return None

    hash_, short_hash, author, email, date, subject = fields[:MIN_HEADER_FIELDS]
    body_lines = [LOG_FIELD_SEPARATOR.join(fields[MIN_HEADER_FIELDS:]), *rest]

    return CommitHeader(
        hash=hash_,
        short_hash=short_hash,
        author=author,
        email=email,
        date=date,
        subject=subject,
        body="\n".join(body_lines).strip(),
    )


def parse_log(output: str) -> list[CommitHeader]:
    """Parse the whole primary log output, keeping document order."""
    headers: list[CommitHeader] = []

    for block in split_commit_blocks(output):
        header = parse_commit_block(block)
        if header is not None:
            headers.append(header)

    return headers
