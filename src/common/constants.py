"""Shared constants for the vcs-meta application.

For environment-based configuration (git binary, timeouts, etc.), use the env module:
    from common.env import env
    timeout = env.git_timeout()
"""

# Record terminator appended to every commit in the primary log query.
# Commit messages may span lines, so a line-oriented format alone cannot
# delimit one commit from the next.
COMMIT_SENTINEL = "|END_COMMIT"

# Separator between the fields of a commit's first log line
LOG_FIELD_SEPARATOR = "|"

# hash|shortHash|author|email|date|subject[|body...]
LOG_FORMAT = "%H|%h|%an|%ae|%ai|%s|%b" + COMMIT_SENTINEL

# Minimum number of fields a commit header needs to be usable
MIN_HEADER_FIELDS = 6

# Separator between status and path in name-status output
NAME_STATUS_SEPARATOR = "\t"

DEFAULT_GIT_BINARY = "git"
DEFAULT_GIT_TIMEOUT = 60.0
DEFAULT_HISTORY_COUNT = 5
DEFAULT_HISTORY_WORKERS = 1
