"""
Fixtures for version-control tests.

Tests build throwaway git repositories under tmp_path and drive the real git
binary, so the parsers see exactly what git prints.
"""

import subprocess

import pytest


def git(repo_path, *args):
    """Run git in repo_path and return stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


def git_commit_all(repo_path, *messages):
    """Stage everything and commit; each message becomes one paragraph."""
    git(repo_path, "add", "-A")
    args = ["commit", "--allow-empty"]
    for message in messages or ("commit",):
        args += ["-m", message]
    git(repo_path, *args)
    return git(repo_path, "rev-parse", "HEAD")


@pytest.fixture(autouse=True)
def isolate_git(tmp_path, monkeypatch):
    """Keep git from reading the developer's config or walking above tmp_path."""
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / ".gitconfig-global"))
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    for name in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("GIT_BINARY", raising=False)
    monkeypatch.delenv("GIT_TIMEOUT", raising=False)
    monkeypatch.delenv("GIT_HISTORY_WORKERS", raising=False)


@pytest.fixture
def temp_git_repo(tmp_path):
    """
    Create a temporary git repository with proper git config.
    Returns the repo path.
    """
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()

    git(repo_path, "init", "-q")
    git(repo_path, "config", "user.name", "Test User")
    git(repo_path, "config", "user.email", "test@example.com")
    git(repo_path, "config", "commit.gpgsign", "false")
    git(repo_path, "config", "diff.renames", "true")

    return repo_path


@pytest.fixture
def repo_with_history(temp_git_repo):
    """Repository with three commits, each touching files. Returns (path, hashes newest first)."""
    repo_path = temp_git_repo

    (repo_path / "a.txt").write_text("one\n")
    first = git_commit_all(repo_path, "Add a.txt")

    (repo_path / "a.txt").write_text("one\ntwo\n")
    (repo_path / "b.txt").write_text("bee\n")
    second = git_commit_all(repo_path, "Grow a.txt, add b.txt")

    (repo_path / "b.txt").unlink()
    third = git_commit_all(repo_path, "Remove b.txt")

    return repo_path, [third, second, first]


@pytest.fixture
def run_git():
    """The git() helper, for tests that shape a repository by hand."""
    return git


@pytest.fixture
def commit_all():
    """The git_commit_all() helper."""
    return git_commit_all
