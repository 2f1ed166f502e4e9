"""Shared pytest fixtures for treediff tests."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from treediff.caller import CallerResult
from treediff.errors import GitCommandError
from treediff.models import Commit
from treediff.repository import Repository


class FakeCaller:
    """Stands in for ``Caller``: resolves revisions from a table and replays diff output.

    Every executed argument list is recorded in ``commands``.
    """

    def __init__(self, commits: dict[str, Commit] | None = None, diff_output: str = "") -> None:
        self.commits = commits or {}
        self.diff_output = diff_output
        self.commands: list[list[str]] = []

    def execute(self, args: list[str]) -> CallerResult:
        self.commands.append(list(args))
        if args[0] == "rev-list":
            revision = args[-2]
            commit = self.commits.get(revision)
            if commit is None:
                raise GitCommandError(args, 128, f"fatal: bad revision '{revision}'\n")
            output = " ".join([commit.sha, *commit.parents]) + "\n"
            return CallerResult(command=list(args), returncode=0, output=output)
        return CallerResult(command=list(args), returncode=0, output=self.diff_output)

    @property
    def diff_commands(self) -> list[list[str]]:
        return [cmd for cmd in self.commands if cmd[0] != "rev-list"]


@pytest.fixture
def root_commit() -> Commit:
    return Commit(sha="a" * 40, parents=[])


@pytest.fixture
def child_commit(root_commit) -> Commit:
    return Commit(sha="b" * 40, parents=[root_commit.sha])


@pytest.fixture
def fake_caller(root_commit, child_commit) -> FakeCaller:
    return FakeCaller(
        commits={
            "HEAD": child_commit,
            "main": child_commit,
            child_commit.sha: child_commit,
            root_commit.sha: root_commit,
            "first": root_commit,
        }
    )


@pytest.fixture
def fake_repository(tmp_path, fake_caller) -> Repository:
    """A Repository whose git calls go to ``fake_caller``."""
    return Repository(tmp_path, caller=fake_caller)


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", "-C", str(cwd), *args],
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def isolated_git_env(monkeypatch) -> None:
    """Keep the developer's git config out of the way."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    for key in list(os.environ):
        if key.startswith("TREEDIFF_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def git_repo(tmp_path, isolated_git_env) -> dict[str, object]:
    """Create a three-commit repository.

    1. add ``a.txt``
    2. append to ``a.txt``, add ``b.txt``
    3. delete ``b.txt``
    """
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")

    (repo / "a.txt").write_text("hello\n")
    _git(repo, "add", "a.txt")
    _git(repo, "commit", "-q", "-m", "first")
    first = _git(repo, "rev-parse", "HEAD")

    (repo / "a.txt").write_text("hello\nworld\n")
    (repo / "b.txt").write_text("bye\n")
    _git(repo, "add", "a.txt", "b.txt")
    _git(repo, "commit", "-q", "-m", "second")
    second = _git(repo, "rev-parse", "HEAD")

    _git(repo, "rm", "-q", "b.txt")
    _git(repo, "commit", "-q", "-m", "third")
    third = _git(repo, "rev-parse", "HEAD")

    return {"path": repo, "first": first, "second": second, "third": third}
