"""Repository context: where git runs and how revisions resolve to commits."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from treediff import command
from treediff.caller import Caller
from treediff.errors import GitCommandError, NotARepositoryError, RevisionNotFoundError
from treediff.git import has_git_repository, normalize_directory_path
from treediff.models import Commit, RevisionLike

if TYPE_CHECKING:
    from treediff.diff import Diff

logger = structlog.get_logger(__name__)


class Repository:
    """A git repository on disk.

    Args:
        path: Repository directory.
        caller: Command executor; a ``Caller`` bound to *path* by default.
    """

    def __init__(self, path: str | Path, caller: Caller | None = None) -> None:
        self.path = normalize_directory_path(path)
        self._caller = caller or Caller(self.path)

    @classmethod
    def open(cls, path: str | Path, caller: Caller | None = None) -> "Repository":
        """Return a Repository for *path*, checking that it holds a ``.git`` entry."""
        normalized = normalize_directory_path(path)
        if not has_git_repository(normalized):
            raise NotARepositoryError(f"{normalized} is not a git repository")
        return cls(normalized, caller=caller)

    def get_caller(self) -> Caller:
        return self._caller

    def get_commit(self, ref: str = "HEAD") -> Commit:
        """Resolve *ref* to a commit.

        Raises:
            RevisionNotFoundError: *ref* names no commit in this repository.
        """
        args = command.rev_parents(ref)
        try:
            result = self._caller.execute(args)
        except GitCommandError as exc:
            raise RevisionNotFoundError(ref, exc.command, exc.returncode, exc.stderr) from exc

        fields = result.output.split()
        if not fields:
            raise RevisionNotFoundError(ref, args, result.returncode, result.stderr)
        return Commit(sha=fields[0], parents=fields[1:])

    def resolve(self, revision: RevisionLike | None) -> Commit:
        """Turn an identifier, a commit, or None (HEAD) into a Commit."""
        if revision is None:
            return self.get_commit()
        if isinstance(revision, Commit):
            return revision
        return self.get_commit(revision)

    def get_diff(
        self,
        commit1: RevisionLike | None = None,
        commit2: RevisionLike | None = None,
        path: str | None = None,
    ) -> "Diff":
        """Shortcut for ``Diff.create(self, commit1, commit2, path)``."""
        from treediff.diff import Diff

        return Diff.create(self, commit1, commit2, path)

    def __repr__(self) -> str:
        return f"Repository({self.path!r})"
