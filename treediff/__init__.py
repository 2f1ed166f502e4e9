"""Structured access to the per-file changes between two git trees."""

from __future__ import annotations

from treediff.caller import Caller, CallerResult
from treediff.diff import Diff, DiffCursor
from treediff.diff_chunk import DiffChunk, DiffChunkLine, LineType
from treediff.diff_object import DiffMode, DiffObject
from treediff.errors import (
    GitCommandError,
    GitError,
    GitTimeoutError,
    GitUnavailableError,
    NotARepositoryError,
    RevisionNotFoundError,
)
from treediff.models import Commit
from treediff.repository import Repository

__all__ = [
    "Caller",
    "CallerResult",
    "Commit",
    "Diff",
    "DiffChunk",
    "DiffChunkLine",
    "DiffCursor",
    "DiffMode",
    "DiffObject",
    "GitCommandError",
    "GitError",
    "GitTimeoutError",
    "GitUnavailableError",
    "LineType",
    "NotARepositoryError",
    "Repository",
    "RevisionNotFoundError",
]
