"""Pydantic models for commits and error payloads."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel


class Commit(BaseModel):
    """A resolved commit: its full sha and the shas of its parents."""
    sha: str
    parents: list[str] = []

    @property
    def is_root(self) -> bool:
        """True for a commit without parents (the first in its history line)."""
        return not self.parents

    def __str__(self) -> str:
        return self.sha


# Either a revision identifier still to resolve ("HEAD", "v1.0", a sha) or a
# commit that has already been resolved.
RevisionLike = Union[str, Commit]


class ErrorDetail(BaseModel):
    """Structured error payload for reporting git failures."""
    code: str
    message: str
    details: dict | None
