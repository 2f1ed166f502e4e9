"""Utility helpers for normalizing directories and detecting Git repositories."""

from __future__ import annotations

import shutil
from pathlib import Path

from treediff.errors import GitUnavailableError


def normalize_directory_path(path: str | Path) -> str:
    """Return a normalized absolute path for the provided directory string."""
    candidate = Path(path).expanduser()
    try:
        resolved = candidate.resolve(strict=False)
    except FileNotFoundError:
        resolved = candidate
    return str(resolved)


def has_git_repository(path: str | Path) -> bool:
    """Return True if the directory contains a Git repository.

    Linked worktrees and submodules keep a ``.git`` file pointing at the real
    git directory; those count as repositories too.
    """
    try:
        git_entry = Path(path) / ".git"
        if git_entry.is_dir():
            return True
        if git_entry.is_file():
            return git_entry.read_text(encoding="utf-8").startswith("gitdir:")
        return False
    except (OSError, UnicodeDecodeError):
        return False


def require_git_binary(name: str) -> str:
    """Return the absolute path of the git executable *name*."""
    git = shutil.which(name)
    if not git:
        raise GitUnavailableError(f"Git executable {name!r} not found on PATH")
    return git
