"""Argument builders for the git invocations treediff needs.

Every builder returns the argument list that follows ``git -C <repo>``; the
caller prepends the binary and the working directory.
"""

from __future__ import annotations

import shlex

from treediff.models import Commit

# Path prefixes the diff header parser keys on. Git's defaults (a/ and b/) are
# replaced so the header can be matched without guessing.
SRC_PREFIX = "SRC/"
DST_PREFIX = "DST/"

_PREFIX_ARGS = [f"--src-prefix={SRC_PREFIX}", f"--dst-prefix={DST_PREFIX}"]


def _sha(commit: Commit | str) -> str:
    return commit.sha if isinstance(commit, Commit) else commit


def root_diff(commit: Commit | str) -> list[str]:
    """Diff the empty tree against a root commit."""
    return ["diff-tree", "--cc", "--root", "--no-color", *_PREFIX_ARGS, _sha(commit)]


def diff(
    of: Commit | str,
    with_: Commit | str | None = None,
    path: str | None = None,
) -> list[str]:
    """Diff *of* against *with_*, or against its first parent when *with_* is None.

    Args:
        of: Commit holding the new side of the diff.
        with_: Commit holding the old side of the diff.
        path: Optional pathspec restricting the diff.
    """
    args = ["diff", "--full-index", "--no-color", "--no-ext-diff", "-M", *_PREFIX_ARGS]
    if with_ is None:
        args.append(f"{_sha(of)}^..{_sha(of)}")
    else:
        args.append(f"{_sha(with_)}..{_sha(of)}")
    if path is not None:
        args.extend(["--", path])
    return args


def rev_parents(revision: str) -> list[str]:
    """Print the commit a revision names followed by its parents, on one line.

    ``--end-of-options`` keeps a revision such as ``--all`` from being read as
    an option.
    """
    return ["rev-list", "--parents", "--max-count=1", "--end-of-options", revision, "--"]


def render(args: list[str]) -> str:
    """Render arguments as a shell-quoted ``git ...`` string for log output."""
    return shlex.join(["git", *args])
