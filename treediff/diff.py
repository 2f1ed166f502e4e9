"""Ordered collection of per-file diffs between two trees."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import TYPE_CHECKING, Iterable, Iterator, overload

import structlog

from treediff import command
from treediff.diff_object import DIFF_HEADER_PATTERN, DiffObject
from treediff.models import RevisionLike
from treediff.utilities import split_lines

if TYPE_CHECKING:
    from treediff.caller import Caller
    from treediff.repository import Repository

logger = structlog.get_logger(__name__)


class Diff(MutableSequence):
    """Per-file diffs in the order git reported them.

    Build one with :meth:`create` to run git, or pass ready-made records to
    the constructor to assemble a collection by hand. Positions are compacted
    on deletion, like a list.

    Args:
        repository: Repository the diff belongs to.
        diff_objects: Initial records; an empty collection when omitted.
    """

    def __init__(
        self,
        repository: Repository,
        diff_objects: Iterable[DiffObject] | None = None,
    ) -> None:
        self.repository = repository
        self._diff_objects: list[DiffObject] = list(diff_objects) if diff_objects is not None else []

    @classmethod
    def create(
        cls,
        repository: Repository,
        commit1: RevisionLike | None = None,
        commit2: RevisionLike | None = None,
        path: str | None = None,
    ) -> Diff:
        """Run git and return the populated collection.

        Without *commit2* the diff is *commit1* against its parent, or against
        the empty tree when *commit1* is a root commit; *path* is only honoured
        when *commit2* is given. *commit1* defaults to HEAD.

        Git and resolution errors propagate unchanged.
        """
        diff = cls(repository)
        diff._create_from_command(commit1, commit2, path)
        return diff

    def _create_from_command(
        self,
        commit1: RevisionLike | None,
        commit2: RevisionLike | None,
        path: str | None,
    ) -> None:
        of = self.repository.resolve(commit1)
        if commit2 is None:
            if of.is_root:
                args = command.root_diff(of)
            else:
                args = command.diff(of)
        else:
            with_ = self.repository.resolve(commit2)
            args = command.diff(of, with_, path)

        output_lines = self._get_caller().execute(args).output_lines
        self._parse_output_lines(output_lines)
        logger.debug("Parsed diff", command=command.render(args), files=len(self._diff_objects))

    def _parse_output_lines(self, output_lines: list[str]) -> None:
        self._diff_objects = [
            DiffObject(group.lines, paths=group.captures)
            for group in split_lines(output_lines, DIFF_HEADER_PATTERN)
        ]

    def _get_caller(self) -> Caller:
        return self.repository.get_caller()

    # -------------------------------------------------------------------------
    # Indexed access
    # -------------------------------------------------------------------------

    def get(self, index: int, default: DiffObject | None = None) -> DiffObject | None:
        """Return the record at *index*, or *default* when there is none."""
        if self.has(index):
            return self._diff_objects[index]
        return default

    def has(self, index: int) -> bool:
        """True when *index* is a position currently holding a record."""
        return isinstance(index, int) and 0 <= index < len(self._diff_objects)

    @overload
    def __getitem__(self, index: int) -> DiffObject: ...

    @overload
    def __getitem__(self, index: slice) -> Diff: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self.repository, self._diff_objects[index])
        return self._diff_objects[index]

    def __setitem__(self, index, value) -> None:
        self._diff_objects[index] = value

    def __delitem__(self, index) -> None:
        del self._diff_objects[index]

    def insert(self, index: int, value: DiffObject) -> None:
        self._diff_objects.insert(index, value)

    def __len__(self) -> int:
        return len(self._diff_objects)

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[DiffObject]:
        return iter(self._diff_objects)

    def cursor(self) -> DiffCursor:
        """Return a new cursor positioned on the first record."""
        return DiffCursor(self)

    def __repr__(self) -> str:
        return f"Diff({self.repository!r}, files={len(self._diff_objects)})"


class DiffCursor:
    """Explicit, restartable position over a :class:`Diff`.

    Each cursor keeps its own position, so several traversals of the same
    collection do not interfere. The cursor reads the live collection: edits
    made while traversing are visible.
    """

    def __init__(self, diff: Diff) -> None:
        self._diff = diff
        self.position = 0

    def current(self) -> DiffObject:
        """Return the record under the cursor.

        Raises:
            IndexError: The cursor is past the end of the collection.
        """
        if not self.valid():
            raise IndexError(f"cursor position {self.position} is out of range")
        return self._diff[self.position]

    def advance(self) -> None:
        """Move to the next position; moving past the end is allowed."""
        self.position += 1

    def valid(self) -> bool:
        return self._diff.has(self.position)

    def reset(self) -> None:
        self.position = 0
