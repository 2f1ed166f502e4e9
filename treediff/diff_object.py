"""Per-file diff records built from one ``diff --git`` segment."""

from __future__ import annotations

import re
from enum import Enum
from typing import Sequence

from treediff.diff_chunk import CHUNK_HEADER_PATTERN, DiffChunk
from treediff.utilities import split_lines

# File boundary emitted by git when run with --src-prefix=SRC/ --dst-prefix=DST/.
DIFF_HEADER_PATTERN = re.compile(r"^diff --git SRC/(.*) DST/(.*)$")


class DiffMode(str, Enum):
    """What happened to the file, as announced in the extended header."""
    INDEX = "index"
    MODE = "mode"
    NEW_FILE = "new_file"
    DELETED_FILE = "deleted_file"
    RENAMED_FILE = "renamed_file"


class DiffObject:
    """The change to a single file.

    Args:
        lines: The raw segment, starting with its ``diff --git`` line.
        paths: ``(source, destination)`` already captured from the header line;
            parsed from ``lines[0]`` when omitted.
    """

    def __init__(self, lines: Sequence[str], paths: Sequence[str] | None = None) -> None:
        self.lines = list(lines)
        if paths is None:
            paths = self._paths_from_header()
        self.original_path, self.destination_path = paths[0], paths[1]
        self.mode = DiffMode.INDEX
        self.is_binary = False
        self._parse_extended_header()
        self.chunks = [DiffChunk(group.lines) for group in split_lines(self.lines, CHUNK_HEADER_PATTERN)]

    def _paths_from_header(self) -> tuple[str, str]:
        match = DIFF_HEADER_PATTERN.match(self.lines[0]) if self.lines else None
        if match is None:
            raise ValueError("Diff segment does not start with a 'diff --git SRC/... DST/...' line")
        return match.group(1), match.group(2)

    def _parse_extended_header(self) -> None:
        for line in self.lines[1:]:
            if line.startswith(("@@", "--- ", "+++ ")):
                break
            if line.startswith("new file mode"):
                self.mode = DiffMode.NEW_FILE
            elif line.startswith("deleted file mode"):
                self.mode = DiffMode.DELETED_FILE
            elif line.startswith("rename from "):
                self.mode = DiffMode.RENAMED_FILE
                self.original_path = line[len("rename from "):]
            elif line.startswith("rename to "):
                self.mode = DiffMode.RENAMED_FILE
                self.destination_path = line[len("rename to "):]
            elif line.startswith("old mode") and self.mode is DiffMode.INDEX:
                self.mode = DiffMode.MODE
            elif line.startswith("Binary files ") or line == "GIT binary patch":
                self.is_binary = True

    @property
    def path(self) -> str:
        """The path the file has after the change (its old path when deleted)."""
        if self.mode is DiffMode.DELETED_FILE:
            return self.original_path
        return self.destination_path

    def has_path_changed(self) -> bool:
        return self.original_path != self.destination_path

    def added_count(self) -> int:
        return sum(len(chunk.added_lines()) for chunk in self.chunks)

    def deleted_count(self) -> int:
        return sum(len(chunk.deleted_lines()) for chunk in self.chunks)

    def __iter__(self):
        return iter(self.chunks)

    def __repr__(self) -> str:
        return f"DiffObject({self.original_path!r} -> {self.destination_path!r}, mode={self.mode.value})"
