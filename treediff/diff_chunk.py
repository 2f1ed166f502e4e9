"""Hunk-level structures for a single file's diff."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel

# "@@ -12,7 +12,8 @@ def heading" ; counts are optional and default to 1.
CHUNK_HEADER_PATTERN = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@ ?(.*)$")

NO_NEWLINE_MARKER = "\\ No newline at end of file"


class LineType(str, Enum):
    """Kinds of lines inside a hunk."""
    ADDED = "added"
    DELETED = "deleted"
    UNCHANGED = "unchanged"


class DiffChunkLine(BaseModel):
    """One line of a hunk with its position on each side."""
    type: LineType
    content: str
    origin_number: int | None = None
    dest_number: int | None = None
    no_newline_at_end: bool = False


class DiffChunk:
    """A hunk: its ``@@`` header values and numbered lines.

    Args:
        lines: Raw hunk lines, header first.
    """

    def __init__(self, lines: list[str]) -> None:
        if not lines:
            raise ValueError("A chunk needs at least its header line")
        match = CHUNK_HEADER_PATTERN.match(lines[0])
        if match is None:
            raise ValueError(f"Not a chunk header: {lines[0]!r}")
        self.header = lines[0]
        self.origin_start = int(match.group(1))
        self.origin_count = int(match.group(2)) if match.group(2) is not None else 1
        self.dest_start = int(match.group(3))
        self.dest_count = int(match.group(4)) if match.group(4) is not None else 1
        self.heading = match.group(5)
        self.lines: list[DiffChunkLine] = []
        self._parse_lines(lines[1:])

    def _parse_lines(self, body: list[str]) -> None:
        origin = self.origin_start
        dest = self.dest_start
        origin_end = self.origin_start + self.origin_count
        dest_end = self.dest_start + self.dest_count
        for raw in body:
            if raw.startswith("\\"):
                # Only the no-newline marker starts with a backslash.
                if self.lines:
                    self.lines[-1].no_newline_at_end = True
                continue
            marker, content = raw[:1], raw[1:]
            if (marker != "+" and origin >= origin_end) or (marker != "-" and dest >= dest_end):
                raise ValueError(
                    f"Chunk {self.header!r} has more lines than its header announces: {raw!r}"
                )
            if marker == "+":
                self.lines.append(
                    DiffChunkLine(type=LineType.ADDED, content=content, dest_number=dest)
                )
                dest += 1
            elif marker == "-":
                self.lines.append(
                    DiffChunkLine(type=LineType.DELETED, content=content, origin_number=origin)
                )
                origin += 1
            else:
                # Context lines start with a space; some tools strip it from blank lines.
                self.lines.append(
                    DiffChunkLine(
                        type=LineType.UNCHANGED,
                        content=content,
                        origin_number=origin,
                        dest_number=dest,
                    )
                )
                origin += 1
                dest += 1

    def added_lines(self) -> list[DiffChunkLine]:
        return [line for line in self.lines if line.type is LineType.ADDED]

    def deleted_lines(self) -> list[DiffChunkLine]:
        return [line for line in self.lines if line.type is LineType.DELETED]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def __getitem__(self, index: int) -> DiffChunkLine:
        return self.lines[index]

    def __repr__(self) -> str:
        return f"DiffChunk({self.header!r})"
