"""Helpers for partitioning line-oriented tool output."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class LineGroup:
    """A run of lines opened by a boundary line.

    ``lines[0]`` is the boundary line itself; ``captures`` holds the groups the
    boundary pattern captured on it.
    """

    lines: list[str] = field(default_factory=list)
    captures: tuple[str, ...] = ()

    @property
    def body(self) -> list[str]:
        """Lines following the boundary line."""
        return self.lines[1:]


def split_lines(lines: Iterable[str], pattern: str | re.Pattern[str]) -> list[LineGroup]:
    """Partition *lines* into groups, each starting at a line matching *pattern*.

    Lines before the first match belong to no group and are dropped, so input
    without any match yields an empty list. Consecutive matches produce one
    group each, with an empty body.

    Args:
        lines: Ordered lines, without trailing newlines.
        pattern: Boundary regex, matched at the start of each line.
    """
    boundary = re.compile(pattern) if isinstance(pattern, str) else pattern
    groups: list[LineGroup] = []
    current: LineGroup | None = None
    for line in lines:
        match = boundary.match(line)
        if match:
            current = LineGroup(lines=[line], captures=match.groups())
            groups.append(current)
            continue
        if current is None:
            continue
        current.lines.append(line)
    return groups
