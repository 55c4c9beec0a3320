"""Loading and printing the grid of heights that makes up a map."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from os import PathLike
from typing import IO, Iterable, Iterator, List, Optional, Sequence, Union

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d*)")


class MapError(Exception):
    """Raised when a map file cannot be read or holds no data."""


@dataclass
class Point:
    """A map point: original coordinates and the computed screen ones."""

    x: int
    y: int
    z: int
    w: int = 1
    cx: int = 0
    cy: int = 0
    cz: int = 0
    cw: int = 0


def _atoi(text: str) -> int:
    """Leading integer of ``text`` after optional whitespace and sign; 0 if none."""
    digits = _ATOI.match(text).group(1)
    if digits in ("", "+", "-"):
        return 0
    return int(digits)


def read_lines(path: Union[str, PathLike]) -> List[str]:
    """All lines of ``path``, each keeping its trailing newline."""
    try:
        with open(path, "rb") as handle:
            lines = [raw.decode("utf-8", errors="replace") for raw in handle]
    except OSError as exc:
        raise MapError(f"Map open error: {exc.strerror or exc}") from exc
    if not lines:
        raise MapError("Map open error: no data")
    return lines


def points_count(fields: Optional[Sequence[str]]) -> int:
    """Number of fields in a split line; 0 when there is none."""
    return len(fields) if fields else 0


@dataclass
class HeightMap:
    """Rows of points; ``width`` is the length of the last row read."""

    width: int
    height: int
    lines: List[List[Point]]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "HeightMap":
        """Build a map from text lines of space-separated heights."""
        rows: List[List[Point]] = []
        width = 0
        for y, line in enumerate(lines):
            fields = [f for f in line.strip("\n").split(" ") if f]
            width = points_count(fields)
            rows.append([Point(x, y, _atoi(f)) for x, f in enumerate(fields)])
        return cls(width=width, height=len(rows), lines=rows)

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> "HeightMap":
        """Read and build a map from the file at ``path``."""
        return cls.from_lines(read_lines(path))

    def points(self) -> Iterator[Point]:
        """Every point, row by row."""
        for row in self.lines:
            yield from row

    def format(self) -> str:
        """The heights as text, each followed by a space, one row per line."""
        return "".join(
            "".join(f"{p.z} " for p in row) + "\n" for row in self.lines
        )

    def print(self, file: Optional[IO[str]] = None) -> None:
        """Write :meth:`format` to ``file`` (standard output by default)."""
        (file or sys.stdout).write(self.format())