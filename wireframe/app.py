"""The wireframe viewer: load a map, project it and draw its grid."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from wireframe.bresenham import plot_bresenham
from wireframe.display import Canvas, Key
from wireframe.heightmap import HeightMap, MapError, Point
from wireframe.trs import Trs
from wireframe.vector import Mode

EXIT_FAILURE = 1
DEFAULT_MAP = "./4 dots.fdf"
DEFAULT_TITLE = "Fdf"
HEIGHT_FACTOR = 5
ANIMATION_STEPS = 91
ANIMATION_SHIFT = (10, 0, 0)


class FdfError(Exception):
    """A fatal viewer error carrying the exit status it should end with."""

    def __init__(self, message: str, errnum: int = EXIT_FAILURE):
        super().__init__(message)
        self.message = message
        self.errnum = errnum


@dataclass
class Fdf:
    """A canvas, the map drawn on it and the transform applied to it."""

    canvas: Canvas
    map: HeightMap
    trs: Trs = field(default_factory=Trs)

    @classmethod
    def from_file(cls, filepath: str, title: Optional[str] = DEFAULT_TITLE) -> "Fdf":
        """Load the map at ``filepath`` onto a fresh canvas titled ``title``."""
        canvas = Canvas(title)
        try:
            heightmap = HeightMap.from_file(filepath)
        except MapError as exc:
            cause = exc.__cause__
            errnum = (
                cause.errno
                if isinstance(cause, OSError) and cause.errno
                else EXIT_FAILURE
            )
            raise FdfError(str(exc), errnum) from exc
        return cls(canvas=canvas, map=heightmap)

    def project(self) -> None:
        """Spread the map over the canvas and set every point's screen coordinates."""
        if self.map.width <= 0 or self.map.height <= 0:
            raise FdfError("Invalid map", EXIT_FAILURE)
        for p in self.map.points():
            p.cx = p.x * self.canvas.width // self.map.width
            p.cy = p.y * self.canvas.height // self.map.height
            p.cz = p.z * HEIGHT_FACTOR
            p.cw = 1

    def _neighbours(self) -> Iterator[Tuple[Point, Optional[Point], Optional[Point]]]:
        rows: List[List[Point]] = self.map.lines
        for y, row in enumerate(rows):
            below = rows[y + 1] if y + 1 < len(rows) else None
            for x, point in enumerate(row):
                right = row[x + 1] if x + 1 < len(row) else None
                down = below[x] if below is not None and x < len(below) else None
                yield point, right, down

    def draw_grid(self) -> None:
        """Link each point to its right and lower neighbours."""
        for point, right, down in self._neighbours():
            if right is not None:
                plot_bresenham(self.canvas, point, right)
            if down is not None:
                plot_bresenham(self.canvas, point, down)

    def animate(self, steps: int = ANIMATION_STEPS) -> None:
        """Shift the view along x ``steps`` times, redrawing the grid each time."""
        for _ in range(steps):
            self.trs.vec.configure(ANIMATION_SHIFT, Mode.TRANSLATE)
            self.trs.compute()
            self.canvas.clear()
            for point, right, down in self._neighbours():
                self.trs.apply(point)
                if right is not None:
                    self.trs.apply(right)
                    plot_bresenham(self.canvas, point, right)
                if down is not None:
                    self.trs.apply(down)
                    plot_bresenham(self.canvas, point, down)

    def handle_key(self, keycode: int) -> bool:
        """Whether ``keycode`` asks the viewer to close."""
        return keycode == Key.ESC


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wireframe", description="Render a height map as a wireframe image."
    )
    parser.add_argument("map", nargs="?", default=DEFAULT_MAP, help="map file")
    parser.add_argument("--title", default=DEFAULT_TITLE, help="canvas title")
    parser.add_argument("--output", default="fdf.png", help="image file to write")
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="number of animation steps to run before saving",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the map named on the command line to an image file."""
    args = _parser().parse_args(argv)
    try:
        fdf = Fdf.from_file(args.map, args.title)
        fdf.project()
        fdf.draw_grid()
        if args.frames > 0:
            fdf.animate(args.frames)
        fdf.canvas.save(args.output)
    except FdfError as exc:
        print(exc.message, file=sys.stderr)
        return exc.errnum
    except OSError as exc:
        print(f"Image write error: {exc.strerror or exc}", file=sys.stderr)
        return exc.errno or EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())

_ = os