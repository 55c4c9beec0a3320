"""Integer line rasterisation between two projected map points."""

from __future__ import annotations

from typing import Iterator, Tuple

from wireframe.display import Canvas
from wireframe.heightmap import Point


def _grey(value: int) -> int:
    return value << 24 | value << 16 | value << 8 | value


WHITE = _grey(255)

Pixel = Tuple[int, int]


def _shallow_right_down(x, y, x2, dx, dy) -> Iterator[Pixel]:
    e, dx, dy = dx, dx * 2, dy * 2
    while True:
        yield x, y
        x += 1
        if x == x2:
            return
        e -= dy
        if e < 0:
            y += 1
            e += dx


def _steep_right_down(x, y, y2, dx, dy) -> Iterator[Pixel]:
    e, dy, dx = dy, dy * 2, dx * 2
    while True:
        yield x, y
        y += 1
        if y == y2:
            return
        e -= dx
        if e < 0:
            x += 1
            e += dy


def _shallow_right_up(x, y, x2, dx, dy) -> Iterator[Pixel]:
    e, dx, dy = dx, dx * 2, dy * 2
    while True:
        yield x, y
        x += 1
        if x == x2:
            return
        e += dy
        if e < 0:
            y -= 1
            e += dx


def _steep_right_up(x, y, y2, dx, dy) -> Iterator[Pixel]:
    e, dy, dx = dy, dy * 2, dx * 2
    while True:
        yield x, y
        y -= 1
        if y == y2:
            return
        e += dx
        if e > 0:
            x += 1
            e += dy


def _shallow_left_down(x, y, x2, dx, dy) -> Iterator[Pixel]:
    e, dx, dy = dx, dx * 2, dy * 2
    while True:
        yield x, y
        x -= 1
        if x == x2:
            return
        e += dy
        if e >= 0:
            y += 1
            e += dx


def _steep_left_down(x, y, y2, dx, dy) -> Iterator[Pixel]:
    e, dy, dx = dy, dy * 2, dx * 2
    while True:
        yield x, y
        y += 1
        if y == y2:
            return
        e += dx
        if e <= 0:
            x -= 1
            e += dy


def _shallow_left_up(x, y, x2, dx, dy) -> Iterator[Pixel]:
    e, dx, dy = dx, dx * 2, dy * 2
    while True:
        yield x, y
        x -= 1
        if x == x2:
            return
        e -= dy
        if e >= 0:
            y -= 1
            e += dx


def _steep_left_up(x, y, y2, dx, dy) -> Iterator[Pixel]:
    e, dy, dx = dy, dy * 2, dx * 2
    while True:
        yield x, y
        y -= 1
        if y == y2:
            return
        e -= dx
        if e >= 0:
            x -= 1
            e += dy


def line_pixels(x1: int, y1: int, x2: int, y2: int) -> Iterator[Pixel]:
    """Pixels of the segment from ``(x1, y1)`` towards ``(x2, y2)``.

    The start pixel is included and the end pixel is not; a zero-length
    segment yields nothing.
    """
    dx = x2 - x1
    dy = y2 - y1
    if dx > 0:
        if dy > 0:
            if dx >= dy:
                return _shallow_right_down(x1, y1, x2, dx, dy)
            return _steep_right_down(x1, y1, y2, dx, dy)
        if dy < 0:
            if dx >= -dy:
                return _shallow_right_up(x1, y1, x2, dx, dy)
            return _steep_right_up(x1, y1, y2, dx, dy)
        return ((x, y1) for x in range(x1, x2))
    if dx < 0:
        if dy > 0:
            if -dx >= dy:
                return _shallow_left_down(x1, y1, x2, dx, dy)
            return _steep_left_down(x1, y1, y2, dx, dy)
        if dy < 0:
            if dx <= dy:
                return _shallow_left_up(x1, y1, x2, dx, dy)
            return _steep_left_up(x1, y1, y2, dx, dy)
        return ((x, y1) for x in range(x1, x2, -1))
    if dy > 0:
        return ((x1, y) for y in range(y1, y2))
    if dy < 0:
        return ((x1, y) for y in range(y1, y2, -1))
    return iter(())


def plot_bresenham(canvas: Canvas, p1: Point, p2: Point) -> None:
    """Draw in white the segment between the screen coordinates of two points."""
    for x, y in line_pixels(p1.cx, p1.cy, p2.cx, p2.cy):
        canvas.put_pixel(x, y, WHITE)