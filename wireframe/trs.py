"""The translate-rotate-scale state that turns map points into screen points."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from wireframe.heightmap import Point
from wireframe.matrix import Mat4
from wireframe.vector import TransformVector


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves going away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _bump_diagonal(matrix: Mat4, dx: float, dy: float, dz: float) -> Mat4:
    """``matrix`` with ``dx``, ``dy`` and ``dz`` added to its first three diagonal cells."""
    grid = [list(row) for row in matrix.rows]
    grid[0][0] += dx
    grid[1][1] += dy
    grid[2][2] += dz
    return Mat4(grid)


@dataclass
class Trs:
    """Matrices composing the view transform, driven by a :class:`TransformVector`."""

    identity: Mat4 = field(default_factory=Mat4.identity)
    to_origin: Mat4 = field(default_factory=Mat4.center_to_origin)
    to_center: Mat4 = field(default_factory=Mat4.center_back)
    isometric: Mat4 = field(default_factory=Mat4.isometric)
    t: Mat4 = field(default_factory=Mat4.identity)
    r: Mat4 = field(default_factory=Mat4.identity)
    s: Mat4 = field(default_factory=Mat4.identity)
    trs: Mat4 = field(default_factory=Mat4.identity)
    vec: TransformVector = field(default_factory=TransformVector)
    dirty: bool = False

    def _compute_scale(self) -> None:
        grid = [list(row) for row in self.s.rows]
        grid[0][0] += self.vec.s.x
        grid[1][1] += self.vec.s.y
        grid[2][2] += self.vec.s.z
        grid[3][3] += 1
        self.s = Mat4(grid)

    def _compute_rotation(self) -> None:
        rx = Mat4.rotation_x(self.vec.r.x)
        ry = Mat4.rotation_y(self.vec.r.y)
        rz = Mat4.rotation_z(self.vec.r.z)
        self.r = self.identity @ rz @ ry @ rx

    def _compute_translation(self) -> None:
        v = self.vec.t
        bumped = _bump_diagonal(self.t, v.x, v.y, v.z)
        grid = [list(row) for row in bumped.rows]
        grid[3][3] = 1.0
        self.t = Mat4(grid)

    def compute(self) -> None:
        """Update ``s``, ``r`` and ``t`` from the vector and recombine them into ``trs``.

        Scale and translation accumulate on every call.
        """
        self._compute_scale()
        self._compute_rotation()
        self._compute_translation()
        self.trs = self.identity @ self.t @ self.r @ self.s

    def apply(self, point: Point) -> None:
        """Transform the computed coordinates of ``point`` in place, about the screen centre."""
        total = self.identity @ self.to_center @ self.trs @ self.to_origin
        tx, ty, tz, _ = total.transform(point.cx, point.cy, point.cz, point.cw)
        point.cx = _round_half_away(tx)
        point.cy = _round_half_away(ty)
        point.cz = _round_half_away(tz)