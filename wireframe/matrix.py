"""Homogeneous 4x4 matrices used to place and transform map points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntFlag
from typing import Iterable, Tuple, Union

WIDTH = 800
HEIGHT = 600

Row = Tuple[float, float, float, float]


class Rotation(IntFlag):
    """Axes a rotation may be applied around."""

    RX = 1
    RY = 2
    RZ = 4


def _half(value: int) -> int:
    """Integer half of ``value``, truncated toward zero."""
    return int(value / 2)


@dataclass(frozen=True)
class Mat4:
    """An immutable 4x4 matrix of floats, stored row by row."""

    rows: Tuple[Row, Row, Row, Row]

    def __init__(self, rows: Iterable[Iterable[float]]):
        built = tuple(tuple(float(v) for v in row) for row in rows)
        if len(built) != 4 or any(len(row) != 4 for row in built):
            raise ValueError("a Mat4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", built)

    @classmethod
    def zeros(cls) -> "Mat4":
        """The all-zero matrix."""
        return cls([[0.0] * 4 for _ in range(4)])

    @classmethod
    def identity(cls) -> "Mat4":
        """The identity matrix."""
        return cls([[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)])

    @classmethod
    def _with(cls, base: "Mat4", **cells: float) -> "Mat4":
        grid = [list(row) for row in base.rows]
        for key, value in cells.items():
            i, j = int(key[1]), int(key[2])
            grid[i][j] = value
        return cls(grid)

    @classmethod
    def center_back(cls, width: int = WIDTH, height: int = HEIGHT) -> "Mat4":
        """Translation moving the origin to the centre of a width x height screen."""
        return cls._with(cls.identity(), m03=_half(width), m13=_half(height))

    @classmethod
    def center_to_origin(cls, width: int = WIDTH, height: int = HEIGHT) -> "Mat4":
        """Translation moving the centre of a width x height screen to the origin."""
        return cls._with(cls.identity(), m03=_half(-width), m13=_half(-height))

    @classmethod
    def isometric(cls) -> "Mat4":
        """The isometric projection slot; currently the zero matrix."""
        return cls.zeros()

    @classmethod
    def rotation_x(cls, degrees: float) -> "Mat4":
        """Rotation around the x axis by ``degrees``."""
        a = math.radians(degrees)
        c, s = math.cos(a), math.sin(a)
        return cls._with(cls.identity(), m11=c, m12=-s, m21=s, m22=c)

    @classmethod
    def rotation_y(cls, degrees: float) -> "Mat4":
        """Rotation around the y axis by ``degrees``."""
        a = math.radians(degrees)
        c, s = math.cos(a), math.sin(a)
        return cls._with(cls.identity(), m00=c, m02=s, m20=-s, m22=c)

    @classmethod
    def rotation_z(cls, degrees: float) -> "Mat4":
        """Rotation around the z axis by ``degrees``."""
        a = math.radians(degrees)
        c, s = math.cos(a), math.sin(a)
        return cls._with(cls.identity(), m00=c, m01=-s, m10=s, m11=c)

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> "Mat4":
        """Scale by ``x``, ``y`` and ``z`` along the axes."""
        return cls._with(cls.identity(), m00=x, m11=y, m22=z)

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> "Mat4":
        """Translate by ``(x, y, z)``."""
        return cls._with(cls.identity(), m03=x, m13=y, m23=z)

    def copy(self) -> "Mat4":
        """An equal, independent matrix."""
        return Mat4(self.rows)

    def multiply(self, other: "Mat4") -> "Mat4":
        """The product ``self * other``."""
        if not isinstance(other, Mat4):
            raise TypeError("can only multiply a Mat4 by another Mat4")
        columns = list(zip(*other.rows))
        return Mat4(
            [sum(a * b for a, b in zip(row, col)) for col in columns]
            for row in self.rows
        )

    def __matmul__(self, other: object) -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.multiply(other)

    def __getitem__(self, index: Union[int, Tuple[int, int]]):
        if isinstance(index, tuple):
            i, j = index
            return self.rows[i][j]
        return self.rows[index]

    def transform(
        self, x: float, y: float, z: float, w: float
    ) -> Tuple[float, float, float, float]:
        """Apply the matrix to the column vector ``(x, y, z, w)``."""
        vec = (x, y, z, w)
        return tuple(sum(a * b for a, b in zip(row, vec)) for row in self.rows)