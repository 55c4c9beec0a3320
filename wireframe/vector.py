"""Accumulated translation, rotation and scale requested for the view."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable


class Mode(IntEnum):
    """Which component of a :class:`TransformVector` an update targets."""

    ROTATE = 0
    TRANSLATE = 1
    SCALE = 2


@dataclass
class Xyz:
    """A homogeneous triple of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def add(self, dx: float, dy: float, dz: float) -> None:
        """Add the given amounts to ``x``, ``y`` and ``z``."""
        self.x += dx
        self.y += dy
        self.z += dz


@dataclass
class TransformVector:
    """Translation ``t``, rotation ``r`` (degrees) and scale ``s`` of the view."""

    t: Xyz = field(default_factory=lambda: Xyz(w=1.0))
    r: Xyz = field(default_factory=Xyz)
    s: Xyz = field(default_factory=Xyz)

    def configure(self, xyz: Iterable[float], mode: int) -> None:
        """Add the three values of ``xyz`` to the component chosen by ``mode``.

        A mode that is not one of :class:`Mode` leaves the vector unchanged.
        """
        dx, dy, dz = xyz
        if mode == Mode.ROTATE:
            self.r.add(dx, dy, dz)
        elif mode == Mode.TRANSLATE:
            self.t.add(dx, dy, dz)
        elif mode == Mode.SCALE:
            self.s.add(dx, dy, dz)