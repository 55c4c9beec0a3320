"""An off-screen drawing surface and the key codes the viewer reacts to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from typing import Dict, Optional, Tuple, Union

from PIL import Image

from wireframe.matrix import HEIGHT, WIDTH

DEFAULT_TITLE = "New window"


class Key(IntEnum):
    """X11 key symbols used by the viewer."""

    LEFT_ARROW = 65361
    UP_ARROW = 65362
    RIGHT_ARROW = 65363
    DOWN_ARROW = 65364
    ESC = 65307
    SPACE = 32
    SHIFT_L = 65505
    SHIFT_R = 65506
    TAB = 65289
    NUM_PAD_0 = 65438
    NUM_PAD_1 = 65436
    NUM_PAD_2 = 65433
    NUM_PAD_3 = 65435
    NUM_PAD_4 = 65430
    NUM_PAD_5 = 65437
    NUM_PAD_6 = 65432
    NUM_PAD_7 = 65429
    NUM_PAD_8 = 65431
    NUM_PAD_9 = 65434
    A = 97
    B = 98
    C = 99
    D = 100
    E = 101
    F = 102
    G = 103
    H = 104
    I = 105  # noqa: E741
    J = 106
    K = 107
    L = 108
    M = 109
    N = 110
    O = 111  # noqa: E741
    P = 112
    Q = 113
    R = 114
    S = 115
    T = 116
    U = 117
    V = 118
    W = 119
    X = 120
    Y = 121
    Z = 122


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour bytes into one integer."""
    return t << 24 | r << 16 | g << 8 | b


@dataclass
class Canvas:
    """A titled width x height surface; pixels outside it are silently dropped."""

    title: Optional[str] = None
    width: int = WIDTH
    height: int = HEIGHT
    _pixels: Dict[Tuple[int, int], int] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if not self.title:
            self.title = DEFAULT_TITLE
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas dimensions must be positive")

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)`` to ``color`` if it lies on the canvas."""
        if self._inside(x, y):
            self._pixels[(x, y)] = color

    def clear(self) -> None:
        """Reset every pixel to black."""
        self._pixels.clear()

    def pixel(self, x: int, y: int) -> int:
        """Colour at ``(x, y)``; 0 when never drawn."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels.get((x, y), 0)

    def to_image(self) -> Image.Image:
        """An RGB image of the canvas."""
        image = Image.new("RGB", (self.width, self.height), (0, 0, 0))
        for (x, y), color in self._pixels.items():
            image.putpixel(
                (x, y), ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
            )
        return image

    def save(self, path: Union[str, PathLike]) -> None:
        """Write the canvas as an image file; the format follows the extension."""
        self.to_image().save(path)