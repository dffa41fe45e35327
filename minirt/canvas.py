"""The screen, the centred canvas laid over it, and conversions between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


def _half(n: int) -> int:
    """Half of ``n``, rounded toward zero."""
    return n // 2 if n >= 0 else -((-n) // 2)


@dataclass(frozen=True, slots=True)
class Screen:
    """Size of the output image in pixels."""

    width: int = 800
    height: int = 600


@dataclass(frozen=True, slots=True)
class Canvas:
    """Pixel coordinates centred on the middle of the screen, y pointing up."""

    left: int
    right: int
    top: int
    bottom: int
    width: int
    height: int

    @classmethod
    def from_screen(cls, screen: Screen) -> Canvas:
        """The canvas covering ``screen``."""
        return cls(
            left=-_half(screen.width),
            right=_half(screen.width),
            top=_half(screen.height),
            bottom=-_half(screen.height),
            width=screen.width,
            height=screen.height,
        )

    def points(self) -> Iterator[tuple[int, int]]:
        """Canvas points in drawing order: rows from the top, each row left to right."""
        for y in range(self.top, self.bottom, -1):
            for x in range(self.left, self.right):
                yield (x, y)


def canvas_to_screen(point: tuple[int, int], screen: Screen) -> tuple[int, int]:
    """Convert a canvas point to screen coordinates (origin top left, y pointing down)."""
    x, y = point
    return (_half(screen.width) + x, _half(screen.height) - y)