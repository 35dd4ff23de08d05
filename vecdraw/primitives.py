"""Line, polygon and rectangle drawing onto any pixel target."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import pairwise
from typing import Protocol

__all__ = [
    "line_points",
    "draw_line",
    "draw_polygon",
    "draw_rectangle",
    "fill_rectangle",
    "RelativeCanvas",
]


class _PixelTarget(Protocol):
    def set_pixel(self, x: int, y: int, colour: int) -> None: ...


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def line_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a line from (x1, y1) to (x2, y2), both ends included."""
    dx, dy = x2 - x1, y2 - y1
    dx_abs, dy_abs = abs(dx), abs(dy)
    sdx, sdy = _sign(dx), _sign(dy)
    err_x = dy_abs >> 1
    err_y = dx_abs >> 1
    px, py = x1, y1

    yield px, py
    if dx_abs > dy_abs:
        for _ in range(dx_abs):
            err_y += dy_abs
            if err_y >= dx_abs:
                err_y -= dx_abs
                py += sdy
            px += sdx
            yield px, py
    else:
        for _ in range(dy_abs):
            err_x += dx_abs
            if err_x >= dy_abs:
                err_x -= dy_abs
                px += sdx
            py += sdy
            yield px, py


def draw_line(target: _PixelTarget, x1: int, y1: int, x2: int, y2: int, colour: int) -> None:
    """Draw a line onto target."""
    for x, y in line_points(x1, y1, x2, y2):
        target.set_pixel(x, y, colour)


def draw_polygon(target: _PixelTarget, vertices: Sequence[tuple[int, int]], colour: int) -> None:
    """Draw consecutive edges through vertices and close from the first to the last."""
    if not vertices:
        raise ValueError("a polygon needs at least one vertex")
    for (ax, ay), (bx, by) in pairwise(vertices):
        draw_line(target, ax, ay, bx, by, colour)
    (fx, fy), (lx, ly) = vertices[0], vertices[-1]
    draw_line(target, fx, fy, lx, ly, colour)


def fill_rectangle(target: _PixelTarget, x1: int, y1: int, x2: int, y2: int, colour: int) -> None:
    """Fill rows y1 up to but not including y2 between x1 and x2."""
    for y in range(y1, y2):
        draw_line(target, x1, y, x2, y, colour)


def draw_rectangle(target: _PixelTarget, x1: int, y1: int, x2: int, y2: int, colour: int) -> None:
    """Draw the outline of the rectangle with corners (x1, y1) and (x2, y2)."""
    draw_line(target, x1, y1, x1, y2, colour)
    draw_line(target, x1, y1, x2, y1, colour)
    draw_line(target, x1, y2, x2, y2, colour)
    draw_line(target, x2, y2, x2, y1, colour)


class RelativeCanvas:
    """A canvas whose y axis points up, flipped onto a framebuffer on present."""

    def __init__(self, width: int = 1024, height: int = 768):
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self._columns = [[0] * height for _ in range(width)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")

    def set_pixel(self, x: int, y: int, colour: int) -> None:
        self._check(x, y)
        self._columns[x][y] = colour & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        self._check(x, y)
        return self._columns[x][y]

    def fill(self, colour: int) -> None:
        value = colour & 0xFFFFFFFF
        self._columns = [[value] * self.height for _ in range(self.width)]

    def present(self, framebuffer) -> None:
        """Copy the canvas onto framebuffer with y flipped, then swap it."""
        for x, column in enumerate(self._columns):
            for y, colour in enumerate(column):
                framebuffer.set_pixel(x, self.height - y, colour)
        framebuffer.swap()