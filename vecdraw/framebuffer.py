"""A double-buffered 32-bit framebuffer and an escape-time fractal renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from vecdraw.colours import Palette, rgb

__all__ = ["PixelFormat", "Framebuffer", "Viewport", "escape_time"]

_BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class PixelFormat:
    """Bit offsets of the colour channels inside a 32-bit pixel."""

    red_offset: int = 16
    green_offset: int = 8
    blue_offset: int = 0

    def pack(self, colour: int) -> int:
        """Convert a 0xRRGGBB colour into this pixel layout."""
        red = (colour >> 16) & 0xFF
        green = (colour >> 8) & 0xFF
        blue = colour & 0xFF
        return (
            (red << self.red_offset)
            | (green << self.green_offset)
            | (blue << self.blue_offset)
        ) & 0xFFFFFFFF


class Framebuffer:
    """A back buffer that is drawn to and a front buffer that is shown."""

    def __init__(self, width: int, height: int, pixel_format: PixelFormat | None = None):
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self.pixel_format = pixel_format if pixel_format is not None else PixelFormat()
        self.line_length = width * _BYTES_PER_PIXEL
        self._back = [0] * (width * height)
        self._front = [0] * (width * height)

    def fill(self, colour: int) -> None:
        """Set every pixel of the back buffer to colour."""
        self._back = [colour & 0xFFFFFFFF] * (self.width * self.height)

    def set_pixel(self, x: int, y: int, colour: int) -> None:
        """Write a pixel to the back buffer; writes past the end are dropped."""
        index = x + y * self.width
        if 0 <= index < len(self._back):
            self._back[index] = colour & 0xFFFFFFFF

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the framebuffer")
        return x + y * self.width

    def get_pixel(self, x: int, y: int) -> int:
        """Read a pixel from the back buffer."""
        return self._back[self._index(x, y)]

    def front_pixel(self, x: int, y: int) -> int:
        """Read a pixel from the front buffer."""
        return self._front[self._index(x, y)]

    def swap(self) -> None:
        """Copy the back buffer onto the front buffer."""
        self._front = list(self._back)


@dataclass
class Viewport:
    """The region of the complex plane being rendered."""

    left: float = -2.0
    right: float = 1.0
    top: float = 1.125
    bottom: float = -1.125
    step: float = field(default=0.01)

    def move(self, key: str) -> bool:
        """Pan for a w/a/s/d key; return False when key asks to quit."""
        if key == "q":
            return False
        if key == "w":
            self.top += self.step
            self.bottom += self.step
        elif key == "s":
            self.top -= self.step
            self.bottom -= self.step
        elif key == "a":
            self.left += self.step
            self.right += self.step
        elif key == "d":
            self.left -= self.step
            self.right -= self.step
        return True


def escape_time(framebuffer: Framebuffer, viewport: Viewport, max_iter: int = 1024) -> None:
    """Render the Mandelbrot set over viewport into the framebuffer's back buffer."""
    width, height = framebuffer.width, framebuffer.height
    span_x = viewport.right - viewport.left
    span_y = viewport.bottom - viewport.top
    for y in range(height):
        imag = viewport.top + (y * span_y) / height
        for x in range(width):
            c = complex(viewport.left + (x * span_x) / width, imag)
            z = 0j
            iterations = 0
            while abs(z) < 2.0 and iterations < max_iter:
                z = z * z + c
                iterations += 1
            if iterations == max_iter:
                colour = int(Palette.BLACK)
            else:
                colour = rgb(iterations / max_iter)
            framebuffer.set_pixel(x, y, colour)