"""In-memory surfaces and a renderer that clears and blits them."""

from __future__ import annotations

from vecdraw.colours import Colour

__all__ = ["Surface", "Renderer"]

_BYTES_PER_PIXEL = 4
_CLEAR_BYTE = 0x0F


class Surface:
    """A block of 32-bit pixels laid out in rows of pitch bytes."""

    bytes_per_pixel = _BYTES_PER_PIXEL

    def __init__(self, width: int, height: int, pitch: int | None = None):
        if width <= 0 or height <= 0:
            raise ValueError("surface dimensions must be positive")
        if pitch is None:
            pitch = width * _BYTES_PER_PIXEL
        if pitch < width * _BYTES_PER_PIXEL:
            raise ValueError("pitch is smaller than one row of pixels")
        self.width = width
        self.height = height
        self.pitch = pitch
        self.pixels = bytearray(height * pitch)


class Renderer:
    """Holds the drawing colours and moves pixels between surfaces."""

    def __init__(self, fg: int = Colour.WHITE, bg: int = Colour.BLACK):
        self.fg = fg
        self.bg = bg

    def swap(self, front: Surface, back: Surface) -> None:
        """Blit front onto back at the origin, clipped to the smaller surface."""
        rows = min(front.height, back.height)
        row_bytes = min(front.width, back.width) * _BYTES_PER_PIXEL
        for row in range(rows):
            src = row * front.pitch
            dst = row * back.pitch
            back.pixels[dst:dst + row_bytes] = front.pixels[src:src + row_bytes]

    def clear(self, surface: Surface) -> None:
        """Set every byte of surface to the clear pattern."""
        surface.pixels[:] = bytes([_CLEAR_BYTE]) * len(surface.pixels)