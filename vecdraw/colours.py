"""Colour constants and the iteration-ratio colour ramp."""

from enum import IntEnum

__all__ = ["Palette", "Colour", "rgb"]


class Palette(IntEnum):
    """24-bit 0xRRGGBB colours used when drawing straight into a framebuffer."""

    BLACK = 0x010101
    RED = 0xDE382B
    GREEN = 0x39B54A
    YELLOW = 0xFFC706
    BLUE = 0x006FB8
    MAGENTA = 0x762671
    CYAN = 0x30B5B8
    WHITE = 0xCCCCCC
    BRIGHT_BLACK = 0x7F7F7F
    BRIGHT_RED = 0xFF0000
    BRIGHT_GREEN = 0x00FF00
    BRIGHT_YELLOW = 0xFFFF00
    BRIGHT_BLUE = 0x0000FF
    BRIGHT_MAGENTA = 0xFF00FF
    BRIGHT_CYAN = 0x00FFFF
    BRIGHT_WHITE = 0xFFFFFF


class Colour(IntEnum):
    """32-bit 0xRRGGBBAA colours used by the engine renderer."""

    RED = 0xFF0000FF
    GREEN = 0x00FF00FF
    BLUE = 0x0000FFFF
    BLACK = 0x111111FF
    WHITE = 0xAAAAAAFF
    YELLOW = 0xFFFF00FF
    MAGENTA = 0xFF00FFFF
    PINK = 0xFC05CAFF
    PURPLE = 0x9505FCFF
    ORANGE = 0xFC8405FF
    CYAN = 0x00D3EEFF
    LILAC = 0xC383FCFF
    TEAL = 0x019285FF
    LIME = 0x65FF00FF
    LIGHT_GREY = 0x979797FF
    DARK_GREY = 0x2A2A2AFF
    PEACH = 0xFF7D29FF


def _truncating_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the sign of value."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def rgb(ratio: float) -> int:
    """Map a ratio in [0, 1) onto a six-step hue ramp.

    The result holds red in the low byte, green in the middle byte and blue
    in the high byte. Ratios outside the ramp give 0.
    """
    normalized = int(ratio * 256 * 6)
    sextant, x = _truncating_divmod(normalized, 256)

    ramp = {
        0: (255, x, 0),
        1: (255 - x, 255, 0),
        2: (0, 255, x),
        3: (0, 255 - x, 255),
        4: (x, 0, 255),
        5: (255, 0, 255 - x),
    }
    red, green, blue = ramp.get(sextant, (0, 0, 0))
    return (red + (green << 8) + (blue << 16)) & 0xFFFFFFFF