# vecdraw

A small pure-Python software renderer. Everything is drawn into in-memory
pixel buffers, so it needs no graphics stack and no display.

## What it provides

- `vecdraw.colours`
  - `Palette`: named 24-bit `0xRRGGBB` colours.
  - `Colour`: named 32-bit `0xRRGGBBAA` colours.
  - `rgb(ratio)`: maps a ratio in `[0, 1)` onto a six-segment hue ramp. The
    result has red in the low byte, green in the middle byte and blue in the
    high byte. Ratios outside the ramp give `0`.
- `vecdraw.framebuffer`
  - `PixelFormat`: holds channel bit offsets. `pack(colour)` moves a
    `0xRRGGBB` colour into that layout.
  - `Framebuffer(width, height, pixel_format=None)`: a double-buffered 32-bit
    pixel store.
    - `set_pixel` and `fill` write to the back buffer. Writes past the end of
      the buffer are dropped.
    - `get_pixel` reads the back buffer and `front_pixel` reads the front
      buffer. Both raise `IndexError` outside the buffer.
    - `swap()` copies the back buffer onto the front buffer.
  - `Viewport`: a region of the complex plane. `move(key)` pans it by `step`
    for `w`, `a`, `s` or `d`. It returns `False` for `q` and `True` for every
    other key.
  - `escape_time(framebuffer, viewport, max_iter=1024)`: renders the Mandelbrot
    set into the back buffer. Points that never escape are drawn as
    `Palette.BLACK`; all others are coloured with `rgb`.
- `vecdraw.primitives`
  - `line_points(x1, y1, x2, y2)`: yields the pixels of a Bresenham-style line,
    with both ends included.
  - `draw_line`, `draw_polygon`, `draw_rectangle` and `fill_rectangle`: draw
    onto any object that has a `set_pixel(x, y, colour)` method.
    - `draw_polygon` takes a sequence of `(x, y)` vertices.
    - `fill_rectangle` fills rows `y1` up to, but not including, `y2`.
  - `RelativeCanvas(width=1024, height=768)`: a canvas whose y axis points up.
    `present(framebuffer)` writes it onto a framebuffer with y flipped to
    `height - y`, then swaps that framebuffer.
- `vecdraw.renderer`
  - `Surface(width, height, pitch=None)`: a raw `bytearray` of 32-bit pixels
    in rows of `pitch` bytes.
  - `Renderer(fg, bg)`:
    - `clear(surface)` sets every byte of a surface to `0x0F`.
    - `swap(front, back)` copies `front` onto `back` at the origin, clipped to
      the smaller of the two surfaces.
- `vecdraw.entity`
  - `Tag` and `Shape` enums.
  - `Entity` dataclass. Its hit points must lie in `0..65535`.
    `is_hostile()` is true for `Tag.ENEMY`.

## Install

    pip install .

## Example

```python
from vecdraw.colours import Palette
from vecdraw.framebuffer import Framebuffer, PixelFormat, Viewport, escape_time
from vecdraw.primitives import draw_rectangle

fb = Framebuffer(64, 48, PixelFormat())
escape_time(fb, Viewport(), 64)
draw_rectangle(fb, 2, 2, 20, 10, Palette.BRIGHT_WHITE)
fb.swap()
print(hex(fb.front_pixel(2, 2)))
```

## Command line

    vecdraw

This prints `hello world` and exits with status 0.

## What it does not do

The package only fills buffers in memory. It does not open a window, write to
a screen device, read the keyboard or run an interactive viewer. To see the
pixels, take them out of a `Framebuffer` or `Surface` and pass them to
something else.

## Tests

    pip install .[test]
    pytest