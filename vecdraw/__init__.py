"""In-memory software rendering: colours, drawing primitives, surfaces and a Mandelbrot renderer."""

__version__ = "0.1.0"
__all__ = ["colours", "framebuffer", "primitives", "renderer", "entity", "cli"]