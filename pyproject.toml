[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vecdraw"
version = "0.1.0"
description = "In-memory software rendering: colour ramps, line and polygon primitives, and a Mandelbrot escape-time renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["framebuffer", "graphics", "bresenham", "mandelbrot", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vecdraw = "vecdraw.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vecdraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
