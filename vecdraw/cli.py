"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys

__all__ = ["main"]


def main(argv: list[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    parser = argparse.ArgumentParser(prog="vecdraw")
    parser.parse_args(argv)
    sys.stdout.write("hello world")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())