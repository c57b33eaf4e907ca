"""Mandelbrot and Julia set viewer with escape-count, colouring and string helpers."""

__version__ = "0.1.0"
__all__ = ["cli", "numbers", "palette", "sets", "strtools", "view"]