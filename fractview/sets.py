"""Escape-time iteration counts for the Mandelbrot and Julia sets."""

from __future__ import annotations

import numpy as np

MAX_LENGTH = 960
MAX_WIDTH = 960
ESCAPE_RADIUS_SQUARED = 4.0


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")


def _check_max_iteration(max_iteration: int) -> None:
    if max_iteration < 0:
        raise ValueError(f"max_iteration must not be negative, got {max_iteration}")


def plane_coordinates(width: int, height: int, zoom: float) -> tuple[np.ndarray, np.ndarray]:
    """Complex-plane coordinates of every pixel, as two (height, width) arrays.

    Pixel column ``i`` maps to ``(i / width * 4 - 2) * zoom`` and pixel row
    ``j`` to ``(j / height * 4 - 2) * zoom``.
    """
    _check_size(width, height)
    xs = (np.arange(width, dtype=np.float64) / width * 4.0 - 2.0) * zoom
    ys = (np.arange(height, dtype=np.float64) / height * 4.0 - 2.0) * zoom
    x, y = np.meshgrid(xs, ys)
    return x, y


def _escape_counts(zr, zi, cr, ci, max_iteration: int) -> np.ndarray:
    """Iterate ``z = z*z + c`` until |z| exceeds 2 or the limit is reached."""
    shape = zr.shape
    zr = np.array(zr, dtype=np.float64).ravel()
    zi = np.array(zi, dtype=np.float64).ravel()
    cr = np.broadcast_to(np.asarray(cr, dtype=np.float64), shape).ravel().copy()
    ci = np.broadcast_to(np.asarray(ci, dtype=np.float64), shape).ravel().copy()
    counts = np.zeros(zr.size, dtype=np.int64)
    index = np.arange(zr.size)
    for _ in range(max_iteration):
        inside = zr * zr + zi * zi <= ESCAPE_RADIUS_SQUARED
        if not inside.all():
            index, zr, zi, cr, ci = index[inside], zr[inside], zi[inside], cr[inside], ci[inside]
        if index.size == 0:
            break
        temp = zr * zr - zi * zi + cr
        zi = 2 * zr * zi + ci
        zr = temp
        counts[index] += 1
    return counts.reshape(shape)


def mandelbrot_counts(width: int, height: int, zoom: float, max_iteration: int) -> np.ndarray:
    """Escape counts of the Mandelbrot set, shape (height, width)."""
    _check_max_iteration(max_iteration)
    x, y = plane_coordinates(width, height, zoom)
    zero = np.zeros_like(x)
    return _escape_counts(zero, zero, x, y, max_iteration)


def julia_counts(width: int, height: int, zoom: float, c, max_iteration: int) -> np.ndarray:
    """Escape counts of the Julia set for constant ``c``, shape (height, width)."""
    _check_max_iteration(max_iteration)
    c = complex(c)
    x, y = plane_coordinates(width, height, zoom)
    return _escape_counts(x, -y, c.real, c.imag, max_iteration)