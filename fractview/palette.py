"""Colour mapping from escape-iteration counts to RGBA pixels."""

from __future__ import annotations

import numpy as np


def pixel_color(r: int, g: int, b: int, a: int) -> int:
    """Pack RGBA components into one 32-bit value, red in the top byte."""
    return (r << 24 | g << 16 | b << 8 | a) & 0xFFFFFFFF


def _check_max_iteration(max_iteration: int) -> None:
    if max_iteration <= 0:
        raise ValueError(f"max_iteration must be positive, got {max_iteration}")


def iteration_color(iteration: int, max_iteration: int) -> tuple[int, int, int, int]:
    """RGBA colour for a point that escaped after ``iteration`` steps."""
    _check_max_iteration(max_iteration)
    ratio = iteration / max_iteration
    r = int(9 * (1 - ratio) * ratio * ratio * ratio * 255)
    g = int(15 * (1 - ratio) * (1 - ratio) * ratio * ratio * 255)
    b = int(8.5 * (1 - ratio) * (1 - ratio) * (1 - ratio) * ratio * 255)
    return (r, g, b, 255)


def colorize(counts, max_iteration: int, inside_color=None) -> np.ndarray:
    """Map an array of iteration counts to an RGBA ``uint8`` array.

    Points whose count reached ``max_iteration`` get ``inside_color`` when
    one is given; otherwise they are coloured like any other count.
    """
    _check_max_iteration(max_iteration)
    counts = np.asarray(counts)
    ratio = counts.astype(np.float64) / max_iteration
    red = 9 * (1 - ratio) * ratio * ratio * ratio * 255
    green = 15 * (1 - ratio) * (1 - ratio) * ratio * ratio * 255
    blue = 8.5 * (1 - ratio) * (1 - ratio) * (1 - ratio) * ratio * 255
    image = np.empty(counts.shape + (4,), dtype=np.uint8)
    image[..., 0] = np.trunc(red).astype(np.uint8)
    image[..., 1] = np.trunc(green).astype(np.uint8)
    image[..., 2] = np.trunc(blue).astype(np.uint8)
    image[..., 3] = 255
    if inside_color is not None:
        image[counts >= max_iteration] = np.asarray(inside_color, dtype=np.uint8)
    return image