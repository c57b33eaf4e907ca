"""State of a fractal view: which set, its constant, zoom and iteration limit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from fractview.palette import colorize
from fractview.sets import MAX_LENGTH, MAX_WIDTH, julia_counts, mandelbrot_counts

DEFAULT_MAX_ITERATION = 512
ZOOM_FACTOR = 1.25
MANDELBROT_INSIDE_COLOR = (0, 0, 154, 255)

_ITERATION_CEILING = 512
_ITERATION_FLOOR = 10
_ITERATION_STEP_UP = 50
_ITERATION_STEP_DOWN = 10


class FractalKind(Enum):
    """The fractal sets that can be drawn."""

    MANDELBROT = "M"
    JULIA = "J"


@dataclass
class FractalView:
    """A fractal with its current zoom and iteration limit."""

    kind: FractalKind
    c: complex = 0j
    zoom: float = 1.0
    max_iteration: int = DEFAULT_MAX_ITERATION
    width: int = MAX_LENGTH
    height: int = MAX_WIDTH

    def __post_init__(self) -> None:
        self.kind = FractalKind(self.kind)
        self.c = complex(self.c)

    def scroll(self, ydelta: float) -> None:
        """Zoom out on a negative delta and in on a positive one.

        The Mandelbrot set also gains or loses iterations as it zooms.
        """
        is_mandelbrot = self.kind is FractalKind.MANDELBROT
        if ydelta < 0:
            self.zoom *= ZOOM_FACTOR
            if is_mandelbrot and self.max_iteration < _ITERATION_CEILING:
                self.max_iteration += _ITERATION_STEP_UP
        elif ydelta > 0:
            self.zoom /= ZOOM_FACTOR
            if is_mandelbrot and self.max_iteration > _ITERATION_FLOOR:
                self.max_iteration -= _ITERATION_STEP_DOWN

    def counts(self) -> np.ndarray:
        """Escape counts for every pixel, shape (height, width)."""
        if self.kind is FractalKind.MANDELBROT:
            return mandelbrot_counts(self.width, self.height, self.zoom, self.max_iteration)
        return julia_counts(self.width, self.height, self.zoom, self.c, self.max_iteration)

    def render(self) -> np.ndarray:
        """RGBA image of the view, shape (height, width, 4)."""
        inside = MANDELBROT_INSIDE_COLOR if self.kind is FractalKind.MANDELBROT else None
        return colorize(self.counts(), self.max_iteration, inside)