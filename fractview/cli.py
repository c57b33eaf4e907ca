"""Command line: pick a fractal from the arguments and show it in a window."""

from __future__ import annotations

import sys

import numpy as np

from fractview.numbers import is_valid_number, parse_float
from fractview.view import FractalKind, FractalView

WINDOW_TITLE = "Fractal"
USAGE_MESSAGE = (
    "Something went wrong.\n"
    "Do you wanna try it again?\n"
    "Valid arguments:'Mandelbrot' OR 'Julia (num1) (num2)'"
)
_FRAME_RATE = 60


class UsageError(ValueError):
    """Command-line arguments that name no drawable fractal."""

    def __init__(self, message: str = USAGE_MESSAGE, exit_status: int = 1) -> None:
        super().__init__(message)
        self.exit_status = exit_status


def parse_arguments(argv) -> FractalView:
    """Build a view from ``Mandelbrot``, ``Julia`` or ``Julia <re> <im>``."""
    args = list(argv)
    if len(args) not in (1, 3):
        raise UsageError(USAGE_MESSAGE, exit_status=0)
    name = args[0]
    if len(args) == 1:
        if name not in ("Mandelbrot", "Julia"):
            raise UsageError()
        return FractalView(FractalKind(name[0]))
    checks = [is_valid_number(arg) for arg in args[1:]]
    if name != "Julia" or not all(checks):
        raise UsageError()
    return FractalView(FractalKind.JULIA, c=complex(parse_float(args[1]), parse_float(args[2])))


def run_window(view: FractalView) -> None:
    """Show ``view`` until the window is closed or Escape is pressed.

    The mouse wheel zooms; the image is redrawn after every change.
    """
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((view.width, view.height))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        dirty = True
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP) and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEWHEEL and event.y:
                    view.scroll(event.y)
                    dirty = True
            if running and dirty:
                rgb = np.ascontiguousarray(view.render()[..., :3].transpose(1, 0, 2))
                screen.blit(pygame.surfarray.make_surface(rgb), (0, 0))
                pygame.display.flip()
                dirty = False
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    """Parse the arguments and open the fractal window."""
    args = sys.argv[1:] if argv is None else argv
    try:
        view = parse_arguments(args)
    except UsageError as error:
        print(error)
        return error.exit_status
    run_window(view)
    return 0


if __name__ == "__main__":
    sys.exit(main())