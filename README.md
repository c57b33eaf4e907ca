# fractview

A small window that draws the Mandelbrot set or a Julia set, 960 by 960
pixels, and lets you zoom with the mouse wheel.

## Installing

```
pip install .
```

This pulls in `numpy` for the iteration and `pygame` for the window.

## Running

Draw the Mandelbrot set:

```
fractview Mandelbrot
```

Draw a Julia set. With no numbers the constant is `0 + 0i`. Otherwise give
the real and imaginary parts of the constant:

```
fractview Julia
fractview Julia -0.8 0.156
```

A number may have one leading `+` or `-`, then digits and at most one `.`.
It must be shorter than 64 characters. If a number is well formed but breaks
one of these limits, the program prints a hint. For any argument it cannot
use, it prints the usage message and exits without opening a window. The
exit status is 0 if the number of arguments is wrong and 1 otherwise.

## Controls

- Scroll up to zoom in: the view narrows by a factor of 1.25. On the
  Mandelbrot set the iteration limit also drops by 10 while it is above 10.
- Scroll down to zoom out: the view widens by a factor of 1.25. On the
  Mandelbrot set the iteration limit also rises by 50 while it is below 512.
- Press Escape or close the window to quit.

The Mandelbrot view draws points that never escape in dark blue, RGBA
`(0, 0, 154, 255)`. The Julia view draws them black. Every other point is
coloured by how many iterations it took to escape.

## Using it as a library

```python
from fractview.view import FractalKind, FractalView

view = FractalView(FractalKind.JULIA, c=complex(-0.8, 0.156), width=320, height=320)
counts = view.counts()   # escape counts, shape (height, width)
pixels = view.render()   # uint8 RGBA array, shape (height, width, 4)
view.scroll(-1.0)        # zoom out one step
```

The library modules:

- `fractview.sets` has `plane_coordinates`, `mandelbrot_counts` and
  `julia_counts`, which return the raw escape counts.
- `fractview.palette` turns counts into colours with `iteration_color` and
  `colorize`. `pixel_color` packs RGBA into one 32-bit value.
- `fractview.numbers` parses and checks the numeric arguments with
  `parse_float`, `is_valid_number` and `sign_of`.
- `fractview.strtools` has small string helpers that follow the classic C
  string routines: `atoi`, `itoa`, `split`, `strtrim`, `strnstr`, `strncmp`,
  `substr`, `strchr`, `strrchr`, `strlcpy` and `strlcat`.

## What it does not do

The window only zooms around the centre of the plane. It has no panning, no
colour-scheme switching and no way to save an image. To get the pixels, call
`FractalView.render()` from Python.

## Tests

```
pip install .[test]
pytest
```