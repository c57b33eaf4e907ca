import numpy as np
import pytest

from fractview.sets import julia_counts, mandelbrot_counts
from fractview.view import FractalKind, FractalView


def small_view(kind, **kwargs):
    return FractalView(kind, width=12, height=10, **kwargs)


def test_kind_accepts_letter():
    view = FractalView("M")
    assert view.kind is FractalKind.MANDELBROT
    assert FractalView("J").kind is FractalKind.JULIA


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        FractalView("X")


def test_scroll_down_zooms_out_and_caps_iterations():
    view = small_view(FractalKind.MANDELBROT)
    view.scroll(-1)
    assert view.zoom == pytest.approx(1.25)
    assert view.max_iteration == 512


def test_scroll_up_reduces_mandelbrot_iterations():
    view = small_view(FractalKind.MANDELBROT)
    view.scroll(1)
    assert view.zoom < 1.0
    assert view.max_iteration == 502


def test_scroll_round_trip_restores_zoom():
    view = small_view(FractalKind.MANDELBROT)
    view.scroll(2)
    view.scroll(-2)
    assert view.zoom == pytest.approx(1.0)


def test_iterations_stop_falling_at_floor():
    view = small_view(FractalKind.MANDELBROT)
    for _ in range(100):
        view.scroll(1)
    assert view.max_iteration == 2


def test_julia_iterations_unchanged_by_scroll():
    view = small_view(FractalKind.JULIA)
    view.scroll(1)
    view.scroll(1)
    view.scroll(-1)
    assert view.max_iteration == 512
    assert view.zoom == pytest.approx(1 / 1.25)


def test_zero_scroll_changes_nothing():
    view = small_view(FractalKind.MANDELBROT)
    view.scroll(0)
    assert view.zoom == 1.0
    assert view.max_iteration == 512


def test_mandelbrot_counts_follow_view_state():
    view = small_view(FractalKind.MANDELBROT, zoom=0.5, max_iteration=30)
    assert np.array_equal(view.counts(), mandelbrot_counts(12, 10, 0.5, 30))


def test_julia_counts_use_constant():
    view = small_view(FractalKind.JULIA, c=complex(-0.8, 0.156), max_iteration=30)
    assert np.array_equal(view.counts(), julia_counts(12, 10, 1.0, complex(-0.8, 0.156), 30))


def test_mandelbrot_render_paints_inside_blue():
    view = small_view(FractalKind.MANDELBROT, max_iteration=40)
    image = view.render()
    counts = view.counts()
    assert image.shape == (10, 12, 4)
    assert (image[..., 3] == 255).all()
    inside = image[counts == 40]
    assert len(inside) > 0
    assert (inside == [0, 0, 154, 255]).all()


def test_julia_render_paints_inside_black():
    view = small_view(FractalKind.JULIA, max_iteration=40)
    image = view.render()
    inside = image[view.counts() == 40]
    assert len(inside) > 0
    assert (inside == [0, 0, 0, 255]).all()