import numpy as np
import pytest

from fractview.sets import julia_counts, mandelbrot_counts, plane_coordinates


def test_plane_coordinates_shape_and_axes():
    x, y = plane_coordinates(4, 3, 1.0)
    assert x.shape == (3, 4)
    assert y.shape == (3, 4)
    assert list(x[0]) == [-2.0, -1.0, 0.0, 1.0]
    assert (x == x[0]).all()
    assert (y.T == y[:, 0]).all()


def test_plane_coordinates_scale_with_zoom():
    x1, y1 = plane_coordinates(8, 8, 1.0)
    x2, y2 = plane_coordinates(8, 8, 2.0)
    assert np.array_equal(x2, 2 * x1)
    assert np.array_equal(y2, 2 * y1)


def test_plane_coordinates_rejects_empty_image():
    with pytest.raises(ValueError):
        plane_coordinates(0, 4, 1.0)


def test_mandelbrot_counts_bounded():
    counts = mandelbrot_counts(16, 12, 1.0, 30)
    assert counts.shape == (12, 16)
    assert counts.min() >= 0
    assert counts.max() <= 30


def test_mandelbrot_origin_is_inside():
    counts = mandelbrot_counts(4, 4, 1.0, 40)
    assert counts[2, 2] == 40


def test_mandelbrot_corner_escapes_after_one_step():
    counts = mandelbrot_counts(4, 4, 1.0, 40)
    assert counts[0, 0] == 1


def test_mandelbrot_symmetric_about_real_axis():
    counts = mandelbrot_counts(8, 4, 1.0, 60)
    assert np.array_equal(counts[1], counts[3])


def test_mandelbrot_zero_iterations():
    counts = mandelbrot_counts(5, 5, 1.0, 0)
    assert (counts == 0).all()


def test_mandelbrot_lower_limit_is_clipped_higher_limit():
    low = mandelbrot_counts(10, 10, 1.0, 10)
    high = mandelbrot_counts(10, 10, 1.0, 50)
    assert np.array_equal(np.minimum(high, 10), low)


def test_mandelbrot_negative_limit_rejected():
    with pytest.raises(ValueError):
        mandelbrot_counts(4, 4, 1.0, -1)


def test_julia_zero_constant_matches_unit_disc():
    x, y = plane_coordinates(8, 8, 1.0)
    counts = julia_counts(8, 8, 1.0, 0j, 50)
    inside = x * x + y * y <= 1.0
    assert np.array_equal(counts == 50, inside)


def test_julia_bounded_and_accepts_real_constant():
    counts = julia_counts(10, 6, 1.0, -0.8, 25)
    assert counts.shape == (6, 10)
    assert counts.min() >= 0
    assert counts.max() <= 25


def test_julia_lower_limit_is_clipped_higher_limit():
    low = julia_counts(10, 10, 1.0, complex(-0.8, 0.156), 8)
    high = julia_counts(10, 10, 1.0, complex(-0.8, 0.156), 40)
    assert np.array_equal(np.minimum(high, 8), low)


def test_julia_negative_limit_rejected():
    with pytest.raises(ValueError):
        julia_counts(4, 4, 1.0, 0j, -5)