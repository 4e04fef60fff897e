"""Tests of the curves module."""
import geosvg.config
import geosvg.curves
import numpy as np
import pytest


def test_flattens_to_interior_samples() -> None:
    """Returns samples - 1 points, excluding both curve endpoints."""
    points = [(0, 0), (0, 30), (30, 40), (40, 40)]
    xy = geosvg.curves.flatten(points, samples=10)
    assert xy.shape == (9, 2)
    assert not any(np.all(xy == p, axis=1).any() for p in (points[0], points[-1]))


def test_flattens_with_configured_samples(monkeypatch: pytest.MonkeyPatch) -> None:
    """Uses the configured number of samples by default."""
    points = [(0, 0), (1, 1), (2, 0)]
    assert len(geosvg.curves.flatten(points)) == 99
    monkeypatch.setattr(geosvg.config, "samples", 4)
    assert len(geosvg.curves.flatten(points)) == 3


def test_flattens_line_evenly() -> None:
    """Samples a straight line at regular intervals."""
    xy = geosvg.curves.flatten([(0, 0), (10, 20)], samples=5)
    np.testing.assert_allclose(xy, [(2, 4), (4, 8), (6, 12), (8, 16)])


def test_flattens_quadratic_curve() -> None:
    """Matches the Bernstein form of a quadratic Bézier curve."""
    p = np.array([(0, 0), (30, 40), (40, 40)], dtype=float)
    t = (np.arange(1, 50) / 50)[:, None]
    expected = (1 - t) ** 2 * p[0] + 2 * (1 - t) * t * p[1] + t ** 2 * p[2]
    np.testing.assert_allclose(geosvg.curves.flatten(p, samples=50), expected)


def test_flattens_cubic_curve() -> None:
    """Matches the Bernstein form of a cubic Bézier curve."""
    p = np.array([(0, 0), (0, 30), (30, 40), (40, 40)], dtype=float)
    t = (np.arange(1, 100) / 100)[:, None]
    expected = (
        (1 - t) ** 3 * p[0]
        + 3 * (1 - t) ** 2 * t * p[1]
        + 3 * (1 - t) * t ** 2 * p[2]
        + t ** 3 * p[3]
    )
    np.testing.assert_allclose(geosvg.curves.flatten(p, samples=100), expected)


def test_interpolates_single_parameter() -> None:
    """Evaluates a curve at a single parameter value."""
    points = [(0, 0), (0, 1), (1, 1), (1, 0)]
    np.testing.assert_allclose(geosvg.curves.interpolate(points, 0.5), (0.5, 0.75))
    np.testing.assert_array_equal(geosvg.curves.interpolate(points, 0), (0, 0))
    np.testing.assert_array_equal(geosvg.curves.interpolate(points, 1), (1, 0))


@pytest.mark.parametrize("samples", [-1, 0, 1])
def test_errors_for_invalid_samples(samples: int) -> None:
    """Raises error if a curve would have no interior points."""
    with pytest.raises(ValueError):
        geosvg.curves.flatten([(0, 0), (1, 1), (2, 0)], samples=samples)


@pytest.mark.parametrize("points", [[(0, 0)], [(0, 0, 0), (1, 1, 1)], [0, 1]])
def test_errors_for_invalid_control_points(points: list) -> None:
    """Raises error if control points are not an (n >= 2, 2) array."""
    with pytest.raises(ValueError):
        geosvg.curves.interpolate(points, 0.5)
