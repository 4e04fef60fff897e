"""Flatten Bézier curves into polylines."""
from typing import Sequence, Tuple, Union

import numpy as np

from . import config

Coordinate = Tuple[float, float]
Points = Union[Sequence[Coordinate], np.ndarray]


def interpolate(points: Points, t: Union[float, np.ndarray]) -> np.ndarray:
    """
    Evaluate a Bézier curve with De Casteljau's algorithm.

    The control polygon is reduced by repeated linear interpolation between
    consecutive points until a single point remains.

    Arguments:
        points: Control points (n, 2), including the start and end points.
            Three points describe a quadratic curve, four a cubic curve.
        t: Curve parameter(s) in [0, 1].

    Returns:
        Point (2, ) for a scalar `t`, or points (m, 2) for `t` of length m.

    Example:
        >>> interpolate([(0, 0), (1, 2), (2, 0)], 0.5).tolist()
        [1.0, 1.0]
        >>> interpolate([(0, 0), (0, 1), (1, 1), (1, 0)], [0, 1]).tolist()
        [[0.0, 0.0], [1.0, 0.0]]
    """
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 2 or len(points) < 2:
        raise ValueError("Control points must have shape (n >= 2, 2)")
    scalar = np.ndim(t) == 0
    t = np.atleast_1d(np.asarray(t, dtype=float))[:, None, None]
    # (m, n, 2): one copy of the control polygon per parameter value
    p = np.broadcast_to(points, (len(t), *points.shape))
    while p.shape[1] > 1:
        p = (1 - t) * p[:, :-1] + t * p[:, 1:]
    p = p[:, 0]
    return p[0] if scalar else p


def flatten(points: Points, samples: int = None) -> np.ndarray:
    """
    Sample the interior of a Bézier curve at regular parameter steps.

    Points are returned for t = k / `samples`, k = 1, ..., `samples` - 1.
    Neither the start point (t = 0) nor the end point (t = 1) is included.

    Arguments:
        points: Control points (n, 2), including the start and end points.
        samples: Number of parameter steps.
            If `None`, uses :attr:`geosvg.config.samples`.

    Returns:
        Points (`samples` - 1, 2) in order of increasing t.

    Raises:
        ValueError: Number of parameter steps is less than 2.

    Example:
        >>> flatten([(0, 0), (2, 2), (4, 0)], samples=2).tolist()
        [[2.0, 1.0]]
        >>> flatten([(0, 0), (4, 0)], samples=4).tolist()
        [[1.0, 0.0], [2.0, 0.0], [3.0, 0.0]]
    """
    if samples is None:
        samples = config.samples
    if samples < 2:
        raise ValueError("Number of samples must be at least 2")
    t = np.arange(1, samples) / samples
    return interpolate(points, t)
