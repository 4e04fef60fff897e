"""Global configuration options."""

samples = 100
"""
Number of parameter steps used to flatten a curve.

Each curve command contributes `samples - 1` interpolated points plus its end point,
so at least 2 are required.
"""

holes = False
"""
Whether to promote additional closed subpaths of a path to polygon holes.

If `False`, only the first closed subpath of a path becomes a polygon
and any others are dropped (with a warning).
If `True`, each additional closed subpath inside an earlier polygon becomes one of
its holes, and any other starts a new polygon.
"""
