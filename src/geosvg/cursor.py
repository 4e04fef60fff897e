"""Resolve path commands to absolute coordinates."""
from typing import List, NamedTuple, Optional, Tuple
import warnings

from . import curves
from .path import (
    ArcTo,
    ClosePath,
    Command,
    CurveTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    SmoothCurveTo,
    SmoothQuadraticCurveTo,
    VerticalLineTo,
)

Coordinate = Tuple[float, float]
ORIGIN: Coordinate = (0.0, 0.0)


class Cursor(NamedTuple):
    """
    Pen state between path commands.

    Attributes:
        current: Current point, or `None` before the first command
            (or after an unsupported command).
        start: First point of the current subpath.
        control: Last control point of the previous curve command, if any.
    """

    current: Optional[Coordinate] = None
    start: Optional[Coordinate] = None
    control: Optional[Coordinate] = None


def _resolve(x: float, y: float, relative: bool, base: Coordinate) -> Coordinate:
    if relative:
        return base[0] + x, base[1] + y
    return x, y


def _reflect(point: Coordinate, control: Optional[Coordinate]) -> Coordinate:
    """
    Reflect a control point through a point.

    Example:
        >>> _reflect((1, 1), (0, 0))
        (2, 2)
        >>> _reflect((1, 1), None)
        (1, 1)
    """
    if control is None:
        return point
    return 2 * point[0] - control[0], 2 * point[1] - control[1]


def _curve(controls: List[Coordinate], samples: int = None) -> List[Coordinate]:
    interior = [(x, y) for x, y in curves.flatten(controls, samples=samples).tolist()]
    return interior + [controls[-1]]


def apply(
    cursor: Cursor, command: Command, samples: int = None
) -> Tuple[Cursor, List[Coordinate]]:
    """
    Apply a path command to the pen.

    Arguments:
        cursor: Pen state before the command
        command: Path command
        samples: Number of parameter steps used to flatten curves.
            If `None`, uses :attr:`geosvg.config.samples`.

    Returns:
        Pen state after the command, and the absolute coordinates drawn by the
        command (for a moveto, the first point of a new subpath).

    Raises:
        TypeError: Object is not a path command.

    Example:
        >>> cursor, xy = apply(Cursor(), MoveTo(1, 2))
        >>> xy
        [(1, 2)]
        >>> cursor, xy = apply(cursor, HorizontalLineTo(3, relative=True))
        >>> xy
        [(4, 2)]
        >>> cursor, xy = apply(cursor, ClosePath())
        >>> xy, cursor.current
        ([(1, 2)], (1, 2))
    """
    base = cursor.current or ORIGIN
    if isinstance(command, MoveTo):
        xy = _resolve(command.x, command.y, command.relative, base)
        return Cursor(current=xy, start=xy), [xy]
    if isinstance(command, LineTo):
        xy = _resolve(command.x, command.y, command.relative, base)
        return cursor._replace(current=xy, control=None), [xy]
    if isinstance(command, HorizontalLineTo):
        x = base[0] + command.x if command.relative else command.x
        xy = x, base[1]
        return cursor._replace(current=xy, control=None), [xy]
    if isinstance(command, VerticalLineTo):
        y = base[1] + command.y if command.relative else command.y
        xy = base[0], y
        return cursor._replace(current=xy, control=None), [xy]
    if isinstance(command, CurveTo):
        c1 = _resolve(command.x1, command.y1, command.relative, base)
        c2 = _resolve(command.x2, command.y2, command.relative, base)
        xy = _resolve(command.x, command.y, command.relative, base)
        points = _curve([base, c1, c2, xy], samples=samples)
        return cursor._replace(current=xy, control=c2), points
    if isinstance(command, SmoothCurveTo):
        c1 = _reflect(base, cursor.control)
        c2 = _resolve(command.x2, command.y2, command.relative, base)
        xy = _resolve(command.x, command.y, command.relative, base)
        points = _curve([base, c1, c2, xy], samples=samples)
        return cursor._replace(current=xy, control=c2), points
    if isinstance(command, QuadraticCurveTo):
        c1 = _resolve(command.x1, command.y1, command.relative, base)
        xy = _resolve(command.x, command.y, command.relative, base)
        points = _curve([base, c1, xy], samples=samples)
        return cursor._replace(current=xy, control=c1), points
    if isinstance(command, SmoothQuadraticCurveTo):
        c1 = _reflect(base, cursor.control)
        xy = _resolve(command.x, command.y, command.relative, base)
        points = _curve([base, c1, xy], samples=samples)
        return cursor._replace(current=xy, control=c1), points
    if isinstance(command, ClosePath):
        xy = cursor.start or base
        return cursor._replace(current=xy, control=None), [xy]
    if isinstance(command, ArcTo):
        # NOTE: Arcs are not drawn and the position after the arc is lost.
        warnings.warn(
            "Elliptical arc commands are not supported: "
            "following relative coordinates are resolved against the origin"
        )
        return cursor._replace(current=None, control=None), []
    raise TypeError(f"Not a path command: {command!r}")
