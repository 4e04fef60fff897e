"""Read SVG shape elements and path data as shapely geometries."""
import inspect
import re
from typing import Iterable, List, Optional, Sequence, Tuple
import warnings
import xml.etree.ElementTree as ET

import shapely.geometry
from shapely.geometry.base import BaseGeometry

from . import config, path
from .cursor import Cursor, apply
from .errors import (
    CollectionForGeometryError,
    InvalidSvgError,
    NumericParseError,
    UnsupportedElementError,
)

Coordinate = Tuple[float, float]
Subpath = List[Coordinate]


# ---- Path data ---- #


def subpaths(commands: Iterable[path.Command], samples: int = None) -> List[Subpath]:
    """
    Trace path commands into subpaths of absolute coordinates.

    A new subpath is started at each moveto.
    A closepath does not repeat the first point if the subpath is already closed.

    Arguments:
        commands: Path commands
        samples: Number of parameter steps used to flatten curves.
            If `None`, uses :attr:`geosvg.config.samples`.

    Raises:
        InvalidSvgError: Path does not begin with a moveto.

    Example:
        >>> subpaths(path.parse('M 0,0 L 1,0 M 2,2 h 1 z'))
        [[(0.0, 0.0), (1.0, 0.0)], [(2.0, 2.0), (3.0, 2.0), (2.0, 2.0)]]
    """
    cursor = Cursor()
    paths: List[Subpath] = []
    for command in commands:
        if not paths and not isinstance(command, path.MoveTo):
            raise InvalidSvgError("Path data must begin with a moveto command")
        cursor, xy = apply(cursor, command, samples=samples)
        if isinstance(command, path.MoveTo):
            paths.append(xy)
        elif isinstance(command, path.ClosePath) and paths[-1][-1] == xy[0]:
            continue
        else:
            paths[-1].extend(xy)
    return paths


def classify(
    paths: Iterable[Subpath],
) -> Tuple[List[Subpath], List[Subpath], List[Subpath]]:
    """
    Sort subpaths into segments, chains, and rings.

    Subpaths without points are ignored, and those with a single point are dropped
    with a warning. Subpaths with two points are segments, and longer subpaths are
    rings if closed (first point equals last point) and chains otherwise.

    Returns:
        Segments, chains, and rings, each in input order.

    Example:
        >>> segments, chains, rings = classify([
        ...     [(0, 0), (1, 0)],
        ...     [(0, 0), (1, 0), (1, 1)],
        ...     [(0, 0), (1, 0), (1, 1), (0, 0)]
        ... ])
        >>> len(segments), len(chains), len(rings)
        (1, 1, 1)
    """
    segments, chains, rings = [], [], []
    for xy in paths:
        if not xy:
            continue
        if len(xy) == 1:
            warnings.warn(f"Dropping subpath with a single point: {xy[0]}")
        elif len(xy) == 2:
            segments.append(xy)
        elif xy[0] == xy[-1]:
            rings.append(xy)
        else:
            chains.append(xy)
    return segments, chains, rings


def _ring(xy: Subpath) -> Subpath:
    # Linear rings need 4 coordinates
    return [*xy, xy[-1]] if len(xy) == 3 else xy


def merge_rings(
    rings: Sequence[Subpath], holes: bool = None
) -> List[shapely.geometry.Polygon]:
    """
    Build polygons from rings.

    The first ring is the exterior of the first polygon.

    Arguments:
        rings: Closed subpaths
        holes: Whether additional rings become holes of (or new) polygons.
            If `None`, uses :attr:`geosvg.config.holes`.
            If `False`, additional rings are dropped with a warning.
            If `True`, each additional ring inside the exterior of an earlier
            polygon becomes a hole of that polygon, unless it lies inside one of
            that polygon's holes (an island). Otherwise it is the exterior of
            a new polygon.

    Example:
        >>> squares = [
        ...     [(0, 0), (9, 0), (9, 9), (0, 9), (0, 0)],
        ...     [(1, 1), (8, 1), (8, 8), (1, 8), (1, 1)],
        ...     [(2, 2), (7, 2), (7, 7), (2, 7), (2, 2)]
        ... ]
        >>> [len(p.interiors) for p in merge_rings(squares, holes=True)]
        [1, 0]
    """
    if holes is None:
        holes = config.holes
    if not rings:
        return []
    rings = [_ring(xy) for xy in rings]
    if not holes:
        if len(rings) > 1:
            warnings.warn(f"Dropping all but the first of {len(rings)} closed subpaths")
        return [shapely.geometry.Polygon(rings[0])]
    shells: List[shapely.geometry.Polygon] = []
    interiors: List[List[shapely.geometry.Polygon]] = []
    for ring in rings:
        candidate = shapely.geometry.Polygon(ring)
        for shell, inner in zip(shells, interiors):
            if shell.contains(candidate) and not any(
                hole.contains(candidate) for hole in inner
            ):
                inner.append(candidate)
                break
        else:
            shells.append(candidate)
            interiors.append([])
    return [
        shapely.geometry.Polygon(
            shell.exterior.coords, [hole.exterior.coords for hole in inner]
        )
        for shell, inner in zip(shells, interiors)
    ]


def assemble(
    segments: Sequence[Subpath],
    chains: Sequence[Subpath],
    polygons: Sequence[shapely.geometry.Polygon],
) -> shapely.geometry.GeometryCollection:
    """
    Combine segments, chains, and polygons into a geometry collection.

    The collection holds one geometry for each kind present, in the order
    segments, chains, polygons. Each is a single geometry
    (:class:`~shapely.geometry.LineString` or :class:`~shapely.geometry.Polygon`)
    if only one is present, and a multi-geometry
    (:class:`~shapely.geometry.MultiLineString`
    or :class:`~shapely.geometry.MultiPolygon`) otherwise.

    Raises:
        InvalidSvgError: No geometries.

    Example:
        >>> gc = assemble([[(0, 0), (1, 0)]], [], [])
        >>> [g.geom_type for g in gc.geoms]
        ['LineString']
        >>> segments = [[(0, 0), (1, 0)], [(0, 1), (1, 1)]]
        >>> chains = [[(0, 0), (1, 0), (2, 1)]]
        >>> gc = assemble(segments, chains, [])
        >>> [g.geom_type for g in gc.geoms]
        ['MultiLineString', 'LineString']
    """
    geometries: List[BaseGeometry] = []
    for lines in (segments, chains):
        if len(lines) == 1:
            geometries.append(shapely.geometry.LineString(lines[0]))
        elif lines:
            geometries.append(shapely.geometry.MultiLineString(list(lines)))
    if len(polygons) == 1:
        geometries.append(polygons[0])
    elif polygons:
        geometries.append(shapely.geometry.MultiPolygon(list(polygons)))
    if not geometries:
        raise InvalidSvgError("No geometries found")
    return shapely.geometry.GeometryCollection(geometries)


def read_path(
    d: str, samples: int = None, holes: bool = None
) -> shapely.geometry.GeometryCollection:
    """
    Read SVG path data as a geometry collection.

    See https://developer.mozilla.org/en-US/docs/Web/SVG/Attribute/d.

    Curves are flattened to a fixed number of points (see `samples`).
    Elliptical arcs are not supported.

    Arguments:
        d: Path data (e.g. 'M 0,0 L 0,1 1,1 Z')
        samples: Number of parameter steps used to flatten curves.
            If `None`, uses :attr:`geosvg.config.samples`.
        holes: Whether additional closed subpaths become holes of (or new) polygons.
            If `None`, uses :attr:`geosvg.config.holes`.

    Returns:
        Geometry collection, with one geometry for each kind of subpath present
        (segments, chains, and rings, in that order).

    Raises:
        InvalidSvgError: Path data is invalid or has no subpaths.
        NumericParseError: Path data contains an invalid number.

    Example:
        >>> gc = read_path('M 0,0 L 0,1 1,1 Z')
        >>> gc.geoms[0].geom_type
        'Polygon'
        >>> list(gc.geoms[0].exterior.coords)
        [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (0.0, 0.0)]
    """
    paths = subpaths(path.parse(d), samples=samples)
    if not paths:
        raise InvalidSvgError("Path data has no subpaths")
    segments, chains, rings = classify(paths)
    return assemble(segments, chains, merge_rings(rings, holes=holes))


def _single(gc: shapely.geometry.GeometryCollection) -> BaseGeometry:
    geoms = list(gc.geoms)
    if len(geoms) != 1:
        raise CollectionForGeometryError(
            f"Input resolved to a collection of {len(geoms)} geometries"
        )
    return geoms[0]


def read_path_geometry(d: str, samples: int = None, holes: bool = None) -> BaseGeometry:
    """
    Read SVG path data as a single geometry.

    Arguments are the same as for :func:`read_path`.

    Raises:
        CollectionForGeometryError: Path data resolves to multiple kinds of geometry.

    Example:
        >>> read_path_geometry('M 0,0 L 1,0 1,1').geom_type
        'LineString'
    """
    return _single(read_path(d, samples=samples, holes=holes))


# ---- Shape elements ---- #


def _strip_etree_namespaces(tree: ET.Element) -> None:
    """Strip namespaces from tags and attributes."""
    regex = re.compile(r"\{.*\}")
    for e in tree.iter():
        e.tag = regex.sub("", e.tag)
        e.attrib = {regex.sub("", key): value for key, value in e.attrib.items()}


def _num(x: Optional[str], name: str) -> float:
    if x is None:
        raise InvalidSvgError(f"Missing required attribute: {name}")
    try:
        return float(x)
    except ValueError as e:
        raise NumericParseError(f"Invalid number for attribute {name}: {x}") from e


def _points(points: Optional[str]) -> List[Coordinate]:
    if points is None:
        raise InvalidSvgError("Missing required attribute: points")
    numbers = path._numbers(points)
    if len(numbers) % 2:
        raise InvalidSvgError(f"Odd number of coordinates in point list: {points}")
    return list(path._chunks(numbers, 2))


def _from_path(
    d: str = None, samples: int = None, holes: bool = None
) -> shapely.geometry.GeometryCollection:
    if d is None:
        raise InvalidSvgError("Missing required attribute: d")
    return read_path(d, samples=samples, holes=holes)


def _from_polygon(points: str = None) -> shapely.geometry.Polygon:
    xy = _points(points)
    if xy and xy[0] != xy[-1]:
        xy.append(xy[0])
    if len(xy) < 4:
        raise InvalidSvgError(f"Polygon has fewer than 3 points: {points}")
    return shapely.geometry.Polygon(xy)


def _from_polyline(points: str = None) -> shapely.geometry.LineString:
    xy = _points(points)
    if len(xy) < 2:
        raise InvalidSvgError(f"Polyline has fewer than 2 points: {points}")
    return shapely.geometry.LineString(xy)


def _from_rect(
    x: str = None, y: str = None, width: str = None, height: str = None
) -> shapely.geometry.Polygon:
    x, y = _num(x, "x"), _num(y, "y")
    xmax, ymax = x + _num(width, "width"), y + _num(height, "height")
    if x > xmax or y > ymax:
        raise InvalidSvgError("Rectangle has negative width or height")
    return shapely.geometry.Polygon(
        [(x, y), (x, ymax), (xmax, ymax), (xmax, y), (x, y)]
    )


def _from_line(
    x1: str = None, y1: str = None, x2: str = None, y2: str = None
) -> shapely.geometry.LineString:
    start = _num(x1, "x1"), _num(y1, "y1")
    end = _num(x2, "x2"), _num(y2, "y2")
    return shapely.geometry.LineString([start, end])


# Element tag: attribute that must be present for the element to be read
ELEMENTS = {
    "path": "d",
    "polygon": "points",
    "polyline": "points",
    "rect": None,
    "line": None,
}


def from_element(tag: str, **attrs: str) -> BaseGeometry:
    """
    Read geometry from an element's tag and attributes.

    Arguments:
        tag: Element tag (e.g. 'path')
        **attrs: Element attributes, plus keyword arguments of :func:`read_path`
            (for tag 'path').

    Raises:
        UnsupportedElementError: Unsupported element tag.

    Example:
        >>> list(from_element('polyline', points='0,0 1,0 1,1').coords)
        [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
        >>> from_element('rect', x='0', y='1', width='1', height='2').bounds
        (0.0, 1.0, 1.0, 3.0)
    """
    method = globals().get("_from_" + tag) if tag in ELEMENTS else None
    if not method:
        raise UnsupportedElementError(f"Unsupported (or invalid) element tag: {tag}")
    args = inspect.getfullargspec(method).args
    return method(**{key: attrs[key] for key in attrs if key in args})


def read(
    svg: str, samples: int = None, holes: bool = None
) -> shapely.geometry.GeometryCollection:
    """
    Read an SVG shape element as a geometry collection.

    Only a single element is read: the first (in document order) `path` (with `d`),
    `polygon` (with `points`), `polyline` (with `points`), `rect`, or `line`.
    It may be nested inside other elements (e.g. `svg` or `g`).

    Arguments:
        svg: SVG markup (e.g. '<path d="M 0,0 L 1,1" />')
        samples: Number of parameter steps used to flatten curves.
            If `None`, uses :attr:`geosvg.config.samples`.
        holes: Whether additional closed subpaths become holes of (or new) polygons.
            If `None`, uses :attr:`geosvg.config.holes`.

    Returns:
        Geometry collection. For `path`, see :func:`read_path`.
        Otherwise, a single :class:`~shapely.geometry.Polygon` (`polygon`, `rect`)
        or :class:`~shapely.geometry.LineString` (`polyline`, `line`).

    Raises:
        InvalidSvgError: Invalid markup, missing attribute, or invalid geometry.
        NumericParseError: Invalid number.
        UnsupportedElementError: No supported element found.

    Example:
        >>> gc = read('<polygon points="0,0 1,0 1,1" />')
        >>> list(gc.geoms[0].exterior.coords)
        [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0)]
    """
    try:
        root = ET.fromstring(svg)
    except ET.ParseError as e:
        raise InvalidSvgError(f"Invalid SVG markup: {e}") from e
    _strip_etree_namespaces(root)
    for e in root.iter():
        if e.tag not in ELEMENTS:
            continue
        required = ELEMENTS[e.tag]
        if required and required not in e.attrib:
            continue
        if e.tag == "path":
            return read_path(e.attrib["d"], samples=samples, holes=holes)
        return shapely.geometry.GeometryCollection([from_element(e.tag, **e.attrib)])
    raise UnsupportedElementError("No supported SVG element found")


def read_geometry(svg: str, samples: int = None, holes: bool = None) -> BaseGeometry:
    """
    Read an SVG shape element as a single geometry.

    Arguments are the same as for :func:`read`.

    Raises:
        CollectionForGeometryError: Element resolves to multiple kinds of geometry.

    Example:
        >>> read_geometry('<line x1="0" y1="0" x2="1" y2="1" />').length
        1.4142135623730951
    """
    return _single(read(svg, samples=samples, holes=holes))
