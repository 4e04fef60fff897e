"""Write shapely geometries as SVG elements and path data."""
from typing import Callable, Dict, Iterable, Sequence, Tuple, Union

from shapely.geometry.base import BaseGeometry
from typing_extensions import TypedDict

from .errors import UnsupportedGeometryError

Number = Union[int, float]
Bounds = Tuple[Number, Number, Number, Number]
Box = TypedDict("Box", {"x": str, "y": str, "width": str, "height": str})


def _num(x: Number) -> str:
    """
    Format a number as concisely as possible.

    Example:
        >>> _num(60.0)
        '60'
        >>> _num(10.5)
        '10.5'
        >>> _num(-0.0)
        '0'
    """
    x = float(x)
    if x.is_integer():
        return str(int(x))
    return repr(x)


def _xy_to_points(xy: Iterable[Sequence[Number]]) -> str:
    return " ".join(f"{_num(x)},{_num(y)}" for x, y, *_ in xy)


def _xy_to_path(xy: Iterable[Sequence[Number]]) -> str:
    return "L".join(f"{_num(x)} {_num(y)}" for x, y, *_ in xy)


def _box(bounds: Bounds) -> Box:
    xmin, ymin, xmax, ymax = bounds
    return {
        "x": _num(xmin),
        "y": _num(ymin),
        "width": _num(xmax - xmin),
        "height": _num(ymax - ymin),
    }


# ---- Display (elements) ---- #


def _polygon_to_svg(geom: BaseGeometry) -> str:
    d = _polygon_to_path(geom)
    return f'<path d="{d}"/>' if d else ""


def _line_string_to_svg(geom: BaseGeometry) -> str:
    if geom.is_empty:
        return ""
    return f'<polyline points="{_xy_to_points(geom.coords)}"/>'


def _multi_to_svg(geom: BaseGeometry) -> str:
    return "\n".join(filter(None, (to_svg(g) for g in geom.geoms)))


# ---- Fragment (path data) ---- #


def _polygon_to_path(geom: BaseGeometry) -> str:
    if geom.is_empty:
        return ""
    rings = [geom.exterior, *geom.interiors]
    return "M" + "M".join(_xy_to_path(ring.coords) for ring in rings)


def _line_string_to_path(geom: BaseGeometry) -> str:
    if geom.is_empty:
        return ""
    return "M" + _xy_to_path(geom.coords)


def _multi_to_path(geom: BaseGeometry) -> str:
    return "".join(to_path(g) for g in geom.geoms)


WRITERS: Dict[str, Tuple[Callable[[BaseGeometry], str], ...]] = {
    "Polygon": (_polygon_to_svg, _polygon_to_path),
    "LineString": (_line_string_to_svg, _line_string_to_path),
    "LinearRing": (_line_string_to_svg, _line_string_to_path),
    "MultiPolygon": (_multi_to_svg, _multi_to_path),
    "MultiLineString": (_multi_to_svg, _multi_to_path),
    "GeometryCollection": (_multi_to_svg, _multi_to_path),
}


def _writer(geom: BaseGeometry, mode: int) -> Callable[[BaseGeometry], str]:
    writers = WRITERS.get(geom.geom_type)
    if not writers:
        raise UnsupportedGeometryError(
            f"Unsupported (or invalid) geometry type: {geom.geom_type}"
        )
    return writers[mode]


def to_svg(geom: BaseGeometry) -> str:
    """
    Write geometry as SVG elements.

    Polygons are written as `path` elements (rings joined by moveto, points joined
    by lineto, without closepath) and lines as `polyline` elements.
    Multi-geometries and collections are written as one element per member,
    separated by newlines.

    Arguments:
        geom: Geometry

    Returns:
        SVG elements, or an empty string for an empty geometry.

    Raises:
        UnsupportedGeometryError: Geometry type cannot be written (e.g. Point).

    Example:
        >>> from shapely.geometry import LineString, Polygon
        >>> to_svg(Polygon([(1, 1), (4, 1), (4, 4), (1, 4)]))
        '<path d="M1 1L4 1L4 4L1 4L1 1"/>'
        >>> to_svg(LineString([(11, 21), (31.5, 34)]))
        '<polyline points="11,21 31.5,34"/>'
    """
    return _writer(geom, 0)(geom)


def to_path(geom: BaseGeometry) -> str:
    """
    Write geometry as SVG path data.

    Each line and polygon ring starts with its own moveto, so the path data of
    multi-geometries and collections are simply concatenated.

    Arguments:
        geom: Geometry

    Returns:
        Path data, or an empty string for an empty geometry.

    Raises:
        UnsupportedGeometryError: Geometry type cannot be written (e.g. Point).

    Example:
        >>> from shapely.geometry import LineString, MultiLineString
        >>> to_path(MultiLineString([[(0, 0), (1, 0)], [(2, 0), (2, 1.5)]]))
        'M0 0L1 0M2 0L2 1.5'
    """
    return _writer(geom, 1)(geom)


def line_to_svg(geom: BaseGeometry) -> str:
    """
    Write a line as an SVG `line` element.

    Uses the first and last points of the line.

    Example:
        >>> from shapely.geometry import LineString
        >>> line_to_svg(LineString([(0, 1), (2, 3)]))
        '<line x1="0" y1="1" x2="2" y2="3"/>'
    """
    if geom.is_empty:
        return ""
    (x1, y1, *_), (x2, y2, *_) = geom.coords[0], geom.coords[-1]
    return (
        f'<line x1="{_num(x1)}" y1="{_num(y1)}" x2="{_num(x2)}" y2="{_num(y2)}"/>'
    )


def line_to_path(geom: BaseGeometry) -> str:
    """
    Write a line as SVG path data from its first to its last point.

    Example:
        >>> from shapely.geometry import LineString
        >>> line_to_path(LineString([(0, 1), (2, 3)]))
        'M0 1L2 3'
    """
    if geom.is_empty:
        return ""
    return "M" + _xy_to_path([geom.coords[0], geom.coords[-1]])


def rect_to_svg(bounds: Bounds) -> str:
    """
    Write a bounding box as an SVG `rect` element.

    Arguments:
        bounds: Box bounds (xmin, ymin, xmax, ymax), as returned by
            :attr:`shapely.geometry.base.BaseGeometry.bounds`.

    Example:
        >>> rect_to_svg((0, 1, 2, 4))
        '<rect x="0" y="1" width="2" height="3"/>'
    """
    box = _box(bounds)
    attrib = " ".join(f'{key}="{value}"' for key, value in box.items())
    return f"<rect {attrib}/>"


def rect_to_path(bounds: Bounds) -> str:
    """
    Write a bounding box as closed SVG path data.

    Arguments:
        bounds: Box bounds (xmin, ymin, xmax, ymax).

    Example:
        >>> rect_to_path((0, 1, 2, 4))
        'M0 1L0 4L2 4L2 1Z'
    """
    xmin, ymin, xmax, ymax = bounds
    xy = [(xmin, ymin), (xmin, ymax), (xmax, ymax), (xmax, ymin)]
    return "M" + _xy_to_path(xy) + "Z"
