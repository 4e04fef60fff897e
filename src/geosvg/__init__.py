"""geosvg: Convert between SVG shapes and shapely geometries."""
from . import config, curves, cursor, errors, path, reader, writer
from .errors import (
    CollectionForGeometryError,
    InvalidSvgError,
    NumericParseError,
    SvgError,
    UnsupportedElementError,
    UnsupportedGeometryError,
)
from .reader import read, read_geometry, read_path, read_path_geometry
from .writer import to_path, to_svg

__all__ = [
    "config",
    "curves",
    "cursor",
    "errors",
    "path",
    "reader",
    "writer",
    "read",
    "read_geometry",
    "read_path",
    "read_path_geometry",
    "to_path",
    "to_svg",
    "SvgError",
    "NumericParseError",
    "InvalidSvgError",
    "UnsupportedElementError",
    "CollectionForGeometryError",
    "UnsupportedGeometryError",
]
