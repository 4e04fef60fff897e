"""Errors raised while reading and writing SVG geometries."""


class SvgError(ValueError):
    """Base class for all geosvg errors."""


class NumericParseError(SvgError):
    """A coordinate or attribute value could not be parsed as a number."""


class InvalidSvgError(SvgError):
    """Input is structurally invalid (missing attribute, no subpaths, ...)."""


class UnsupportedElementError(SvgError):
    """Input contains no supported SVG element."""


class CollectionForGeometryError(SvgError):
    """A single geometry was requested but the input resolved to several."""


class UnsupportedGeometryError(SvgError):
    """Geometry type cannot be written as SVG."""
