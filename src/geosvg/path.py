"""Tokenize SVG path data into a stream of typed commands."""
import re
from typing import Iterable, Iterator, List, NamedTuple, Sequence, Union

from .errors import InvalidSvgError, NumericParseError

COORD_REGEX = re.compile(
    r"(?:\+|\-)?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[Ee][+-]?[0-9]+)?"
)
# Any letter but the exponent marker starts a command
COMMAND_REGEX = re.compile(r"([a-df-zA-DF-Z])([^a-df-zA-DF-Z]*)")
SEPARATOR_REGEX = re.compile(r"[\s,]*")


class MoveTo(NamedTuple):
    """moveto: M (x,y)+ | m (dx,dy)+"""

    x: float
    y: float
    relative: bool = False


class LineTo(NamedTuple):
    """lineto: L (x,y)+ | l (dx,dy)+"""

    x: float
    y: float
    relative: bool = False


class HorizontalLineTo(NamedTuple):
    """lineto: H (x)+ | h (dx)+"""

    x: float
    relative: bool = False


class VerticalLineTo(NamedTuple):
    """lineto: V (y)+ | v (dy)+"""

    y: float
    relative: bool = False


class CurveTo(NamedTuple):
    """curveto: C (x1,y1 x2,y2 x,y)+ | c (dx1,dy1 dx2,dy2 dx,dy)+"""

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False


class SmoothCurveTo(NamedTuple):
    """curveto: S (x2,y2 x,y)+ | s (dx2,dy2 dx,dy)+"""

    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False


class QuadraticCurveTo(NamedTuple):
    """curveto: Q (x1,y1 x,y)+ | q (dx1,dy1 dx,dy)+"""

    x1: float
    y1: float
    x: float
    y: float
    relative: bool = False


class SmoothQuadraticCurveTo(NamedTuple):
    """curveto: T (x,y)+ | t (dx,dy)+"""

    x: float
    y: float
    relative: bool = False


class ArcTo(NamedTuple):
    """arcto: A (rx ry x-axis-rotation large-arc-flag sweep-flag x,y)+ | a (...)+"""

    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float
    relative: bool = False


class ClosePath(NamedTuple):
    """closepath: Z | z"""

    relative: bool = False


Command = Union[
    MoveTo,
    LineTo,
    HorizontalLineTo,
    VerticalLineTo,
    CurveTo,
    SmoothCurveTo,
    QuadraticCurveTo,
    SmoothQuadraticCurveTo,
    ArcTo,
    ClosePath,
]

COMMANDS = {
    "M": MoveTo,
    "L": LineTo,
    "H": HorizontalLineTo,
    "V": VerticalLineTo,
    "C": CurveTo,
    "S": SmoothCurveTo,
    "Q": QuadraticCurveTo,
    "T": SmoothQuadraticCurveTo,
    "A": ArcTo,
    "Z": ClosePath,
}


def _chunks(x: Sequence, n: int) -> Iterable:
    """
    Generate a zip that returns sequential chunks.

    Incomplete trailing chunks (of length < n) are ignored.

    Arguments:
        x: Sequence from which to build chunks
        n: Number of items in each chunk

    Returns:
        Zip object that returns sequential tuples of length `n`
            (x0, ..., xn-1), (xn, ..., x2n-1), ...
    """
    each = iter(x)
    return zip(*([each] * n))


def _numbers(seq: str) -> List[float]:
    """
    Parse the numbers of a command's argument sequence.

    Raises:
        NumericParseError: Sequence contains characters that are not numbers.

    Example:
        >>> _numbers(' 1,-0.1 ')
        [1.0, -0.1]
        >>> _numbers('0.1.2')
        [0.1, 0.2]
        >>> _numbers('1-1.2e-01')
        [1.0, -0.12]
    """
    rest = COORD_REGEX.sub(" ", seq)
    if not SEPARATOR_REGEX.fullmatch(rest):
        raise NumericParseError(f"Invalid number in path data: {seq.strip()}")
    return [float(s) for s in COORD_REGEX.findall(seq)]


def parse(d: str) -> Iterator[Command]:
    """
    Generate the commands of SVG path data.

    See https://developer.mozilla.org/en-US/docs/Web/SVG/Attribute/d.

    Repeated argument groups are returned as separate commands of the same kind,
    except that those following a moveto are returned as linetos.

    Arguments:
        d: Path data (e.g. 'M 0,0 l 1,0 0,1 z')

    Raises:
        InvalidSvgError: Unknown command or wrong number of arguments.
        NumericParseError: Argument is not a number.

    Example:
        >>> [type(cmd).__name__ for cmd in parse('M 0,0 1,0 v 1 z')]
        ['MoveTo', 'LineTo', 'VerticalLineTo', 'ClosePath']
        >>> list(parse('m 1 2'))
        [MoveTo(x=1.0, y=2.0, relative=True)]
    """
    start = COMMAND_REGEX.search(d)
    head = d[: start.start()] if start else d
    if head.strip():
        raise InvalidSvgError(f"Path data must begin with a command: {head.strip()}")
    for match in COMMAND_REGEX.finditer(d):
        cmd, seq = match.groups()
        kind = COMMANDS.get(cmd.upper())
        if not kind:
            raise InvalidSvgError(f"Invalid command encountered: {cmd}")
        relative = cmd.islower()
        params = _numbers(seq)
        if kind is ClosePath:
            if params:
                raise InvalidSvgError(f"Command {cmd} takes no arguments")
            yield ClosePath(relative)
            continue
        n = len(kind._fields) - 1
        if not params or len(params) % n:
            raise InvalidSvgError(
                f"Command {cmd} requires a multiple of {n} arguments "
                f"(got {len(params)})"
            )
        for i, args in enumerate(_chunks(params, n)):
            if kind is MoveTo and i > 0:
                yield LineTo(*args, relative)
            elif kind is ArcTo:
                rx, ry, rotation, large_arc, sweep, x, y = args
                flags = bool(large_arc), bool(sweep)
                yield ArcTo(rx, ry, rotation, *flags, x, y, relative)
            else:
                yield kind(*args, relative)
