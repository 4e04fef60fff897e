"""Tests of the path module."""
from typing import Tuple

import geosvg.path
from geosvg.errors import InvalidSvgError, NumericParseError, SvgError
from geosvg.path import (
    ArcTo,
    ClosePath,
    CurveTo,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    SmoothCurveTo,
    SmoothQuadraticCurveTo,
    VerticalLineTo,
)
import pytest


@pytest.mark.parametrize(
    "s, xy",
    [
        ["1,-0.1", (1, -0.1)],
        ["1 -0.1", (1, -0.1)],
        ["1-0.1", (1, -0.1)],
        ["0.1.2", (0.1, 0.2)],
        ["1-1.2e-01", (1, -0.12)],
        ["1 1.2e+01", (1, 12)],
        ["1 1.2e01", (1, 12)],
        ["1 1.2e1", (1, 12)],
        ["+1 .5", (1, 0.5)],
        ["1. 2.", (1, 2)],
        ["60.e2-1.", (6000, -1)],
    ],
)
def test_parses_coordinate_formats(s: str, xy: Tuple[float, float]) -> None:
    """Parses all possible coordinate sequence formats."""
    commands = list(geosvg.path.parse(f"M {s}"))
    assert commands == [MoveTo(*xy)]


@pytest.mark.parametrize(
    "d, command",
    [
        ["M 1,2", MoveTo(1, 2)],
        ["L 1,2", LineTo(1, 2)],
        ["H 1", HorizontalLineTo(1)],
        ["V 2", VerticalLineTo(2)],
        ["C 1,2 3,4 5,6", CurveTo(1, 2, 3, 4, 5, 6)],
        ["S 3,4 5,6", SmoothCurveTo(3, 4, 5, 6)],
        ["Q 1,2 5,6", QuadraticCurveTo(1, 2, 5, 6)],
        ["T 5,6", SmoothQuadraticCurveTo(5, 6)],
        ["A 1 2 30 1 0 5,6", ArcTo(1, 2, 30, True, False, 5, 6)],
        ["Z", ClosePath()],
    ],
)
def test_parses_path_commands(d: str, command: geosvg.path.Command) -> None:
    """Parses all path commands, both absolute and relative."""
    assert list(geosvg.path.parse(d)) == [command]
    relative = command._replace(relative=True)
    assert list(geosvg.path.parse(d.lower())) == [relative]


def test_parses_commands_without_separators() -> None:
    """Parses commands that directly follow each other."""
    commands = list(geosvg.path.parse("M0 0L0 60ZM10 10h-5v5z"))
    assert commands == [
        MoveTo(0, 0),
        LineTo(0, 60),
        ClosePath(),
        MoveTo(10, 10),
        HorizontalLineTo(-5, relative=True),
        VerticalLineTo(5, relative=True),
        ClosePath(relative=True),
    ]


def test_repeats_implicit_commands() -> None:
    """Returns repeated argument groups as separate commands."""
    commands = list(geosvg.path.parse("L 1,1 2,2 Q 0,0 1,1 2,2 3,3"))
    assert commands == [
        LineTo(1, 1),
        LineTo(2, 2),
        QuadraticCurveTo(0, 0, 1, 1),
        QuadraticCurveTo(2, 2, 3, 3),
    ]


def test_repeats_moveto_as_lineto() -> None:
    """Returns argument groups following a moveto as linetos."""
    commands = list(geosvg.path.parse("m 1,1 2,2 3,3"))
    assert commands == [
        MoveTo(1, 1, relative=True),
        LineTo(2, 2, relative=True),
        LineTo(3, 3, relative=True),
    ]


def test_parses_empty_path() -> None:
    """Returns no commands for empty path data."""
    assert list(geosvg.path.parse("")) == []
    assert list(geosvg.path.parse("  \n ")) == []


@pytest.mark.parametrize(
    "d",
    [
        "X 0,0",
        "M 0,0 L 1",
        "M 0,0 C 1,1 2,2",
        "M 0,0 Z 1",
        "M",
        "0,0 L 1,1",
    ],
)
def test_errors_for_invalid_path(d: str) -> None:
    """Raises error if path has an invalid command or argument count."""
    with pytest.raises(InvalidSvgError):
        list(geosvg.path.parse(d))


@pytest.mark.parametrize("d", ["M 0,0 L 1,#", "M 0,0 L 1..2", "M 0 0 L 1 e"])
def test_errors_for_invalid_number(d: str) -> None:
    """Raises error if path has an invalid number."""
    with pytest.raises(NumericParseError):
        list(geosvg.path.parse(d))


def test_errors_are_value_errors() -> None:
    """Raises errors catchable as ValueError."""
    with pytest.raises(ValueError):
        list(geosvg.path.parse("X 0,0"))
    assert issubclass(NumericParseError, SvgError)
