"""Parsing of points and curves given as command-line text."""

import math

from bezierdist.domain import BezierCurve, Point
from bezierdist.exceptions import InputParseError, InvalidCurveError


def parse_point(text: str) -> Point:
    """Parse an ``x,y`` pair into a point.

    Args:
        text: Coordinates separated by a comma, whitespace allowed

    Returns:
        Parsed point

    Raises:
        InputParseError: If the text is not two finite numbers

    Examples:
        >>> parse_point("1.5, -2")
        Point(x=1.5, y=-2.0)
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise InputParseError(text, "expected two comma-separated coordinates")

    try:
        x, y = (float(part) for part in parts)
    except ValueError as e:
        raise InputParseError(text, "coordinates must be numbers") from e

    if not (math.isfinite(x) and math.isfinite(y)):
        raise InputParseError(text, "coordinates must be finite")

    return Point(x, y)


def parse_curve(texts: list[str]) -> BezierCurve:
    """Parse a list of ``x,y`` pairs into a curve.

    Args:
        texts: Control points in order

    Returns:
        Parsed curve

    Raises:
        InputParseError: If a point is malformed or there are too few points
    """
    points = [parse_point(text) for text in texts]
    try:
        return BezierCurve.from_points(points)
    except InvalidCurveError as e:
        raise InputParseError(" ".join(texts), e.reason) from e
