"""Internal Bezier curve evaluation algorithms.

This is an internal module containing the evaluators used by the root finder
and the distance API. Not intended for public use.
"""

from collections.abc import Sequence
from math import comb

from bezierdist.domain import Point, lerp


def de_casteljau(curve: Sequence[Point], t: float) -> list[list[Point]]:
    """Build the De Casteljau triangle of a curve at parameter t.

    Row 0 holds the control points; every following row interpolates between
    neighbouring entries of the previous row, so row i has n + 1 - i entries.

    Args:
        curve: Control points of a curve of degree n
        t: Curve parameter (not clamped to [0, 1])

    Returns:
        The n + 1 rows of the triangle; the last row holds the curve point
    """
    degree = len(curve) - 1
    table = [list(curve)]
    for i in range(1, degree + 1):
        prev = table[i - 1]
        table.append([lerp(prev[j], prev[j + 1], t) for j in range(degree - i + 1)])
    return table


def bezier(curve: Sequence[Point], t: float) -> Point:
    """Evaluate a curve of any degree at parameter t."""
    return de_casteljau(curve, t)[-1][0]


def split(curve: Sequence[Point], t: float) -> tuple[Point, list[Point], list[Point]]:
    """Evaluate a curve at t and subdivide it there.

    Args:
        curve: Control points of a curve of degree n
        t: Curve parameter to split at

    Returns:
        Tuple of (point, left, right) where left and right are degree-n
        control polygons covering [0, t] and [t, 1] of the original curve
    """
    table = de_casteljau(curve, t)
    degree = len(curve) - 1
    left = [table[j][0] for j in range(degree + 1)]
    right = [table[degree - j][j] for j in range(degree + 1)]
    return table[degree][0], left, right


def bernstein(degree: int, index: int, t: float) -> float:
    """Bernstein basis polynomial b(index, degree) at t."""
    return comb(degree, index) * (1.0 - t) ** (degree - index) * t**index


def evaluate_bernstein(curve: Sequence[Point], t: float) -> Point:
    """Evaluate a curve as an explicit weighted sum of Bernstein polynomials.

    Independent of the De Casteljau path; both agree to floating tolerance.

    Args:
        curve: Control points of a curve of degree n
        t: Curve parameter

    Returns:
        Point on the curve
    """
    degree = len(curve) - 1
    x = 0.0
    y = 0.0
    for i, p in enumerate(curve):
        weight = bernstein(degree, i, t)
        x += p.x * weight
        y += p.y * weight
    return Point(x, y)
