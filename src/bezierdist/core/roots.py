"""Nearest-point root finding on Bezier curves.

The squared distance from a point P to a curve C(t) is stationary where
(C(t) - P) . C'(t) = 0. That dot product is itself a polynomial of degree
2n - 1, and this module writes it directly in Bezier form (``convert_to_bezier``)
so that its roots can be isolated by recursive subdivision of the control
polygon (``find_roots``):

- Crossing count: sign changes of the control ordinates bound the number of
  roots (variation diminishing property)
- Flatness test: once a polygon with a single crossing is flat enough, the
  chord's x-intercept is taken as the root
- Subdivision: anything else is split at t=0.5 and both halves are searched

A horizontal chord makes the intercept and flatness determinants zero. The
resulting infinities and NaNs propagate as IEEE arithmetic would produce them;
they are not trapped or corrected here.
"""

import logging
import math
from collections.abc import Sequence
from functools import lru_cache
from math import comb

from bezierdist.config.settings import FLATNESS_EXPONENT, MAX_RECURSION
from bezierdist.core._bezier import split
from bezierdist.domain import Point

logger = logging.getLogger(__name__)

FLATNESS_TOLERANCE = 2.0**-FLATNESS_EXPONENT


@lru_cache(maxsize=16)
def product_coefficients(degree: int) -> tuple[tuple[float, ...], ...]:
    """Coefficients that turn products of Bernstein terms into Bezier form.

    Entry [j][i] is C(n, i) * C(n - 1, j) / C(2n - 1, i + j), the weight of
    the product of the degree-n term i and the degree-(n - 1) term j.
    For cubics this is::

        [[1.0, 0.6, 0.3, 0.1],
         [0.4, 0.6, 0.6, 0.4],
         [0.1, 0.3, 0.6, 1.0]]

    Args:
        degree: Degree n of the curve

    Returns:
        n rows of n + 1 coefficients
    """
    higher = 2 * degree - 1
    return tuple(
        tuple(
            comb(degree, i) * comb(degree - 1, j) / comb(higher, i + j)
            for i in range(degree + 1)
        )
        for j in range(degree)
    )


def convert_to_bezier(point: Point, curve: Sequence[Point]) -> list[Point]:
    """Project the nearest-point problem onto a Bezier-form polynomial.

    The returned control polygon has degree 2n - 1. Its x coordinates are the
    uniform parameter samples k / (2n - 1); its y coordinates are the
    coefficients of (C(t) - P) . C'(t), whose roots in [0, 1] are the
    candidate parameters of the nearest point.

    Args:
        point: Query point P
        curve: Control points of a curve of degree n

    Returns:
        List of 2n control points of the projected polygon
    """
    degree = len(curve) - 1
    higher = 2 * degree - 1
    z = product_coefficients(degree)

    c = [p - point for p in curve]
    d = [(curve[i + 1] - curve[i]).scale(float(degree)) for i in range(degree)]
    cd_table = [[d[row].dot(c[col]) for col in range(degree + 1)] for row in range(degree)]

    ys = [0.0] * (higher + 1)
    n = degree
    m = degree - 1
    for k in range(n + m + 1):
        lb = max(0, k - m)
        ub = min(k, n)
        for i in range(lb, ub + 1):
            j = k - i
            ys[i + j] += cd_table[j][i] * z[j][i]

    return [Point(k / higher, ys[k]) for k in range(higher + 1)]


def crossing_count(w: Sequence[Point]) -> int:
    """Count sign changes of the control ordinates.

    A leading zero counts as negative, any later zero as positive.

    Args:
        w: Control polygon in Bezier form

    Returns:
        Number of times the y coordinate changes sign
    """
    crossings = 0
    old_sign = 1 if w[0].y > 0 else -1
    for p in w[1:]:
        sign = 1 if p.y >= 0 else -1
        if sign != old_sign:
            crossings += 1
        old_sign = sign
    return crossings


def _reciprocal(det: float) -> float:
    # IEEE 1/0 is a signed infinity rather than an exception.
    if det == 0.0:
        return math.copysign(math.inf, det)
    return 1.0 / det


def is_flat_enough(w: Sequence[Point], tolerance: float = FLATNESS_TOLERANCE) -> bool:
    """Check whether a control polygon is flat enough to stop subdividing.

    The polygon is bounded by two lines parallel to its chord, one through
    the interior point furthest above and one through the point furthest
    below. Both are intersected with y=0; the polygon is flat when the
    distance between the two intercepts is below the tolerance.

    Args:
        w: Control polygon in Bezier form
        tolerance: Maximum intercept band width

    Returns:
        True if the chord intercept is an accurate enough root estimate
    """
    first = w[0]
    last = w[-1]

    # Implicit chord equation: a*x + b*y + c = 0
    a = first.y - last.y
    b = last.x - first.x
    c = first.x * last.y - last.x * first.y

    max_distance_above = 0.0
    max_distance_below = 0.0
    for p in w[1:-1]:
        value = a * p.x + b * p.y + c
        if value > max_distance_above:
            max_distance_above = value
        elif value < max_distance_below:
            max_distance_below = value

    # Intersect both bounding lines with y=0 (a1=0, b1=1, c1=0)
    a1 = 0.0
    b1 = 1.0
    c1 = 0.0
    a2 = a
    b2 = b
    d_inv = _reciprocal(a1 * b2 - a2 * b1)

    c2 = c - max_distance_above
    intercept_1 = (b1 * c2 - b2 * c1) * d_inv
    c2 = c - max_distance_below
    intercept_2 = (b1 * c2 - b2 * c1) * d_inv

    left_intercept = min(intercept_1, intercept_2)
    right_intercept = max(intercept_1, intercept_2)
    error = right_intercept - left_intercept
    return error < tolerance


def compute_x_intercept(w: Sequence[Point]) -> float:
    """Find where the chord from the first to the last control point meets y=0."""
    first = w[0]
    last = w[-1]

    xlk = 1.0
    ylk = 0.0
    xnm = last.x - first.x
    ynm = last.y - first.y
    xmk = first.x
    ymk = first.y

    det_inv = _reciprocal(xnm * ylk - ynm * xlk)
    s = (xnm * ymk - ynm * xmk) * det_inv
    return xlk * s


def find_roots(
    w: Sequence[Point],
    depth: int = 0,
    *,
    max_recursion: int = MAX_RECURSION,
    flatness_tolerance: float = FLATNESS_TOLERANCE,
) -> list[float]:
    """Isolate the roots of a Bezier-form polynomial by recursive subdivision.

    Roots are returned in subdivision order: everything found in the left
    half precedes everything found in the right half. The list is not sorted
    numerically.

    Args:
        w: Control polygon in Bezier form (x coordinates carry the parameter)
        depth: Current recursion depth
        max_recursion: Depth at which a single crossing is accepted as-is
        flatness_tolerance: Intercept band width accepted as flat

    Returns:
        Parameters of the roots found in the polygon's domain
    """
    crossings = crossing_count(w)
    if crossings == 0:
        return []

    if crossings == 1:
        if depth >= max_recursion:
            logger.debug("Root finder reached maximum depth %d", depth)
            return [(w[0].x + w[-1].x) / 2.0]
        if is_flat_enough(w, flatness_tolerance):
            return [compute_x_intercept(w)]

    _, left, right = split(w, 0.5)
    left_roots = find_roots(
        left,
        depth + 1,
        max_recursion=max_recursion,
        flatness_tolerance=flatness_tolerance,
    )
    right_roots = find_roots(
        right,
        depth + 1,
        max_recursion=max_recursion,
        flatness_tolerance=flatness_tolerance,
    )
    return left_roots + right_roots
