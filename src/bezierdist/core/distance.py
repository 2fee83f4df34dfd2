"""Distance and arc length queries on Bezier curves.

This module answers the two public questions of the library:
- How far is a point from a curve, and where on the curve is the nearest point
- How long is a curve

All functions are pure and stateless; identical inputs always produce
bit-identical outputs.
"""

import logging
from collections.abc import Sequence

from bezierdist.config import LENGTH_STEP, RootFinderConfig
from bezierdist.core._bezier import bezier, evaluate_bernstein
from bezierdist.core.roots import convert_to_bezier, find_roots
from bezierdist.domain import CurveDistance, NearestPoint, Point
from bezierdist.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def distance_from_curve(
    point: Point,
    curve: Sequence[Point],
    config: RootFinderConfig | None = None,
) -> CurveDistance:
    """Calculate the distance from a point to a curve.

    Every stationary point of the squared distance in [0, 1] is a candidate,
    and so are both endpoints. Candidates only replace the current best on a
    strict improvement, so the earliest candidate wins ties; the start point
    is considered first and the end point last.

    Args:
        point: Query point
        curve: Control points of the curve
        config: Root finder settings (defaults if None)

    Returns:
        CurveDistance with the parameter of the nearest point and the
        Euclidean distance to it

    Examples:
        >>> curve = [Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0)]
        >>> round(distance_from_curve(Point(1.5, 2), curve).distance, 6)
        2.0
    """
    if config is None:
        config = RootFinderConfig()

    degree = len(curve) - 1
    w = convert_to_bezier(point, curve)
    if any(p.y for p in w):
        candidates = find_roots(
            w,
            max_recursion=config.max_recursion,
            flatness_tolerance=config.flatness_tolerance,
        )
    else:
        # Identically zero: the curve is a single point, every parameter is equidistant
        candidates = []

    distance = (point - curve[0]).magnitude()
    location = 0.0
    for candidate in candidates:
        new_distance = (point - bezier(curve, candidate)).magnitude()
        if new_distance < distance:
            distance = new_distance
            location = candidate

    new_distance = (point - curve[degree]).magnitude()
    if new_distance < distance:
        distance = new_distance
        location = 1.0

    logger.debug(
        "Curve distance computed: %d candidates, location=%r, distance=%r",
        len(candidates),
        location,
        distance,
    )
    return CurveDistance(location=location, distance=distance)


def nearest_point_on_curve(
    point: Point,
    curve: Sequence[Point],
    config: RootFinderConfig | None = None,
) -> NearestPoint:
    """Find the point on a curve closest to a given point.

    Args:
        point: Query point
        curve: Control points of the curve
        config: Root finder settings (defaults if None)

    Returns:
        NearestPoint with the position on the curve and its parameter
    """
    result = distance_from_curve(point, curve, config)
    return NearestPoint(point=bezier(curve, result.location), location=result.location)


def point_on_path(curve: Sequence[Point], location: float) -> Point:
    """Evaluate a curve at a parameter using the Bernstein basis.

    Args:
        curve: Control points of the curve
        location: Curve parameter, 0 at the first and 1 at the last point

    Returns:
        Point on the curve
    """
    return evaluate_bernstein(curve, location)


def get_length(curve: Sequence[Point], step: float = LENGTH_STEP) -> float:
    """Approximate the arc length of a curve.

    Samples the curve at fixed parameter increments and sums the chord
    lengths between consecutive samples. The last increment is shortened so
    that sampling ends exactly at t=1.

    Args:
        curve: Control points of the curve
        step: Parameter increment between samples

    Returns:
        Length of the sampled polyline

    Raises:
        ConfigurationError: If step is not positive
    """
    if not step > 0:
        raise ConfigurationError("step", f"must be positive, got {step}")

    prev = point_on_path(curve, 0.0)
    tally = 0.0
    samples = 0
    location = 0.0
    while location < 1.0:
        samples += 1
        location = min(samples * step, 1.0)
        cur = point_on_path(curve, location)
        tally += cur.distance_to(prev)
        prev = cur

    logger.debug("Curve length computed: %d samples, length=%r", samples, tally)
    return tally
