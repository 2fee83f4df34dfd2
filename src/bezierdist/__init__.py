"""bezierdist - Point-to-curve distance and arc length for Bezier curves.

bezierdist finds the point on a Bezier curve closest to an arbitrary 2D point
by projecting the distance-minimisation problem onto a Bezier-form polynomial
and isolating its roots with recursive subdivision. It also measures the arc
length of a curve by polyline sampling.

Example:
    >>> from bezierdist import BezierCurve, Point, distance_from_curve
    >>> curve = BezierCurve.from_coords([(0, 0), (1, 2), (2, 3), (4, 4)])
    >>> result = distance_from_curve(Point(1, 3), curve)
"""

from bezierdist.core import (
    distance_from_curve,
    get_length,
    nearest_point_on_curve,
    point_on_path,
)
from bezierdist.domain import BezierCurve, CurveDistance, NearestPoint, Point

__version__ = "0.1.0"

__all__ = [
    "BezierCurve",
    "CurveDistance",
    "NearestPoint",
    "Point",
    "__version__",
    "distance_from_curve",
    "get_length",
    "nearest_point_on_curve",
    "point_on_path",
]
