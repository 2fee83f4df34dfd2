"""Core algorithms for bezierdist.

This module contains the numerical algorithms for:

- Curve evaluation (De Casteljau subdivision, Bernstein basis)
- Projection of the nearest-point problem onto a Bezier-form polynomial
- Root isolation by recursive subdivision of a control polygon
- Distance and arc length queries

All functions are:
- Stateless (no module-level mutable state)
- Pure (no side effects besides debug logging)

Key functions:
- distance_from_curve: Parameter and distance of the nearest curve point
- nearest_point_on_curve: Nearest curve point and its parameter
- point_on_path: Evaluate a curve at a parameter
- get_length: Approximate arc length
- convert_to_bezier: Build the root-finding control polygon
- find_roots: Isolate roots of a Bezier-form polynomial
"""

from bezierdist.core.distance import (
    distance_from_curve,
    get_length,
    nearest_point_on_curve,
    point_on_path,
)
from bezierdist.core.roots import (
    FLATNESS_TOLERANCE,
    MAX_RECURSION,
    compute_x_intercept,
    convert_to_bezier,
    crossing_count,
    find_roots,
    is_flat_enough,
)

__all__ = [
    # Root finder
    "FLATNESS_TOLERANCE",
    "MAX_RECURSION",
    "compute_x_intercept",
    "convert_to_bezier",
    "crossing_count",
    # Distance API
    "distance_from_curve",
    "find_roots",
    "get_length",
    "is_flat_enough",
    "nearest_point_on_curve",
    "point_on_path",
]
