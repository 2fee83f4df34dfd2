"""Domain models for bezierdist.

This module contains the value types shared by the algorithms and the CLI.
All models are immutable frozen dataclasses and carry no state between calls.

Key classes:
- Point: A 2D point that also serves as a vector
- BezierCurve: Ordered control points of a Bezier curve
- CurveDistance: Nearest parameter and distance from a point to a curve
- NearestPoint: Nearest position on a curve and its parameter
"""

from bezierdist.domain.curve import BezierCurve
from bezierdist.domain.point import Point, lerp
from bezierdist.domain.result import CurveDistance, NearestPoint

__all__: list[str] = [
    # Core types
    "Point",
    "BezierCurve",
    # Results
    "CurveDistance",
    "NearestPoint",
    # Helpers
    "lerp",
]
