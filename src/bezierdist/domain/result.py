"""Result types returned by the distance API."""

from dataclasses import dataclass
from typing import Any

from bezierdist.domain.point import Point


@dataclass(frozen=True, slots=True)
class CurveDistance:
    """Closest approach of a point to a curve.

    Attributes:
        location: Curve parameter of the nearest point, in [0, 1]
        distance: Euclidean distance from the query point to the curve there
    """

    location: float
    distance: float

    def to_dict(self) -> dict[str, Any]:
        return {"location": self.location, "distance": self.distance}


@dataclass(frozen=True, slots=True)
class NearestPoint:
    """Nearest point on a curve together with its parameter.

    Attributes:
        point: Position on the curve
        location: Curve parameter of that position, in [0, 1]
    """

    point: Point
    location: float

    def to_dict(self) -> dict[str, Any]:
        return {"point": self.point.to_dict(), "location": self.location}
