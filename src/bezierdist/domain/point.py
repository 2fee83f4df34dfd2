"""Two-dimensional point and vector arithmetic.

Points double as vectors: the difference of two points is a Point holding the
displacement. Every operation returns a new value; instances are never mutated.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or free vector) in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Point":
        """Return this vector multiplied by a scalar.

        Args:
            factor: Scale factor

        Returns:
            Scaled vector
        """
        return Point(self.x * factor, self.y * factor)

    def dot(self, other: "Point") -> float:
        """Calculate the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        """Calculate the Euclidean length of this vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_to(self, other: "Point") -> float:
        """Calculate the Euclidean distance to another point."""
        return (self - other).magnitude()

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


def lerp(a: Point, b: Point, t: float) -> Point:
    """Linearly interpolate between two points.

    Args:
        a: Point returned at t=0
        b: Point returned at t=1
        t: Interpolation ratio (not clamped)

    Returns:
        (1 - t) * a + t * b
    """
    return Point((1.0 - t) * a.x + t * b.x, (1.0 - t) * a.y + t * b.y)
