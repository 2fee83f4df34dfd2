"""Bezier curve control polygon."""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, overload

from bezierdist.domain.point import Point
from bezierdist.exceptions import InvalidCurveError


@dataclass(frozen=True, slots=True)
class BezierCurve(Sequence[Point]):
    """A Bezier curve defined by its ordered control points.

    The degree is fixed by the number of control points minus one. The curve
    behaves as a read-only sequence of its control points, so it can be passed
    anywhere a plain list of points is accepted.

    Attributes:
        points: Control points, first and last lie on the curve
    """

    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise InvalidCurveError(
                len(self.points), "a Bezier curve needs at least 2 control points"
            )

    @property
    def degree(self) -> int:
        """Polynomial degree of the curve."""
        return len(self.points) - 1

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    def __len__(self) -> int:
        return len(self.points)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Point]: ...

    def __getitem__(self, index: int | slice) -> Point | Sequence[Point]:
        return self.points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BezierCurve":
        """Build a curve from any iterable of points."""
        return cls(points=tuple(points))

    @classmethod
    def from_coords(cls, coords: Iterable[tuple[float, float]]) -> "BezierCurve":
        """Build a curve from (x, y) pairs.

        Args:
            coords: Control point coordinates in order

        Returns:
            BezierCurve instance

        Raises:
            InvalidCurveError: If fewer than 2 coordinates are given
        """
        return cls(points=tuple(Point(float(x), float(y)) for x, y in coords))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the control point list
        """
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BezierCurve":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a curve

        Returns:
            BezierCurve instance
        """
        return cls(points=tuple(Point.from_dict(p) for p in data["points"]))
