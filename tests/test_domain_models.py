"""Tests for domain models to verify they work correctly."""

import math

import pytest

from bezierdist.domain import BezierCurve, CurveDistance, NearestPoint, Point, lerp
from bezierdist.exceptions import GeometryError, InvalidCurveError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2


class TestVectorOperations:
    """Tests for the vector arithmetic on Point."""

    def test_difference(self) -> None:
        assert Point(5.0, 7.0) - Point(2.0, 3.0) == Point(3.0, 4.0)

    def test_sum(self) -> None:
        assert Point(5.0, 7.0) + Point(2.0, 3.0) == Point(7.0, 10.0)

    def test_scale_returns_new_point(self) -> None:
        """Scaling leaves the original untouched."""
        p = Point(1.5, -2.0)
        scaled = p.scale(3.0)
        assert scaled == Point(4.5, -6.0)
        assert p == Point(1.5, -2.0)

    def test_dot(self) -> None:
        assert Point(1.0, 2.0).dot(Point(3.0, 4.0)) == 11.0

    def test_dot_perpendicular(self) -> None:
        assert Point(1.0, 0.0).dot(Point(0.0, 5.0)) == 0.0

    def test_magnitude(self) -> None:
        assert Point(3.0, 4.0).magnitude() == 5.0

    def test_distance(self) -> None:
        assert Point(1.0, 1.0).distance_to(Point(4.0, 5.0)) == 5.0
        assert Point(4.0, 5.0).distance_to(Point(1.0, 1.0)) == 5.0

    def test_lerp(self) -> None:
        a = Point(0.0, 0.0)
        b = Point(4.0, 8.0)
        assert lerp(a, b, 0.0) == a
        assert lerp(a, b, 1.0) == b
        assert lerp(a, b, 0.25) == Point(1.0, 2.0)

    def test_lerp_extrapolates(self) -> None:
        """Ratios outside [0, 1] are not clamped."""
        assert lerp(Point(0.0, 0.0), Point(1.0, 1.0), 2.0) == Point(2.0, 2.0)


class TestBezierCurve:
    """Tests for BezierCurve class."""

    def test_curve_creation(self) -> None:
        """Test curve creation from coordinates."""
        curve = BezierCurve.from_coords([(0, 0), (1, 2), (2, 3), (4, 4)])
        assert len(curve) == 4
        assert curve.degree == 3
        assert curve[1] == Point(1.0, 2.0)
        assert curve.start == Point(0.0, 0.0)
        assert curve.end == Point(4.0, 4.0)

    def test_curve_is_sequence(self) -> None:
        """Curves iterate and slice like their control point list."""
        points = [Point(0, 0), Point(1, 0), Point(2, 0)]
        curve = BezierCurve.from_points(points)
        assert list(curve) == points
        assert list(curve[1:]) == points[1:]
        assert curve[-1] == points[-1]
        assert Point(1, 0) in curve

    def test_line_is_degree_one(self) -> None:
        curve = BezierCurve.from_coords([(0, 0), (1, 1)])
        assert curve.degree == 1

    @pytest.mark.parametrize("coords", [[], [(0, 0)]])
    def test_too_few_points(self, coords: list[tuple[float, float]]) -> None:
        """Curves need at least two control points."""
        with pytest.raises(InvalidCurveError) as exc_info:
            BezierCurve.from_coords(coords)
        assert exc_info.value.point_count == len(coords)
        assert isinstance(exc_info.value, GeometryError)

    def test_degenerate_coordinates_accepted(self) -> None:
        """Coordinates are not validated, only the point count."""
        curve = BezierCurve.from_coords([(0, 0), (0, 0), (math.inf, 0), (0, 0)])
        assert curve.degree == 3

    def test_curve_serialization(self) -> None:
        """Test curve serialization and deserialization."""
        c1 = BezierCurve.from_coords([(0, 0), (1, 2), (2, 3), (4, 4)])
        c2 = BezierCurve.from_dict(c1.to_dict())
        assert c2 == c1

    def test_curve_immutable(self) -> None:
        curve = BezierCurve.from_coords([(0, 0), (1, 1)])
        with pytest.raises(AttributeError):
            curve.points = ()  # type: ignore


class TestResults:
    """Tests for result value types."""

    def test_curve_distance_to_dict(self) -> None:
        result = CurveDistance(location=0.25, distance=3.0)
        assert result.to_dict() == {"location": 0.25, "distance": 3.0}

    def test_nearest_point_to_dict(self) -> None:
        result = NearestPoint(point=Point(1.0, 2.0), location=0.5)
        assert result.to_dict() == {"point": {"x": 1.0, "y": 2.0}, "location": 0.5}
