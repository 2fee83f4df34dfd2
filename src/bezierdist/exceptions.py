"""Exception hierarchy for bezierdist."""


class BezierDistError(Exception):
    """Base exception for all bezierdist errors."""

    pass


class GeometryError(BezierDistError):
    """Errors related to curve geometry."""

    pass


class InvalidCurveError(GeometryError):
    """A curve was built from too few control points."""

    def __init__(self, point_count: int, reason: str) -> None:
        self.point_count = point_count
        self.reason = reason
        super().__init__(f"Invalid curve with {point_count} control points: {reason}")


class ConfigurationError(BezierDistError):
    """A numeric parameter is outside its accepted range."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for '{field}': {reason}")


class InputParseError(BezierDistError):
    """Text could not be parsed into a point or curve."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Could not parse '{text}': {reason}")
