# backend/pricepath/geometry/errors.py


class PathGeometryError(ValueError):
    """Base class for everything the geometry engine reports to callers."""


class CurveNotFoundError(PathGeometryError):
    """No segment of the path covers the requested x."""

    def __init__(self, x: float):
        self.x = x
        super().__init__(f"No curve found at {x}")


class NoRootError(PathGeometryError):
    """The segment has no Bezier parameter in [0, 1] for the requested x."""

    def __init__(self, x: float):
        self.x = x
        super().__init__(f"No curve parameter in [0, 1] for x={x}")


class TopologyMismatchError(PathGeometryError):
    """Paths being interpolated differ in curve count or closedness."""


class InterpolationRangeError(PathGeometryError):
    """Input and output ranges cannot be used for interpolation."""


class PathParseError(PathGeometryError):
    """The path description could not be turned into a Path."""
