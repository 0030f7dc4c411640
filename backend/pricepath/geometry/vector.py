# backend/pricepath/geometry/vector.py
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vector:
    """A point (or offset) in the chart plane."""
    x: float
    y: float

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)


def vec(x: float, y: float) -> Vector:
    return Vector(float(x), float(y))
