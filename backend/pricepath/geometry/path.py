# backend/pricepath/geometry/path.py
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from .vector import Vector

# move.x, move.y, then c1.x, c1.y, c2.x, c2.y, to.x, to.y per curve
COORDS_PER_CURVE = 6


@dataclass(frozen=True)
class Curve:
    """Cubic Bezier segment; it starts where the previous one ends."""
    c1: Vector
    c2: Vector
    to: Vector


@dataclass(frozen=True)
class Path:
    move: Vector
    curves: Tuple[Curve, ...] = ()
    close: bool = False

    @property
    def topology(self) -> Tuple[int, bool]:
        return len(self.curves), self.close

    def to_array(self) -> np.ndarray:
        """Flatten every coordinate of the path into a 1D float array."""
        points = [self.move]
        for c in self.curves:
            points.extend((c.c1, c.c2, c.to))
        return np.concatenate([p.to_array() for p in points])

    @classmethod
    def from_array(cls, coords, close: bool = False) -> "Path":
        """Inverse of to_array()."""
        values = [float(v) for v in coords]
        if len(values) < 2 or (len(values) - 2) % COORDS_PER_CURVE:
            raise ValueError(f"cannot build a path from {len(values)} coordinates")
        curves = []
        for j in range(2, len(values), COORDS_PER_CURVE):
            x1, y1, x2, y2, x, y = values[j:j + COORDS_PER_CURVE]
            curves.append(Curve(Vector(x1, y1), Vector(x2, y2), Vector(x, y)))
        return cls(Vector(values[0], values[1]), tuple(curves), close)


@dataclass
class PathBuilder:
    """
    Accumulates a path while it is being constructed.

    build() hands out a frozen Path; later calls on the builder never touch
    paths that were already built.
    """
    move: Vector
    curves: List[Curve] = field(default_factory=list)
    closed: bool = False

    def add_curve(self, curve: Curve) -> "PathBuilder":
        self.curves.append(curve)
        return self

    def close(self) -> "PathBuilder":
        self.closed = True
        return self

    def build(self) -> Path:
        return Path(self.move, tuple(self.curves), self.closed)


def create_path(move: Vector) -> PathBuilder:
    return PathBuilder(move)


def add_curve(path: PathBuilder, curve: Curve) -> None:
    path.add_curve(curve)


def close(path: PathBuilder) -> None:
    path.close()
