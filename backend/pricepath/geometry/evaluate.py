# backend/pricepath/geometry/evaluate.py
from math import floor
from typing import NamedTuple, Tuple

from .cubic import solve_cubic
from .errors import CurveNotFoundError, NoRootError
from .path import Curve, Path
from .vector import Vector


class SelectedCurve(NamedTuple):
    from_: Vector
    curve: Curve


def round_to(value: float, precision: int = 0) -> float:
    """Round half up to `precision` decimal digits."""
    p = 10 ** precision
    return floor(value * p + 0.5) / p


def cubic_bezier(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    term = 1 - t
    return (term ** 3 * p0
            + 3 * t * term ** 2 * p1
            + 3 * t ** 2 * term * p2
            + t ** 3 * p3)


def path_domain(path: Path) -> Tuple[float, float]:
    """Smallest and largest x covered by the path's segment endpoints."""
    xs = [path.move.x] + [c.to.x for c in path.curves]
    return min(xs), max(xs)


def select_curve(path: Path, x: float) -> SelectedCurve:
    """
    Return the first segment whose x-range contains x.

    Segments may run in either direction along x. Assumes at most one
    segment covers any x; overlapping segments resolve to the first one.
    """
    start = path.move
    for c in path.curves:
        if start.x > c.to.x:
            contains = c.to.x <= x <= start.x
        else:
            contains = start.x <= x <= c.to.x
        if contains:
            return SelectedCurve(start, c)
        start = c.to
    raise CurveNotFoundError(x)


def cubic_bezier_y_for_x(x: float, a: Vector, b: Vector, c: Vector, d: Vector,
                         precision: int = 2) -> float:
    """
    y of the cubic Bezier (a, b, c, d) at the given x.

    Solves x(t) = x for t, rounds the roots to `precision` digits and uses
    the first one inside [0, 1] in solver order. For segments that are not
    monotonic in x this picks one of several valid answers.
    """
    pa = -a.x + 3 * b.x - 3 * c.x + d.x
    pb = 3 * a.x - 6 * b.x + 3 * c.x
    pc = -3 * a.x + 3 * b.x
    pd = a.x - x
    for root in solve_cubic(pa, pb, pc, pd):
        t = round_to(root, precision)
        if 0 <= t <= 1:
            return cubic_bezier(t, a.y, b.y, c.y, d.y)
    raise NoRootError(x)


def get_y_for_x(path: Path, x: float, precision: int = 2) -> float:
    start, curve = select_curve(path, x)
    return cubic_bezier_y_for_x(x, start, curve.c1, curve.c2, curve.to, precision)
