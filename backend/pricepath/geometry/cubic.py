# backend/pricepath/geometry/cubic.py
from math import acos, cos, pi, sqrt
from typing import List

EPSILON = 1e-8


def cuberoot(x: float) -> float:
    """Real cube root that keeps the sign of x."""
    y = abs(x) ** (1.0 / 3.0)
    return -y if x < 0 else y


def clip_unit(v: float) -> float:
    """Clamp v to [-1, 1]; rounding can push an acos argument just outside it."""
    return max(-1.0, min(1.0, v))


def _solve_linear(a: float, b: float) -> List[float]:
    if abs(a) < EPSILON:
        return []
    return [-b / a]


def _solve_quadratic(a: float, b: float, c: float) -> List[float]:
    if abs(a) < EPSILON:
        return _solve_linear(b, c)

    D = b * b - 4 * a * c
    if abs(D) < EPSILON:
        return [-b / (2 * a)]
    if D > 0:
        r = sqrt(D)
        return [(-b + r) / (2 * a), (-b - r) / (2 * a)]
    return []


def solve_cubic(a: float, b: float, c: float, d: float) -> List[float]:
    """
    Real roots of a*t^3 + b*t^2 + c*t + d = 0.

    Leading coefficients below EPSILON drop the equation to a quadratic, then
    to a linear one; an empty list means there is no usable root. Roots are
    returned in the order the closed-form branches produce them, not sorted.
    """
    if abs(a) < EPSILON:
        return _solve_quadratic(b, c, d)

    # depressed cubic u^3 + p*u + q = 0 with t = u - b/3a
    p = (3 * a * c - b * b) / (3 * a * a)
    q = (2 * b * b * b - 9 * a * b * c + 27 * a * a * d) / (27 * a * a * a)

    if abs(p) < EPSILON:
        roots = [cuberoot(-q)]
    elif abs(q) < EPSILON:
        roots = [0.0] + ([sqrt(-p), -sqrt(-p)] if p < 0 else [])
    else:
        D = q * q / 4 + p * p * p / 27
        if abs(D) < EPSILON:
            roots = [-1.5 * q / p, 3 * q / p]
        elif D > 0:
            w = cuberoot(-q / 2 - sqrt(D))
            roots = [w - p / (3 * w)]
        else:
            # three real roots; D < 0 implies p < 0
            u = 2 * sqrt(-p / 3)
            t = acos(clip_unit(3 * q / p / u)) / 3
            k = 2 * pi / 3
            roots = [u * cos(t), u * cos(t - k), u * cos(t - 2 * k)]

    shift = b / (3 * a)
    return [r - shift for r in roots]
