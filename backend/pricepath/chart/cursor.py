# backend/pricepath/chart/cursor.py

"""
Chart cursor helpers.

A drag on the chart reports an x in canvas coordinates. The cursor snaps to
the price path at that x, and the header turns the cursor's y back into a
price (y = 0 is the top of the canvas, i.e. the highest price).
"""

from typing import NamedTuple

from ..geometry.evaluate import get_y_for_x, path_domain
from ..geometry.interpolate import interpolate
from ..geometry.path import Path


class CursorPosition(NamedTuple):
    x: float
    y: float
    price: float


def clamp_x(path: Path, x: float) -> float:
    """Keep x inside the path so evaluation never runs off either end."""
    lo, hi = path_domain(path)
    return min(max(x, lo), hi)


def cursor_y(path: Path, x: float, precision: int = 2) -> float:
    return get_y_for_x(path, clamp_x(path, x), precision)


def price_for_y(y: float, size: float, min_price: float, max_price: float) -> float:
    return interpolate(y, [size, 0], [min_price, max_price])


def locate(path: Path, x: float, size: float, min_price: float, max_price: float,
           precision: int = 2) -> CursorPosition:
    x = clamp_x(path, x)
    y = get_y_for_x(path, x, precision)
    return CursorPosition(x, y, price_for_y(y, size, min_price, max_price))
