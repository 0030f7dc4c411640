"""Test the chart cursor helpers."""

import pytest
from pricepath.chart.cursor import clamp_x, cursor_y, locate, price_for_y
from pricepath.geometry.svg import parse

SIZE = 300.0


@pytest.fixture
def path():
    return parse("M0,300 C50,250 100,100 150,150 C200,200 250,50 300,0")


def test_clamp_x(path):
    """Drag positions are kept inside the path."""
    assert clamp_x(path, -20) == 0
    assert clamp_x(path, 120) == 120
    assert clamp_x(path, 400) == 300


def test_cursor_y_off_chart(path):
    """Dragging past either end sticks to the end points."""
    assert cursor_y(path, -50) == pytest.approx(300)
    assert cursor_y(path, 1e6) == pytest.approx(0)


@pytest.mark.parametrize(
    "y,expected", ((0.0, 2000.0), (SIZE, 1000.0), (SIZE / 2, 1500.0), (-10.0, 2000.0))
)
def test_price_for_y(y, expected):
    """Top of the canvas is the highest price, bottom the lowest."""
    assert price_for_y(y, SIZE, 1000.0, 2000.0) == pytest.approx(expected)


def test_locate(path):
    """The cursor position combines clamped x, path y and price."""
    pos = locate(path, 150, SIZE, 1000.0, 2000.0)
    assert pos.x == 150
    assert pos.y == pytest.approx(150)
    assert pos.price == pytest.approx(1500)
