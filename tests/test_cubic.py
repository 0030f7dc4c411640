"""Test the closed-form polynomial solver."""

from math import cos, pi

import pytest
from pricepath.geometry.cubic import clip_unit, cuberoot, solve_cubic


def _residual(a, b, c, d, t):
    return a * t**3 + b * t**2 + c * t + d


def test_cube_root_of_eight():
    """t^3 = 8 has the single real root 2."""
    roots = solve_cubic(1, 0, 0, -8)
    assert roots == pytest.approx([2.0])


def test_quadratic_fallback():
    """A vanishing cubic term falls back to the quadratic formula."""
    roots = solve_cubic(0, 1, -3, 2)
    assert sorted(roots) == pytest.approx([1.0, 2.0])


def test_linear_fallback():
    """Vanishing cubic and quadratic terms leave a linear equation."""
    assert solve_cubic(0, 0, 2, -3) == pytest.approx([1.5])


def test_degenerate_is_empty():
    """Nothing left to solve gives no roots."""
    assert solve_cubic(0, 0, 0, 5) == []
    assert solve_cubic(0, 0, 0, 0) == []


def test_tiny_leading_coefficients_are_ignored():
    """Coefficients under the tolerance count as zero."""
    assert sorted(solve_cubic(1e-9, 1, -3, 2)) == pytest.approx([1.0, 2.0])


def test_quadratic_double_root():
    """(t - 3)^2 has one double root."""
    assert solve_cubic(0, 1, -6, 9) == pytest.approx([3.0])


def test_quadratic_no_real_roots():
    """t^2 + 1 has no real roots."""
    assert solve_cubic(0, 1, 0, 1) == []


def test_three_real_roots():
    """(t - 1)(t - 2)(t - 3) is solved after shifting by b/3a."""
    roots = solve_cubic(1, -6, 11, -6)
    assert len(roots) == 3
    assert sorted(roots) == pytest.approx([1.0, 2.0, 3.0])


def test_trigonometric_emission_order():
    """Roots come out in the u*cos(t - 2k*pi/3) order, unsorted."""
    # u^3 - 3u + 1 = 0, already depressed
    roots = solve_cubic(1, 0, -3, 1)
    expected = [2 * cos(2 * pi / 9 - 2 * pi * k / 3) for k in range(3)]
    assert roots == pytest.approx(expected)


def test_depressed_without_constant():
    """q = 0: t^3 - 4t = 0 gives 0 and +/-2."""
    assert solve_cubic(1, 0, -4, 0) == pytest.approx([0.0, 2.0, -2.0])


def test_depressed_without_constant_positive_p():
    """q = 0 with p > 0 only has the zero root."""
    assert solve_cubic(1, 0, 4, 0) == pytest.approx([0.0])


def test_double_root_branch():
    """(t - 1)^2 (t + 2) has a vanishing discriminant."""
    roots = solve_cubic(1, 0, -3, 2)
    assert sorted(roots) == pytest.approx([-2.0, 1.0])


def test_one_real_root_cardano():
    """t^3 + t + 1 has one real root via Cardano's formula."""
    roots = solve_cubic(1, 0, 1, 1)
    assert len(roots) == 1
    assert _residual(1, 0, 1, 1, roots[0]) == pytest.approx(0, abs=1e-9)


@pytest.mark.parametrize(
    "coeffs",
    (
        (2.0, -3.0, -11.0, 6.0),
        (-51.0, 3.0, 216.0, -57.0),
        (1.0, 2.0, 3.0, 4.0),
        (-4.0, 6.0, 0.5, -1.0),
    ),
)
def test_roots_satisfy_equation(coeffs):
    """Every returned root is a root of the original, undepressed cubic."""
    roots = solve_cubic(*coeffs)
    assert roots
    for r in roots:
        assert _residual(*coeffs, r) == pytest.approx(0, abs=1e-6)


def test_cuberoot_keeps_sign():
    """Cube roots of negative numbers are negative."""
    assert cuberoot(-27) == pytest.approx(-3.0)
    assert cuberoot(27) == pytest.approx(3.0)
    assert cuberoot(0) == 0


@pytest.mark.parametrize(
    "value,expected",
    ((1.0000000000000002, 1.0), (-1.0000000000000002, -1.0), (0.5, 0.5), (-1.0, -1.0)),
)
def test_clip_unit(value, expected):
    """acos arguments nudged past +/-1 by rounding are pulled back."""
    assert clip_unit(value) == expected


def test_three_real_roots_near_double_root():
    """(t - 1)(t - 1.001)(t + 2): the acos argument sits right at the edge."""
    roots = solve_cubic(1, -0.001, -3.001, 2.002)
    assert len(roots) == 3
    assert sorted(roots) == pytest.approx([-2.0, 1.0, 1.001], abs=1e-5)
