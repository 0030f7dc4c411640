# backend/pricepath/geometry/interpolate.py
from enum import Enum
from typing import Sequence

import numpy as np

from .errors import InterpolationRangeError, TopologyMismatchError
from .path import Path
from .svg import serialize


class Extrapolation(str, Enum):
    CLAMP = "clamp"
    EXTEND = "extend"
    IDENTITY = "identity"


def _segment(value: float, input_range: Sequence[float]) -> int:
    i = 0
    for k in range(1, len(input_range) - 1):
        if value >= input_range[k]:
            i = k
    return i


def _check_ranges(input_range, n_outputs: int) -> None:
    if len(input_range) < 2:
        raise InterpolationRangeError(
            f"input range needs at least 2 stops, got {len(input_range)}"
        )
    if len(input_range) != n_outputs:
        raise InterpolationRangeError(
            f"input range has {len(input_range)} stops but output range has {n_outputs}"
        )


def _interpolate_segment(value, x0, x1, y0, y1, extrapolation):
    """Linear map of value from [x0, x1] onto [y0, y1]; y0/y1 may be arrays."""
    if x1 - x0 == 0:
        return y0
    progress = (value - x0) / (x1 - x0)
    # exact at both stops, so a mix at 0 or 1 reproduces the input path
    val = (1.0 - progress) * y0 + progress * y1
    if extrapolation == Extrapolation.EXTEND:
        return val

    coef = np.where(y1 >= y0, 1.0, -1.0)
    below = coef * val < coef * y0
    above = coef * val > coef * y1
    if extrapolation == Extrapolation.IDENTITY:
        return np.where(below | above, value, val)
    return np.where(below, y0, np.where(above, y1, val))


def interpolate(value: float, input_range: Sequence[float], output_range,
                extrapolation: Extrapolation = Extrapolation.CLAMP):
    """
    Piecewise-linear interpolation of value across input_range -> output_range.

    output_range is either a sequence of numbers or a 2D array whose rows are
    the outputs at each input stop; rows are interpolated element-wise.
    Outside the outer stops the extrapolation policy decides the result:
    CLAMP holds the edge value, EXTEND keeps the edge segment's slope and
    IDENTITY returns value itself.
    """
    outputs = np.asarray(output_range, dtype=np.float64)
    _check_ranges(input_range, outputs.shape[0])
    extrapolation = Extrapolation(extrapolation)

    i = _segment(value, input_range)
    out = _interpolate_segment(
        value, input_range[i], input_range[i + 1], outputs[i], outputs[i + 1], extrapolation
    )
    if outputs.ndim == 1:
        return float(out)
    return np.asarray(out, dtype=np.float64)


def _check_topology(paths: Sequence[Path]) -> None:
    expected = paths[0].topology
    for i, p in enumerate(paths[1:], start=1):
        if p.topology != expected:
            raise TopologyMismatchError(
                f"path {i} has {p.topology[0]} curves (closed={p.topology[1]}), "
                f"expected {expected[0]} curves (closed={expected[1]})"
            )


def interpolate_path(value: float, input_range: Sequence[float], output_range: Sequence[Path],
                     extrapolation: Extrapolation = Extrapolation.CLAMP) -> str:
    """Interpolate every coordinate of structurally identical paths and serialize."""
    _check_ranges(input_range, len(output_range))
    _check_topology(output_range)

    coords = np.stack([p.to_array() for p in output_range])
    mixed = interpolate(value, input_range, coords, extrapolation)
    return serialize(Path.from_array(mixed, close=output_range[0].close))


def mix_path(value: float, p1: Path, p2: Path,
             extrapolation: Extrapolation = Extrapolation.CLAMP) -> str:
    return interpolate_path(value, [0, 1], [p1, p2], extrapolation)
