# backend/pricepath/geometry/svg.py
import logging

import numpy as np
from svgelements import Arc, Close, CubicBezier, Line, Move, QuadraticBezier
from svgelements import Path as SvgPath

from .errors import PathParseError
from .path import Curve, Path, create_path
from .vector import Vector

logger = logging.getLogger(__name__)


def _num(v: float) -> str:
    # positional, shortest round-trip digits, "2" not "2.0", never "-0"
    return np.format_float_positional(float(v) + 0.0, trim="-")


def _point(p: Vector) -> str:
    return f"{_num(p.x)},{_num(p.y)}"


def serialize(path: Path) -> str:
    d = [f"M{_point(path.move)}"]
    for c in path.curves:
        d.append(f"C{_point(c.c1)} {_point(c.c2)} {_point(c.to)}")
    if path.close:
        d.append("Z")
    return " ".join(d)


def _vec(p) -> Vector:
    return Vector(float(p.x), float(p.y))


def _line_to_cubic(start: Vector, end: Vector) -> Curve:
    # C start end end: first control on the start point, second on the end point
    return Curve(start, end, end)


def _quad_to_cubic(start: Vector, ctrl: Vector, end: Vector) -> Curve:
    return Curve(
        start + (ctrl - start) * (2.0 / 3.0),
        end + (ctrl - end) * (2.0 / 3.0),
        end,
    )


def _to_cubics(seg):
    """Yield the cubic curves equivalent to one svgelements segment."""
    if isinstance(seg, CubicBezier):
        yield Curve(_vec(seg.control1), _vec(seg.control2), _vec(seg.end))
    elif isinstance(seg, QuadraticBezier):
        yield _quad_to_cubic(_vec(seg.start), _vec(seg.control), _vec(seg.end))
    elif isinstance(seg, Line):
        yield _line_to_cubic(_vec(seg.start), _vec(seg.end))
    elif isinstance(seg, Arc):
        for cubic in seg.as_cubic_curves():
            yield Curve(_vec(cubic.control1), _vec(cubic.control2), _vec(cubic.end))
    else:
        raise PathParseError(f"unsupported path segment {type(seg).__name__}")


def parse(d: str) -> Path:
    """
    Parse an SVG path description into a Path of cubic curves.

    Relative and shorthand commands are resolved by svgelements; lines,
    quadratic curves and arcs are converted to cubics here. This allocates a
    lot and belongs on cold paths only.
    """
    try:
        segments = list(SvgPath(d))
    except (ValueError, IndexError, TypeError) as e:
        raise PathParseError(f"invalid path description {d!r}: {e}") from e

    if not segments or not isinstance(segments[0], Move):
        raise PathParseError(f"path description must start with a move: {d!r}")

    builder = create_path(_vec(segments[0].end))
    for seg in segments[1:]:
        if isinstance(seg, Close):
            builder.close()
        elif isinstance(seg, Move):
            logger.warning("ignoring extra subpath starting at (%s, %s)", seg.end.x, seg.end.y)
        else:
            for curve in _to_cubics(seg):
                builder.add_curve(curve)

    path = builder.build()
    logger.debug("parsed path with %d curves (closed=%s)", len(path.curves), path.close)
    return path
