"""Pure functions for angle conversion and interpolation.

Point-producing helpers come in pairs: ``lerp_point`` returns a new
:class:`~lerpkit.models.Point` while ``lerp_point_into`` writes the result
into an existing object with settable ``x``/``y`` attributes.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .models import DEFAULT_ANGLE_RANGE, DEFAULT_CURVE_STEPS, Point, SupportsXY


def degree_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def radians_to_degree(radians: float) -> float:
    return radians * 180 / math.pi


def lerp(v1, v2, t):
    """Linear interpolation between two values.

    ``t`` is not clamped, values outside ``[0, 1]`` extrapolate. Works for
    scalars and NumPy arrays alike.
    """
    return v1 + (v2 - v1) * t


def lerp_angle(
    v1: float, v2: float, t: float, range_: float = DEFAULT_ANGLE_RANGE
) -> float:
    """Interpolate between two angles along the shorter arc.

    The result wraps into ``[0, range_)`` for ``t`` in ``[0, 1]``.
    """
    dt = v2 - v1
    mid = range_ * 0.5
    if dt < -mid:
        result = lerp(v1, v2 + range_, t)
        if result >= range_:
            result -= range_
    elif dt > mid:
        result = lerp(v1, v2 - range_, t)
        if result < 0:
            result += range_
    else:
        result = lerp(v1, v2, t)
    return result


def lerp_point(p0: SupportsXY, p1: SupportsXY, t: float) -> Point:
    """Linearly interpolate between two points."""
    return Point(x=lerp(p0.x, p1.x, t), y=lerp(p0.y, p1.y, t))


def lerp_point_into(
    p0: SupportsXY, p1: SupportsXY, t: float, target: SupportsXY
) -> None:
    """Like :func:`lerp_point` but stores the result on ``target``."""
    target.x = lerp(p0.x, p1.x, t)
    target.y = lerp(p0.y, p1.y, t)


def _bezier(a: float, b: float, c: float, d: float, t: float) -> float:
    mt = 1 - t
    return mt**3 * a + 3 * mt**2 * t * b + 3 * mt * t * t * c + t**3 * d


def _bezier_xy(
    p1: SupportsXY, cp1: SupportsXY, cp2: SupportsXY, p2: SupportsXY, t: float
) -> Tuple[float, float]:
    return (
        _bezier(p1.x, cp1.x, cp2.x, p2.x, t),
        _bezier(p1.y, cp1.y, cp2.y, p2.y, t),
    )


def lerp_curve(
    p1: SupportsXY, cp1: SupportsXY, cp2: SupportsXY, p2: SupportsXY, t: float
) -> Point:
    """Evaluate the cubic Bezier ``p1, cp1, cp2, p2`` at ``t``."""
    x, y = _bezier_xy(p1, cp1, cp2, p2, t)
    return Point(x=x, y=y)


def lerp_curve_into(
    p1: SupportsXY,
    cp1: SupportsXY,
    cp2: SupportsXY,
    p2: SupportsXY,
    t: float,
    target: SupportsXY,
) -> None:
    """Like :func:`lerp_curve` but stores the result on ``target``."""
    target.x, target.y = _bezier_xy(p1, cp1, cp2, p2, t)


def lerp_curve_angle(
    p1: SupportsXY, cp1: SupportsXY, cp2: SupportsXY, p2: SupportsXY, t: float
) -> float:
    """Return the tangent direction of a cubic Bezier at ``t`` in radians.

    The angle is ``atan2(dx, dy)``, i.e. measured from the +Y axis, matching
    :func:`~lerpkit.utils.geometry.angle_between_two_points`.
    """
    mt = 1 - t
    dx = (
        3 * mt * mt * (cp1.x - p1.x)
        + 6 * mt * t * (cp2.x - cp1.x)
        + 3 * t * t * (p2.x - cp2.x)
    )
    dy = (
        3 * mt * mt * (cp1.y - p1.y)
        + 6 * mt * t * (cp2.y - cp1.y)
        + 3 * t * t * (p2.y - cp2.y)
    )
    return math.atan2(dx, dy)


def sample_curve(
    p1: SupportsXY,
    cp1: SupportsXY,
    cp2: SupportsXY,
    p2: SupportsXY,
    steps: int = DEFAULT_CURVE_STEPS,
) -> np.ndarray:
    """Evaluate a cubic Bezier at ``steps + 1`` evenly spaced parameters.

    Returns an array of shape ``(steps + 1, 2)`` whose first row is ``p1``
    and last row is ``p2``.
    """
    if steps < 1:
        raise ValueError("Curve sampling needs at least one step.")

    t = np.linspace(0.0, 1.0, int(steps) + 1)
    mt = 1.0 - t
    weights = np.stack((mt**3, 3 * mt**2 * t, 3 * mt * t**2, t**3), axis=1)
    control = np.array(
        [[p.x, p.y] for p in (p1, cp1, cp2, p2)], dtype=np.float64
    )
    return weights @ control


def curve_length(
    p1: SupportsXY,
    cp1: SupportsXY,
    cp2: SupportsXY,
    p2: SupportsXY,
    steps: int = DEFAULT_CURVE_STEPS,
) -> float:
    """Approximate the arc length of a cubic Bezier with ``steps`` chords."""
    pts = sample_curve(p1, cp1, cp2, p2, steps)
    seg = np.diff(pts, axis=0)
    return float(np.sum(np.hypot(seg[:, 0], seg[:, 1])))


__all__ = [
    "degree_to_radians",
    "radians_to_degree",
    "lerp",
    "lerp_angle",
    "lerp_point",
    "lerp_point_into",
    "lerp_curve",
    "lerp_curve_into",
    "lerp_curve_angle",
    "sample_curve",
    "curve_length",
]
