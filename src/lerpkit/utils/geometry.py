"""Geometry helpers for points, lines and triangles.

Angles follow the ``atan2(dx, dy)`` convention throughout: zero points along
+Y and positive angles turn toward +X.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from ..models import Point, SupportsXY

logger = logging.getLogger(__name__)


def angle_between_two_points(p1: SupportsXY, p2: SupportsXY) -> float:
    """Return the direction from ``p1`` to ``p2`` in radians."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.atan2(dx, dy)


def distance_between_two_points(p1: SupportsXY, p2: SupportsXY) -> float:
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def _nan_max(a: float, b: float) -> float:
    # NaN wins regardless of argument order
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return max(a, b)


def _nan_min(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return min(a, b)


def _intersect(
    p1: SupportsXY,
    p2: SupportsXY,
    p3: SupportsXY,
    p4: SupportsXY,
    extrapolate: bool,
) -> Optional[Tuple[float, float]]:
    d1x = p2.x - p1.x
    d1y = p2.y - p1.y
    d2x = p4.x - p3.x
    d2y = p4.y - p3.y
    denom = d1x * d2y - d2x * d1y
    if denom == 0:
        logger.debug("Parallel or coincident lines, no intersection")
        return None

    a = p1.y - p3.y
    b = p1.x - p3.x
    a1 = (d2x * a - d2y * b) / denom
    b1 = (d1x * a - d1y * b) / denom
    if not extrapolate and not (0 < a1 < 1 and 0 < b1 < 1):
        return None
    return p1.x + d1x * a1, p1.y + d1y * a1


def lines_intersection(
    p1: SupportsXY,
    p2: SupportsXY,
    p3: SupportsXY,
    p4: SupportsXY,
    extrapolate: bool = False,
) -> Optional[Point]:
    """Intersect line ``p1``-``p2`` with line ``p3``-``p4``.

    Without ``extrapolate`` the crossing must lie strictly inside both
    segments, endpoints excluded. Returns ``None`` when the lines are
    parallel or the crossing falls outside the segments.
    """
    hit = _intersect(p1, p2, p3, p4, extrapolate)
    if hit is None:
        return None
    return Point(x=hit[0], y=hit[1])


def lines_intersection_into(
    p1: SupportsXY,
    p2: SupportsXY,
    p3: SupportsXY,
    p4: SupportsXY,
    target: SupportsXY,
    extrapolate: bool = False,
) -> None:
    """Like :func:`lines_intersection` but writes into ``target``.

    ``target`` is reset to ``(nan, nan)`` first and only overwritten when an
    intersection is found.
    """
    target.x = math.nan
    target.y = math.nan
    hit = _intersect(p1, p2, p3, p4, extrapolate)
    if hit is not None:
        target.x, target.y = hit


def triangle_face(p1: SupportsXY, p2: SupportsXY, p3: SupportsXY) -> float:
    """Return the winding of ``p1, p2, p3`` as a cross product clamped to ``[-1, 1]``.

    Positive for clockwise and negative for counter-clockwise in screen
    coordinates. Small triangles give values strictly between -1 and 1, and a
    NaN coordinate gives NaN.
    """
    ax = p3.x - p1.x
    ay = p3.y - p1.y
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return _nan_min(1, _nan_max(ax * dy - ay * dx, -1))


def shift_point(p: SupportsXY, vec: SupportsXY, mag: float) -> None:
    """Move ``p`` in place by ``vec * mag``."""
    p.x = p.x + vec.x * mag
    p.y = p.y + vec.y * mag


def _rotated(
    p: SupportsXY, center: SupportsXY, angle: float
) -> Tuple[float, float]:
    cos_t = math.cos(angle)
    sin_t = math.sin(angle)
    x0 = p.x - center.x
    y0 = p.y - center.y
    xr = x0 * cos_t - y0 * sin_t + center.x
    yr = x0 * sin_t + y0 * cos_t + center.y
    return xr, yr


def rotate_point(p: SupportsXY, center: SupportsXY, angle: float) -> Point:
    """Return ``p`` rotated around ``center`` by ``angle`` radians."""
    xr, yr = _rotated(p, center, angle)
    return Point(x=xr, y=yr)


def rotate_point_around(p: SupportsXY, center: SupportsXY, angle: float) -> None:
    """Rotate ``p`` in place around ``center`` by ``angle`` radians."""
    p.x, p.y = _rotated(p, center, angle)


def clamp(
    minimum: Optional[float], maximum: Optional[float], value: float
) -> float:
    """Clamp ``value`` to ``[minimum, maximum]``.

    A falsy ``minimum`` (``None``, ``0`` or NaN) is replaced by ``value``, so
    it never bounds from below. ``maximum=None`` leaves the top open. A NaN
    ``value`` or ``maximum`` yields NaN.
    """
    if not minimum or minimum != minimum:
        minimum = value
    if maximum is None:
        return _nan_max(minimum, value)
    return _nan_min(maximum, _nan_max(minimum, value))


__all__ = [
    "angle_between_two_points",
    "distance_between_two_points",
    "lines_intersection",
    "lines_intersection_into",
    "triangle_face",
    "shift_point",
    "rotate_point",
    "rotate_point_around",
    "clamp",
]
