"""lerpkit: colour conversion, interpolation and 2D geometry helpers."""

from __future__ import annotations

import logging

from ._version import get_version
from .color import hex_to_hsl, hex_to_rgb, hsl_to_hex, rgb_to_hex
from .interpolation import (
    curve_length,
    degree_to_radians,
    lerp,
    lerp_angle,
    lerp_curve,
    lerp_curve_angle,
    lerp_curve_into,
    lerp_point,
    lerp_point_into,
    radians_to_degree,
    sample_curve,
)
from .models import Hsl, Point, Rgb, SupportsXY
from .utils import (
    angle_between_two_points,
    clamp,
    distance_between_two_points,
    lines_intersection,
    lines_intersection_into,
    rotate_point,
    rotate_point_around,
    shift_point,
    triangle_face,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = get_version()

__all__ = [
    "__version__",
    "get_version",
    "Point",
    "SupportsXY",
    "Rgb",
    "Hsl",
    "hex_to_hsl",
    "hex_to_rgb",
    "rgb_to_hex",
    "hsl_to_hex",
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
