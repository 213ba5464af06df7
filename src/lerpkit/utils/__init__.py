"""Point, line and clamping helpers."""

from .geometry import (
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
