"""Value types shared by the colour and geometry helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Protocol, Tuple

DEFAULT_ANGLE_RANGE = 360.0
DEFAULT_CURVE_STEPS = 20
CHANNEL_MASK = 0xFF


class SupportsXY(Protocol):
    """Anything exposing ``x`` and ``y`` coordinates."""

    x: float
    y: float


@dataclass
class Point:
    """Mutable 2D point returned by the pure helpers."""

    x: float = 0.0
    y: float = 0.0

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class Rgb(NamedTuple):
    """Red, green and blue channels, nominally in ``[0, 255]``."""

    r: int
    g: int
    b: int


class Hsl(NamedTuple):
    """Hue, saturation and lightness, each normalised to ``[0, 1]``."""

    h: float
    s: float
    l: float  # noqa: E741


__all__ = [
    "DEFAULT_ANGLE_RANGE",
    "DEFAULT_CURVE_STEPS",
    "CHANNEL_MASK",
    "SupportsXY",
    "Point",
    "Rgb",
    "Hsl",
]
