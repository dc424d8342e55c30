"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from springpath.errors import ConfigurationError


def segment_length(x: float, y: float, xend: float, yend: float) -> float:
    """Euclidean distance between (x, y) and (xend, yend)."""
    return math.hypot(xend - x, yend - y)


def revolutions(length: float, diameter: float, tension: float) -> float:
    """Number of coil turns over a segment. Higher tension = fewer turns."""
    return length / (diameter * tension)


def point_count(n: int, turns: float) -> int:
    """Total points for `turns` revolutions at `n` points per revolution.

    Rounds half to even and never goes below zero.
    """
    return max(int(np.rint(n * turns)), 0)


def spring_path(
    x: float,
    y: float,
    xend: float,
    yend: float,
    diameter: float,
    tension: float,
    n: int,
) -> NDArray[np.float64]:
    """Trace a spring between two points as an Nx2 array of (x, y).

    A circle of radius ``diameter / 2`` is swept along the segment while its
    angle turns ``length / (diameter * tension)`` full revolutions. ``n`` is
    the point density per revolution, so a degenerate segment yields an
    empty array. The last loop may be partial.
    """
    if tension <= 0:
        raise ConfigurationError("tension must be larger than 0")

    turns = revolutions(segment_length(x, y, xend, yend), diameter, tension)
    count = point_count(n, turns)
    if count == 0:
        return np.empty((0, 2))

    angle = np.linspace(0.0, turns * 2 * np.pi, count)
    center_x = np.linspace(x, xend, count)
    center_y = np.linspace(y, yend, count)
    radius = diameter / 2

    return np.column_stack((
        np.cos(angle) * radius + center_x,
        np.sin(angle) * radius + center_y,
    ))
