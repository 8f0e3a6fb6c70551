# -*- coding: utf-8 -*-
"""
Models Common - Coordinate value types for georeferenced resources.

Provides the ``Point`` dataclass returned by every geolocation query on a
``GeoResource`` and a helper that reduces a set of points to their
axis-aligned extremes.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from dataclasses import dataclass
from typing import Iterable, Tuple

# Third-party
import numpy as np


@dataclass
class Point:
    """Georeferenced (or pixel) coordinate pair.

    Parameters
    ----------
    x : float
        X coordinate (easting, longitude, or column).
    y : float
        Y coordinate (northing, latitude, or row).
    """

    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y

    def to_tuple(self) -> Tuple[float, float]:
        """Return the point as an ``(x, y)`` tuple."""
        return (self.x, self.y)


def bounding_points(points: Iterable[Point]) -> Tuple[Point, Point]:
    """Element-wise minimum and maximum over a set of points.

    Every point is compared on both axes; no ordering between the
    inputs is assumed.

    Parameters
    ----------
    points : Iterable[Point]
        Points to reduce. Must contain at least one point.

    Returns
    -------
    Tuple[Point, Point]
        ``(min_point, max_point)``.

    Raises
    ------
    ValueError
        If *points* is empty.
    """
    coords = np.array([p.to_tuple() for p in points], dtype=np.float64)
    if coords.size == 0:
        raise ValueError("bounding_points requires at least one point")
    mins = coords.min(axis=0)
    maxs = coords.max(axis=0)
    return (
        Point(float(mins[0]), float(mins[1])),
        Point(float(maxs[0]), float(maxs[1])),
    )
