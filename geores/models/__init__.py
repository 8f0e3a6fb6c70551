# -*- coding: utf-8 -*-
"""
Models - Small value types shared across GEORES resources.

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

from geores.models.common import Point, bounding_points

__all__ = [
    'Point',
    'bounding_points',
]
