# -*- coding: utf-8 -*-
"""
GeoResource Base - Uniform handle for georeferenced data sources.

Defines ``GeoResource``, the base class every raster, in-memory, and vector
resource derives from. It owns the identifier and the key/value metadata
map, and derives every corner and extent coordinate from the affine
transform. The backend-facing accessors (``format``, ``xsize``, ``ysize``,
``geoloc``, ``projection``, ``affine``) return well-defined unbound
defaults here and are overridden by specializations attached to a real
backend.

Coordinate convention:

    pixel (col, row)  --affine-->  georeferenced (x, y)

where the affine ``Affine(a, b, c, d, e, f)`` maps::

    x = a * col + b * row + c
    y = d * col + e * row + f

Dependencies
------------
affine
numpy
pyproj

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
import copy
import logging
import math
from pathlib import Path, PurePath
from typing import Any, Dict, Mapping, Optional, Tuple, Union

# Third-party
import numpy as np
import pyproj
from affine import Affine, TransformNotInvertibleError

# GEORES internal
from geores.crs import parse_wkt
from geores.exceptions import CRSError, GeolocationError, ValidationError
from geores.models.common import Point, bounding_points

logger = logging.getLogger(__name__)


def _apply_affine(transform: Affine, x: float, y: float) -> Tuple[float, float]:
    a, b, c, d, e, f = tuple(transform)[:6]
    return (a * x + b * y + c, d * x + e * y + f)


class GeoResource:
    """
    Base class representing a geospatial resource.

    An unbound resource (no identifier, no backend) reports zero size, an
    empty format and projection, and the identity affine. Corner queries on
    an unbound resource therefore pass pixel coordinates through unchanged.

    Parameters
    ----------
    filename : str or Path, default=''
        Filename or other logical identifier of the resource. An empty
        identifier denotes an in-memory, unbound resource.

    Notes
    -----
    Instances are not internally synchronized. Callers serialize
    ``set_meta``, ``copy_meta`` and ``assign`` against concurrent reads.

    Corner names are positional in pixel space: ``top_left()`` is the
    geo-mapped value of pixel corner ``(0, 0)``, which is not necessarily
    the north-west corner. Use ``min_xy()``/``max_xy()`` for the
    axis-aligned bounding box.

    Examples
    --------
    >>> res = GeoResource('/data/scenes/scene_001.tif')
    >>> res.basename()
    'scene_001.tif'
    >>> res.set_meta('SENSOR', 'OLI').meta('SENSOR')
    'OLI'
    """

    def __init__(self, filename: Union[str, Path] = '') -> None:
        self._filename = '' if filename is None else str(filename)
        self._metadata: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Resource information
    # ------------------------------------------------------------------

    def filename(self) -> str:
        """Get the filename of the resource."""
        return self._filename

    def basename(self) -> str:
        """Basename, or short name of the filename.

        Pure string decomposition; the filesystem is never consulted.
        """
        return PurePath(self._filename).name

    def format(self) -> str:
        """Name of the storage driver. Empty for an unbound resource."""
        return ''

    # ------------------------------------------------------------------
    # Geospatial information
    # ------------------------------------------------------------------

    def xsize(self) -> int:
        """Width of the resource in pixels (0 when unbound)."""
        return 0

    def ysize(self) -> int:
        """Height of the resource in pixels (0 when unbound)."""
        return 0

    def affine(self) -> Affine:
        """Get the affine transformation (identity when unbound)."""
        return Affine.identity()

    def projection(self) -> str:
        """Projection definition in Well-Known-Text format."""
        return ''

    def geoloc(self, xloc: float, yloc: float) -> Point:
        """Geolocated coordinates of a point within the resource.

        Parameters
        ----------
        xloc : float
            Fractional pixel column.
        yloc : float
            Fractional pixel row.

        Returns
        -------
        Point
            ``(a * xloc + b * yloc + c, d * xloc + e * yloc + f)``.
        """
        x, y = _apply_affine(self.affine(), float(xloc), float(yloc))
        return Point(x, y)

    def geoloc_array(
        self,
        xlocs: Any,
        ylocs: Any,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Vectorized ``geoloc`` over arrays of pixel coordinates.

        Parameters
        ----------
        xlocs : array_like
            Pixel columns.
        ylocs : array_like
            Pixel rows, broadcastable against *xlocs*.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray]
            ``(xs, ys)`` georeferenced coordinate arrays.
        """
        a, b, c, d, e, f = tuple(self.affine())[:6]
        cols = np.asarray(xlocs, dtype=np.float64)
        rows = np.asarray(ylocs, dtype=np.float64)
        xs = c + cols * a + rows * b
        ys = f + cols * d + rows * e
        return xs, ys

    def geo_to_pixel(self, x: float, y: float) -> Point:
        """Pixel coordinates of a georeferenced point.

        Raises
        ------
        GeolocationError
            If the affine transform is not invertible.
        """
        try:
            inverse = ~self.affine()
        except TransformNotInvertibleError as e:
            raise GeolocationError(
                f"Affine transform of {self.basename() or 'resource'} "
                f"is not invertible"
            ) from e
        col, row = _apply_affine(inverse, float(x), float(y))
        return Point(col, row)

    def top_left(self) -> Point:
        """Coordinates of pixel corner (0, 0)."""
        return self.geoloc(0, 0)

    def lower_left(self) -> Point:
        """Coordinates of pixel corner (0, height)."""
        return self.geoloc(0, self.ysize())

    def top_right(self) -> Point:
        """Coordinates of pixel corner (width, 0)."""
        return self.geoloc(self.xsize(), 0)

    def lower_right(self) -> Point:
        """Coordinates of pixel corner (width, height)."""
        return self.geoloc(self.xsize(), self.ysize())

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """All four corners as ``(top_left, lower_left, top_right, lower_right)``."""
        return (
            self.top_left(),
            self.lower_left(),
            self.top_right(),
            self.lower_right(),
        )

    def min_xy(self) -> Point:
        """Minimum coordinates of X and Y over the four corners."""
        return bounding_points(self.corners())[0]

    def max_xy(self) -> Point:
        """Maximum coordinates of X and Y over the four corners."""
        return bounding_points(self.corners())[1]

    def bounds(self) -> Tuple[float, float, float, float]:
        """Georeferenced extent as ``(min_x, min_y, max_x, max_y)``."""
        lo, hi = bounding_points(self.corners())
        return (lo.x, lo.y, hi.x, hi.y)

    def resolution(self) -> Tuple[float, float]:
        """Ground size of one pixel along the column and row directions.

        Lengths of the affine basis vectors, so rotated transforms report
        the true pixel spacing rather than the raw ``a``/``e`` terms.
        """
        a, b, _, d, e, _ = tuple(self.affine())[:6]
        return (math.hypot(a, d), math.hypot(b, e))

    def srs(self) -> pyproj.CRS:
        """Return the projection as a parsed spatial reference.

        Raises
        ------
        CRSError
            If ``projection()`` is empty or malformed.
        """
        return parse_wkt(self.projection())

    def has_srs(self) -> bool:
        """Return True if ``srs()`` would succeed."""
        wkt = self.projection()
        if not wkt:
            return False
        try:
            parse_wkt(wkt)
        except CRSError:
            logger.warning(
                "Projection of %s could not be parsed", self.basename())
            return False
        return True

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def meta(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a metadata item.

        Parameters
        ----------
        key : str
            Metadata key (case-sensitive).
        default : str, optional
            Returned when *key* is absent. ``None`` unless given, which
            keeps "absent" distinct from an empty value.
        """
        return self._metadata.get(key, default)

    def metadata(self) -> Dict[str, str]:
        """Copy of the whole metadata map."""
        return dict(self._metadata)

    def set_meta(
        self,
        key_or_items: Union[str, Mapping[str, Any]],
        value: Optional[Any] = None,
    ) -> 'GeoResource':
        """Set one or more metadata items.

        Called as ``set_meta(key, value)`` or ``set_meta(items)``. Existing
        keys are overwritten. Values are stored as strings. The change is
        in memory only; persisting it is the job of a backend on flush.

        Parameters
        ----------
        key_or_items : str or Mapping[str, Any]
            Single key, or a mapping of key to value.
        value : Any, optional
            Value for a single key. Required with a key, forbidden with a
            mapping.

        Returns
        -------
        GeoResource
            ``self``, to allow chaining.

        Raises
        ------
        ValidationError
            If a key is not a non-empty string, or the call mixes a
            mapping with a value. No entry is written in that case.
        """
        if isinstance(key_or_items, Mapping):
            if value is not None:
                raise ValidationError(
                    "set_meta() takes either a mapping or a key and value"
                )
            items = key_or_items
        else:
            if value is None:
                raise ValidationError(
                    f"set_meta() missing value for key {key_or_items!r}"
                )
            items = {key_or_items: value}

        staged: Dict[str, str] = {}
        for key, item in items.items():
            if not isinstance(key, str) or not key:
                raise ValidationError(
                    f"Metadata keys must be non-empty strings, got {key!r}"
                )
            staged[key] = str(item)
        self._metadata.update(staged)
        return self

    def copy_meta(self, other: 'GeoResource') -> 'GeoResource':
        """Copy metadata from another resource.

        Every entry of *other* is written here, overwriting on collision.
        Identifier, geometry and affine are left untouched.

        Returns
        -------
        GeoResource
            ``self``, to allow chaining.
        """
        self._metadata.update(other.metadata())
        return self

    # ------------------------------------------------------------------
    # Copy / assignment
    # ------------------------------------------------------------------

    def _copy_state(self, memo: Optional[Dict[int, Any]] = None) -> Dict[str, Any]:
        return copy.deepcopy(self.__dict__, memo)

    def copy(self) -> 'GeoResource':
        """Full value copy of the resource."""
        return copy.copy(self)

    def __copy__(self) -> 'GeoResource':
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self._copy_state())
        return clone

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'GeoResource':
        clone = self.__class__.__new__(self.__class__)
        memo[id(self)] = clone
        clone.__dict__.update(self._copy_state(memo))
        return clone

    def assign(self, other: 'GeoResource') -> 'GeoResource':
        """Replace the whole state of this resource with a copy of *other*.

        The new state is built completely before it is swapped in, so a
        failure leaves this resource unchanged.

        Raises
        ------
        ValidationError
            If *other* is not an instance of this resource's class.
        """
        if not isinstance(other, type(self)):
            raise ValidationError(
                f"Cannot assign {type(other).__name__} to "
                f"{type(self).__name__}"
            )
        if other is self:
            return self
        state = other._copy_state()
        self.__dict__.clear()
        self.__dict__.update(state)
        logger.debug("Assigned %s from %s", type(self).__name__,
                     other.filename() or '<unbound>')
        return self

    def __repr__(self) -> str:
        name = self.basename() or '<unbound>'
        return (
            f"<{type(self).__name__} {name} "
            f"{self.xsize()}x{self.ysize()} format={self.format()!r}>"
        )
