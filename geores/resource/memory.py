# -*- coding: utf-8 -*-
"""
Memory Resource - GeoResource whose geometry is supplied by the caller.

``MemoryResource`` backs the in-memory datasets that processing code
creates before anything is written to disk. Width, height, affine
transform and projection are plain attributes set at construction or
through validating setters.

Dependencies
------------
affine
pyproj

Author
------
Steven Siebert

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
import math
import numbers
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

# Third-party
from affine import Affine

# GEORES internal
from geores.crs import to_wkt
from geores.exceptions import CRSError, ValidationError
from geores.resource.base import GeoResource


def _coerce_affine(value: Any, gdal: bool = False) -> Affine:
    """Build an ``Affine`` from an Affine, 6 coefficients, or 9 coefficients."""
    if value is None:
        return Affine.identity()
    if isinstance(value, Affine):
        return value
    try:
        coefs = [float(v) for v in value]
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Affine must be an Affine or a sequence of numbers, "
            f"got {type(value).__name__}"
        ) from e
    if len(coefs) not in (6, 9):
        raise ValidationError(
            f"Affine requires 6 (or 9) coefficients, got {len(coefs)}"
        )
    if len(coefs) == 9 and coefs[6:] != [0.0, 0.0, 1.0]:
        raise ValidationError(
            f"Affine bottom row must be (0, 0, 1), got {tuple(coefs[6:])}"
        )
    if not all(math.isfinite(v) for v in coefs):
        raise ValidationError("Affine coefficients must be finite")
    if gdal:
        if len(coefs) != 6:
            raise ValidationError("GDAL geotransforms have 6 coefficients")
        return Affine.from_gdal(*coefs)
    return Affine(*coefs[:6])


def _check_size(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return int(value)


class MemoryResource(GeoResource):
    """In-memory geospatial resource with explicit geometry.

    Parameters
    ----------
    identifier : str or Path, default=''
        Logical name of the dataset.
    width : int, default=0
        Number of pixel columns.
    height : int, default=0
        Number of pixel rows.
    affine : Affine or Sequence[float], optional
        Pixel-to-map transform. ``None`` means the identity.
    projection : Any, default=''
        CRS as WKT or anything ``pyproj`` accepts (``'EPSG:4326'``, an
        EPSG integer, a ``pyproj.CRS``). Stored as WKT.
    metadata : Mapping[str, Any], optional
        Initial metadata items.
    driver : str, default='MEM'
        Value reported by ``format()``.

    Raises
    ------
    ValidationError
        If a size is negative, the affine is malformed, or the
        projection cannot be interpreted.

    Examples
    --------
    >>> from affine import Affine
    >>> res = MemoryResource('scratch', 200, 100,
    ...                      Affine(10.0, 0.0, 500000.0, 0.0, -10.0, 6000000.0),
    ...                      'EPSG:32755')
    >>> res.lower_right()
    Point(x=502000.0, y=5999000.0)
    """

    def __init__(
        self,
        identifier: Union[str, Path] = '',
        width: int = 0,
        height: int = 0,
        affine: Optional[Union[Affine, Sequence[float]]] = None,
        projection: Any = '',
        metadata: Optional[Mapping[str, Any]] = None,
        driver: str = 'MEM',
    ) -> None:
        super().__init__(identifier)
        self._width = _check_size('width', width)
        self._height = _check_size('height', height)
        self._affine = _coerce_affine(affine)
        self._projection = ''
        self.set_projection(projection)
        self._driver = driver
        if metadata:
            self.set_meta(metadata)

    def format(self) -> str:
        return self._driver

    def xsize(self) -> int:
        return self._width

    def ysize(self) -> int:
        return self._height

    def affine(self) -> Affine:
        return self._affine

    def projection(self) -> str:
        return self._projection

    def set_size(self, width: int, height: int) -> 'MemoryResource':
        """Set the pixel grid size. Both values are checked before either is stored."""
        width = _check_size('width', width)
        height = _check_size('height', height)
        self._width, self._height = width, height
        return self

    def set_affine(
        self,
        affine: Optional[Union[Affine, Sequence[float]]],
        gdal: bool = False,
    ) -> 'MemoryResource':
        """Set the affine transform.

        Parameters
        ----------
        affine : Affine or Sequence[float] or None
            Transform, coefficients in ``(a, b, c, d, e, f)`` order, or
            ``None`` for the identity.
        gdal : bool, default=False
            Interpret a 6-sequence in GDAL geotransform order
            ``(c, a, b, f, d, e)``.
        """
        self._affine = _coerce_affine(affine, gdal=gdal)
        return self

    def set_projection(self, projection: Any) -> 'MemoryResource':
        """Set the CRS from WKT or any pyproj-accepted definition."""
        try:
            self._projection = to_wkt(projection)
        except CRSError as e:
            raise ValidationError(str(e)) from e
        return self
