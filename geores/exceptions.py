# -*- coding: utf-8 -*-
"""
GEORES Exception Hierarchy - Domain-specific exceptions for geospatial resources.

Provides a small exception hierarchy that lets consumers catch GEORES
errors distinctly from Python built-in exceptions. All GEORES exceptions
subclass both ``GeoresError`` and the appropriate built-in exception so
that existing ``except ValueError`` style handlers keep working.

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


class GeoresError(Exception):
    """Base exception for all GEORES errors."""


class ValidationError(GeoresError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for negative grid sizes, malformed affine coefficients,
    non-string metadata keys, and incompatible assignment sources.
    """


class CRSError(GeoresError, ValueError):
    """Empty or malformed coordinate reference system definition.

    Raised by ``GeoResource.srs()`` and ``geores.crs.parse_wkt`` when the
    WKT text cannot be parsed. The condition is recoverable; callers
    check for it before using the parsed CRS.
    """


class GeolocationError(GeoresError, RuntimeError):
    """Coordinate transformation failure.

    Raised when a geo-to-pixel transform is requested on a resource
    whose affine transform is not invertible.
    """


class ResourceError(GeoresError, IOError):
    """Backend failure while opening or flushing a resource."""


class DependencyError(GeoresError, ImportError):
    """Missing optional dependency required for a specific backend.

    Raised when a resource type requires an optional package (rasterio,
    fiona) that is not installed.
    """
