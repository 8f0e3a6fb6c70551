# -*- coding: utf-8 -*-
"""
GEORES - Georeferenced resource handles for raster and vector data.

A single interface over identity, pixel-grid geometry, coordinate
reference system, affine georeferencing and key/value metadata of any
geospatial data source, so raster-processing code never touches the
underlying I/O library directly.

Dependencies
------------
numpy
affine
pyproj
rasterio
fiona

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from geores.exceptions import (
    GeoresError,
    ValidationError,
    CRSError,
    GeolocationError,
    ResourceError,
    DependencyError,
)
from geores.models import Point
from geores.crs import parse_wkt, to_wkt, is_valid_wkt
from geores.resource import (
    GeoResource,
    MemoryResource,
    RasterResource,
    VectorResource,
    open_resource,
)

__all__ = [
    'GeoresError',
    'ValidationError',
    'CRSError',
    'GeolocationError',
    'ResourceError',
    'DependencyError',
    'Point',
    'parse_wkt',
    'to_wkt',
    'is_valid_wkt',
    'GeoResource',
    'MemoryResource',
    'RasterResource',
    'VectorResource',
    'open_resource',
]
