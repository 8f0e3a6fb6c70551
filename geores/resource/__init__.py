# -*- coding: utf-8 -*-
"""
Resource Module - Georeferenced resources and the backend factory.

``GeoResource`` is the base contract. ``MemoryResource`` holds explicit
in-memory geometry, ``RasterResource`` binds to a raster file through
rasterio, and ``VectorResource`` binds to a vector layer through fiona.
``open_resource`` picks the backend from the file extension.

Dependencies
------------
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

# Standard library
import logging
from pathlib import Path
from typing import Any, Union

from geores.resource.base import GeoResource
from geores.resource.memory import MemoryResource
from geores.resource.raster import RasterResource
from geores.resource.vector import VectorResource

logger = logging.getLogger(__name__)

VECTOR_EXTENSIONS = frozenset({
    '.shp', '.geojson', '.json', '.kml', '.gml', '.fgb',
})


def open_resource(
    filepath: Union[str, Path],
    **kwargs: Any,
) -> GeoResource:
    """Open a geospatial file with the matching backend.

    Vector extensions (``.shp``, ``.geojson``, ``.json``, ``.kml``,
    ``.gml``, ``.fgb``) open a ``VectorResource``. A ``.gpkg`` opens as a
    vector layer only when a ``layer`` keyword is given, since GeoPackages
    also carry rasters. Everything else opens a ``RasterResource``.

    Parameters
    ----------
    filepath : str or Path
        Path to the file.
    **kwargs
        Forwarded to the backend constructor (``update``,
        ``env_options`` for rasters; ``layer`` for vectors).

    Returns
    -------
    GeoResource
        Opened resource.
    """
    path = Path(filepath)
    suffix = path.suffix.lower()
    is_vector = suffix in VECTOR_EXTENSIONS
    if suffix == '.gpkg':
        is_vector = 'layer' in kwargs

    if is_vector:
        logger.debug("Opening %s as vector layer", path)
        return VectorResource(path, **kwargs)
    logger.debug("Opening %s as raster", path)
    return RasterResource(path, **kwargs)


__all__ = [
    'GeoResource',
    'MemoryResource',
    'RasterResource',
    'VectorResource',
    'open_resource',
    'VECTOR_EXTENSIONS',
]
