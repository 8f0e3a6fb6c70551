# -*- coding: utf-8 -*-
"""
Resource Backend Detection - Detect available raster and vector libraries.

Probes for rasterio and fiona at import time. Provides boolean flags and
helper functions that backend-bound resources use to verify the required
package is installed before opening anything.

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

# GEORES internal
from geores.exceptions import DependencyError

_HAS_RASTERIO = False
_HAS_FIONA = False

try:
    import rasterio  # noqa: F401
    _HAS_RASTERIO = True
except ImportError:
    pass

try:
    import fiona  # noqa: F401
    _HAS_FIONA = True
except ImportError:
    pass


def require_raster_backend() -> None:
    """Verify that rasterio is installed.

    Raises
    ------
    DependencyError
        If rasterio is not installed.
    """
    if not _HAS_RASTERIO:
        raise DependencyError(
            "RasterResource requires rasterio. "
            "Install with: pip install rasterio"
        )


def require_vector_backend() -> None:
    """Verify that fiona is installed.

    Raises
    ------
    DependencyError
        If fiona is not installed.
    """
    if not _HAS_FIONA:
        raise DependencyError(
            "VectorResource requires fiona. "
            "Install with: pip install fiona"
        )
