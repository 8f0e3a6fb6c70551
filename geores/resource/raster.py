# -*- coding: utf-8 -*-
"""
Raster Resource - GeoResource bound to a raster file through rasterio.

Reads identity, grid size, driver, CRS, affine transform and dataset tags
from any raster GDAL can open (GeoTIFF, COG, JPEG2000, NITF, ...). The
dataset handle is only held inside ``with`` blocks: values are cached on
open and the handle is released immediately. Metadata set on a resource
opened with ``update=True`` is written back as dataset tags on ``flush()``
or ``close()``.

Dependencies
------------
rasterio

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
from typing import Any, Dict, Optional, Union

# Third-party
from affine import Affine

# GEORES internal
from geores.exceptions import ResourceError
from geores.resource._backend import require_raster_backend
from geores.resource.base import GeoResource

logger = logging.getLogger(__name__)

# Keyword arguments of DatasetWriter.update_tags that shadow tag names
RESERVED_TAG_KEYS = frozenset({'bidx', 'ns'})


class RasterResource(GeoResource):
    """Raster file opened through rasterio.

    Parameters
    ----------
    filepath : str or Path
        Path to the raster file.
    update : bool, default=False
        Allow metadata to be written back to the file.
    env_options : Dict[str, Any], optional
        GDAL configuration options applied through ``rasterio.Env`` to
        every open of the file (e.g. ``{'GDAL_DISABLE_READDIR_ON_OPEN':
        'EMPTY_DIR'}``).

    Attributes
    ----------
    update : bool
        Whether ``flush()`` may write to the file.
    env_options : Dict[str, Any]
        GDAL configuration options.

    Raises
    ------
    DependencyError
        If rasterio is not installed.
    FileNotFoundError
        If the file does not exist.
    ResourceError
        If the file cannot be opened as a raster.

    Examples
    --------
    >>> with RasterResource('scene.tif', update=True) as res:
    ...     print(res.xsize(), res.ysize(), res.min_xy())
    ...     res.set_meta('PROCESSED', 'true')
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        update: bool = False,
        env_options: Optional[Dict[str, Any]] = None,
    ) -> None:
        require_raster_backend()
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        super().__init__(path)
        self.update = update
        self.env_options: Dict[str, Any] = dict(env_options or {})
        self._stored_tags: Dict[str, str] = {}
        self._load_metadata()

    def _load_metadata(self) -> None:
        """Cache geometry, CRS and tags from the dataset."""
        import rasterio
        from rasterio.errors import RasterioError

        try:
            with rasterio.Env(**self.env_options), \
                    rasterio.open(self._filename) as ds:
                self._driver = ds.driver
                self._width = ds.width
                self._height = ds.height
                self._count = ds.count
                self._dtype = str(ds.dtypes[0]) if ds.count else ''
                self._nodata = ds.nodata
                self._projection = ds.crs.to_wkt() if ds.crs else ''
                self._transform = Affine(*tuple(ds.transform)[:6])
                tags = ds.tags()
        except RasterioError as e:
            raise ResourceError(
                f"Failed to open raster {self._filename}: {e}") from e

        self._stored_tags = {str(k): str(v) for k, v in tags.items()}
        self._metadata = dict(self._stored_tags)
        logger.debug("Opened raster %s (%s, %dx%d, %d bands)",
                     self._filename, self._driver, self._width,
                     self._height, self._count)

    # ------------------------------------------------------------------
    # Backend accessors
    # ------------------------------------------------------------------

    def format(self) -> str:
        return self._driver

    def xsize(self) -> int:
        return self._width

    def ysize(self) -> int:
        return self._height

    def affine(self) -> Affine:
        return self._transform

    def projection(self) -> str:
        return self._projection

    def count(self) -> int:
        """Number of bands."""
        return self._count

    def dtype(self) -> str:
        """Data type name of the first band."""
        return self._dtype

    def nodata(self) -> Optional[float]:
        """No-data value, or None when the dataset defines none."""
        return self._nodata

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def is_dirty(self) -> bool:
        """Return True if metadata differs from what the file holds."""
        return self._metadata != self._stored_tags

    def flush(self) -> None:
        """Write metadata back to the file as dataset tags.

        Raises
        ------
        ResourceError
            If the resource was not opened with ``update=True``, a
            metadata key is one of ``RESERVED_TAG_KEYS``, or the tags
            cannot be written.
        """
        if not self.update:
            raise ResourceError(
                f"{self.basename()} was opened read-only; "
                f"reopen with update=True to write metadata"
            )
        if not self.is_dirty():
            return
        reserved = sorted(RESERVED_TAG_KEYS.intersection(self._metadata))
        if reserved:
            raise ResourceError(
                f"Metadata keys {reserved} collide with rasterio tag "
                f"arguments and cannot be written to {self.basename()}"
            )

        import rasterio
        from rasterio.errors import RasterioError

        try:
            with rasterio.Env(**self.env_options), \
                    rasterio.open(self._filename, 'r+') as ds:
                ds.update_tags(**self._metadata)
        except (RasterioError, TypeError, ValueError) as e:
            logger.warning("Could not write tags to %s: %s",
                           self._filename, e)
            raise ResourceError(
                f"Failed to write metadata to {self._filename}: {e}") from e

        self._stored_tags = dict(self._metadata)
        logger.debug("Flushed %d metadata items to %s",
                     len(self._metadata), self._filename)

    def close(self) -> None:
        """Flush pending metadata when the resource is writable."""
        if self.update and self.is_dirty():
            self.flush()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
