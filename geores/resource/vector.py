# -*- coding: utf-8 -*-
"""
Vector Resource - GeoResource bound to a vector layer through fiona.

Reads driver, CRS, layer name, feature count, schema and extent of one
layer of any OGR-readable vector source (Shapefile, GeoJSON, GeoPackage,
...). A vector layer has no pixel grid, so the grid accessors keep their
unbound defaults; ``bounds()`` reports the layer extent instead.

Dependencies
------------
fiona

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
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

# GEORES internal
from geores.exceptions import ResourceError
from geores.resource._backend import require_vector_backend
from geores.resource.base import GeoResource

logger = logging.getLogger(__name__)


class VectorResource(GeoResource):
    """Vector layer opened through fiona.

    Parameters
    ----------
    filepath : str or Path
        Path to the vector source.
    layer : str or int, optional
        Layer name or index for multi-layer sources. The first layer is
        used when omitted.

    Raises
    ------
    DependencyError
        If fiona is not installed.
    FileNotFoundError
        If the path does not exist.
    ResourceError
        If the source cannot be opened as a vector layer.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        layer: Optional[Union[str, int]] = None,
    ) -> None:
        require_vector_backend()
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        super().__init__(path)
        self.layer = layer
        self._load_metadata()

    def _load_metadata(self) -> None:
        """Cache layer properties and tags."""
        import fiona
        from fiona.errors import FionaError

        kwargs = {} if self.layer is None else {'layer': self.layer}
        try:
            with fiona.open(self._filename, **kwargs) as src:
                self._driver = src.driver
                self._projection = src.crs_wkt or ''
                self._layer_name = src.name
                self._feature_count = len(src)
                self._schema = dict(src.schema)
                self._layer_bounds = tuple(float(v) for v in src.bounds)
                # Collection.tags() only exists on newer fiona releases
                tags = src.tags() if hasattr(src, 'tags') else {}
        except FionaError as e:
            raise ResourceError(
                f"Failed to open vector layer {self._filename}: {e}") from e

        self._metadata = {str(k): str(v) for k, v in (tags or {}).items()}
        logger.debug("Opened vector layer %s:%s (%s, %d features)",
                     self._filename, self._layer_name, self._driver,
                     self._feature_count)

    def format(self) -> str:
        return self._driver

    def projection(self) -> str:
        return self._projection

    def layer_name(self) -> str:
        """Name of the opened layer."""
        return self._layer_name

    def feature_count(self) -> int:
        """Number of features in the layer."""
        return self._feature_count

    def schema(self) -> Dict[str, Any]:
        """Layer schema as ``{'geometry': ..., 'properties': {...}}``."""
        return dict(self._schema)

    def bounds(self) -> Tuple[float, float, float, float]:
        """Layer extent as ``(min_x, min_y, max_x, max_y)``."""
        return self._layer_bounds
