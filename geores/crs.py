# -*- coding: utf-8 -*-
"""
CRS Parsing - Well-Known-Text to spatial reference conversion.

Thin, pure functions around ``pyproj.CRS``. A spatial reference is a value
produced by parsing text; nothing here holds backend state. Parse failures
surface as ``geores.exceptions.CRSError`` so callers can recover.

Dependencies
------------
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
import logging
from typing import Any

# Third-party
import pyproj
from pyproj.exceptions import CRSError as _PyprojCRSError

# GEORES internal
from geores.exceptions import CRSError

logger = logging.getLogger(__name__)


def parse_wkt(wkt: str) -> pyproj.CRS:
    """Parse a WKT string into a spatial reference.

    Parameters
    ----------
    wkt : str
        Coordinate reference system in Well-Known-Text format.

    Returns
    -------
    pyproj.CRS
        Parsed spatial reference.

    Raises
    ------
    CRSError
        If *wkt* is empty or cannot be parsed.
    """
    if not isinstance(wkt, str) or not wkt.strip():
        raise CRSError("Undefined CRS: projection text is empty")
    try:
        return pyproj.CRS.from_wkt(wkt)
    except _PyprojCRSError as e:
        raise CRSError(f"Invalid CRS definition: {e}") from e


def is_valid_wkt(wkt: str) -> bool:
    """Return True if *wkt* parses to a spatial reference."""
    try:
        parse_wkt(wkt)
    except CRSError as e:
        logger.warning("CRS check failed: %s", e)
        return False
    return True


def to_wkt(crs_like: Any) -> str:
    """Normalize a CRS definition to WKT.

    Accepts anything ``pyproj.CRS.from_user_input`` accepts (EPSG codes,
    ``'EPSG:4326'`` strings, PROJ strings, WKT, ``pyproj.CRS`` objects,
    or objects exposing ``to_wkt``). An empty string or ``None`` maps to
    the empty string, the unbound projection.

    Parameters
    ----------
    crs_like : Any
        CRS definition.

    Returns
    -------
    str
        WKT text, or ``''`` for an empty input.

    Raises
    ------
    CRSError
        If the definition cannot be interpreted.
    """
    if crs_like is None or crs_like == '':
        return ''
    try:
        return pyproj.CRS.from_user_input(crs_like).to_wkt()
    except _PyprojCRSError as e:
        raise CRSError(f"Invalid CRS definition: {e}") from e
