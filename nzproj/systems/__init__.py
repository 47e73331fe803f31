"""
Named New Zealand coordinate systems.

Each system wraps one projection engine with its EPSG code, area of use,
projected bounds and center.
"""

from typing import Callable, Dict, List

from nzproj.common.logging_config import get_logger
from nzproj.systems.base import CoordinateSystem
from nzproj.systems.nzcs2000 import (
    NZCS2000_EPSG,
    NZCS2000_EXTENT,
    new_zealand_lambert_conformal_conic,
    nzcs2000,
)
from nzproj.systems.nztm2000 import (
    NZTM2000_EPSG,
    NZTM2000_EXTENT,
    new_zealand_transverse_mercator,
    nztm2000,
)

logger = get_logger(__name__)

_REGISTRY: Dict[int, Callable[[], CoordinateSystem]] = {
    NZCS2000_EPSG: nzcs2000,
    NZTM2000_EPSG: nztm2000,
}


def available_coordinate_systems() -> List[int]:
    """EPSG codes of the coordinate systems this package defines."""
    return sorted(_REGISTRY)


def get_coordinate_system(epsg: int) -> CoordinateSystem:
    """Build the coordinate system registered under an EPSG code.

    Parameters
    ----------
    epsg : int
        EPSG code, e.g. 2193 for NZTM2000.

    Returns
    -------
    CoordinateSystem

    Raises
    ------
    KeyError
        If no system is registered under ``epsg``.
    """
    try:
        factory = _REGISTRY[int(epsg)]
    except KeyError:
        logger.error(f"No coordinate system registered for EPSG:{epsg}")
        raise KeyError(f"No coordinate system found with EPSG code {epsg}") from None
    return factory()


__all__ = [
    "CoordinateSystem",
    "NZCS2000_EPSG",
    "NZCS2000_EXTENT",
    "NZTM2000_EPSG",
    "NZTM2000_EXTENT",
    "available_coordinate_systems",
    "get_coordinate_system",
    "new_zealand_lambert_conformal_conic",
    "new_zealand_transverse_mercator",
    "nzcs2000",
    "nztm2000",
]
