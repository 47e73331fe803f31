"""
Common utilities and infrastructure for the projection engines.

This package provides foundational components used across all modules:
- Geodetic constants with provenance
- Unit registry for angles and lengths
- Extent and bounds value types
- Exception hierarchy
- Logging infrastructure
"""

from nzproj.common.constants import Constant, GeodeticConstants
from nzproj.common.errors import ConvergenceError, InvalidParameterError, ProjectionError
from nzproj.common.logging_config import get_logger, set_package_log_level
from nzproj.common.types import GeographicExtent, ProjectedBounds
from nzproj.common.units import Q_, dms_to_degrees, to_meters, to_radians, ureg

__all__ = [
    "Constant",
    "GeodeticConstants",
    "ConvergenceError",
    "InvalidParameterError",
    "ProjectionError",
    "get_logger",
    "set_package_log_level",
    "GeographicExtent",
    "ProjectedBounds",
    "Q_",
    "dms_to_degrees",
    "to_meters",
    "to_radians",
    "ureg",
]
