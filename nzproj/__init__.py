"""
nzproj: Lambert Conformal Conic and Transverse Mercator projection engines,
with the New Zealand coordinate systems NZCS2000 and NZTM2000 built on them.

Example Usage
-------------
>>> from nzproj import nztm2000
>>> nztm = nztm2000()
>>> x, y = nztm.forward(172.49952353, -41.72908258)
>>> lon, lat = nztm.inverse(x, y)
"""

from nzproj.common import (
    ConvergenceError,
    GeographicExtent,
    InvalidParameterError,
    ProjectedBounds,
    ProjectionError,
)
from nzproj.geospatial import (
    GRS80,
    WGS84,
    EllipsoidParameters,
    InverseSolverConfig,
    LambertConformalConic,
    LambertConformalConicParams,
    Projection,
    TransverseMercator,
    TransverseMercatorParams,
    bounding_box_corner_transform,
)
from nzproj.systems import (
    CoordinateSystem,
    available_coordinate_systems,
    get_coordinate_system,
    nzcs2000,
    nztm2000,
)

__version__ = "0.1.0"

__all__ = [
    "ConvergenceError",
    "GeographicExtent",
    "InvalidParameterError",
    "ProjectedBounds",
    "ProjectionError",
    "GRS80",
    "WGS84",
    "EllipsoidParameters",
    "InverseSolverConfig",
    "LambertConformalConic",
    "LambertConformalConicParams",
    "Projection",
    "TransverseMercator",
    "TransverseMercatorParams",
    "bounding_box_corner_transform",
    "CoordinateSystem",
    "available_coordinate_systems",
    "get_coordinate_system",
    "nzcs2000",
    "nztm2000",
]
