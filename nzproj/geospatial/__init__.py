"""
Geospatial Module: reference ellipsoids and map projection engines.

This module provides:
- Reference ellipsoid models and radii of curvature
- The projection interface and bounding box corner transform
- Lambert Conformal Conic (two standard parallels)
- Transverse Mercator (Redfearn series)
"""

from nzproj.geospatial.ellipsoid import (
    GRS80,
    WGS84,
    EllipsoidParameters,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
)

from nzproj.geospatial.projections import (
    Projection,
    bounding_box_corner_transform,
)

from nzproj.geospatial.lambert_conformal_conic import (
    InverseSolverConfig,
    LambertConformalConic,
    LambertConformalConicConstants,
    LambertConformalConicParams,
)

from nzproj.geospatial.transverse_mercator import (
    TransverseMercator,
    TransverseMercatorConstants,
    TransverseMercatorParams,
)

__all__ = [
    # Ellipsoids
    "GRS80",
    "WGS84",
    "EllipsoidParameters",
    "radius_of_curvature_meridian",
    "radius_of_curvature_prime_vertical",
    # Projection interface
    "Projection",
    "bounding_box_corner_transform",
    # Lambert Conformal Conic
    "InverseSolverConfig",
    "LambertConformalConic",
    "LambertConformalConicConstants",
    "LambertConformalConicParams",
    # Transverse Mercator
    "TransverseMercator",
    "TransverseMercatorConstants",
    "TransverseMercatorParams",
]
