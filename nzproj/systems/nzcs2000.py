"""
New Zealand Continental Shelf Lambert Conformal 2000 (NZCS2000, EPSG:3851).

The extents of NZCS2000 are 160°E to 170°W and 25°S to 60°S. A Lambert
conformal conic projection was chosen rather than Transverse Mercator
because the latter becomes excessively distorted when extended over large
longitudinal ranges.

https://www.linz.govt.nz/data/geodetic-system/datums-projections-heights/projections/new-zealand-continental-shelf-lambert
"""

from nzproj.common.types import GeographicExtent
from nzproj.geospatial.ellipsoid import GRS80
from nzproj.geospatial.lambert_conformal_conic import (
    LambertConformalConic,
    LambertConformalConicParams,
)
from nzproj.systems.base import CoordinateSystem

NZCS2000_EPSG = 3851

# 170°W written as 190°E so the extent does not wrap; forward accepts either form
NZCS2000_EXTENT = GeographicExtent(min_x=160.0, min_y=-60.0, max_x=190.0, max_y=-25.0)


def new_zealand_lambert_conformal_conic() -> LambertConformalConic:
    """The NZCS2000 projection engine on the GRS80 ellipsoid."""
    return LambertConformalConic(
        LambertConformalConicParams.from_degrees(
            GRS80,
            first_standard_parallel=-37.5,
            second_standard_parallel=-44.5,
            origin_latitude=-41.0,
            origin_longitude=173.0,
            false_northing=7_000_000.0,
            false_easting=3_000_000.0,
        )
    )


def nzcs2000() -> CoordinateSystem:
    """New Zealand Continental Shelf Lambert Conformal 2000."""
    return CoordinateSystem(
        name="NZGD2000 / New Zealand Continental Shelf Lambert Conformal 2000",
        epsg=NZCS2000_EPSG,
        projection=new_zealand_lambert_conformal_conic(),
        extent=NZCS2000_EXTENT,
    )
