"""
New Zealand Transverse Mercator 2000 (NZTM2000, EPSG:2193).

NZTM2000 is the projection used for New Zealand's Topo50 1:50,000 and other
small scale mapping. Spatial data users are encouraged to use NZTM2000 where
a projection is required within mainland New Zealand.

https://www.linz.govt.nz/data/geodetic-system/datums-projections-and-heights/projections/new-zealand-transverse-mercator-2000
"""

from nzproj.common.types import GeographicExtent
from nzproj.geospatial.ellipsoid import GRS80
from nzproj.geospatial.transverse_mercator import (
    TransverseMercator,
    TransverseMercatorParams,
)
from nzproj.systems.base import CoordinateSystem

NZTM2000_EPSG = 2193

NZTM2000_EXTENT = GeographicExtent(min_x=166.37, min_y=-47.33, max_x=178.63, max_y=-34.1)


def new_zealand_transverse_mercator() -> TransverseMercator:
    """The NZTM2000 projection engine on the GRS80 ellipsoid."""
    return TransverseMercator(
        TransverseMercatorParams.from_degrees(
            GRS80,
            origin_latitude=0.0,
            origin_longitude=173.0,
            false_northing=10_000_000.0,
            false_easting=1_600_000.0,
            scale_factor=0.9996,
        )
    )


def nztm2000() -> CoordinateSystem:
    """New Zealand Transverse Mercator 2000."""
    return CoordinateSystem(
        name="NZGD2000 / New Zealand Transverse Mercator 2000",
        epsg=NZTM2000_EPSG,
        projection=new_zealand_transverse_mercator(),
        extent=NZTM2000_EXTENT,
    )
