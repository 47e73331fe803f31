"""
Shared fixtures for projection tests.

Reference points are published LINZ conversions between NZGD2000
geographic coordinates and the NZCS2000 / NZTM2000 projections.
"""

import pytest

from nzproj.common.units import dms_to_degrees
from nzproj.systems import nzcs2000, nztm2000


# NZGD2000  41° 43' 44.6973" S  172° 29' 58.2847" E
# NZCS2000  6,919,056.80 mN     2,958,434.27 mE
# NZTM2000  5,380,181.71 mN     1,558,376.32 mE
#
# NZGD2000  44° 40' 24.6238" S  167° 55' 26.6376" E
# NZCS2000  6,580,692.05 mN     2,597,661.53 mE
# NZTM2000  5,040,771.40 mN     1,197,666.98 mE
NZ_REFERENCE_POINTS = [
    {
        "lon": dms_to_degrees(172, 29, 58.2847),
        "lat": dms_to_degrees(-41, 43, 44.6973),
        "nzcs": (2958434.27, 6919056.80),
        "nztm": (1558376.32, 5380181.71),
    },
    {
        "lon": dms_to_degrees(167, 55, 26.6376),
        "lat": dms_to_degrees(-44, 40, 24.6238),
        "nzcs": (2597661.53, 6580692.05),
        "nztm": (1197666.98, 5040771.40),
    },
]

# Published to 6 decimal places of a degree only
NZ_ROUNDED_POINT = {
    "lon": 168.791399,
    "lat": -45.343956,
    "nzcs": (2669944.56, 6509882.69),
    "nztm": (1270291.48, 4970217.78),
}


@pytest.fixture
def nzcs():
    """NZCS2000 coordinate system."""
    return nzcs2000()


@pytest.fixture
def nztm():
    """NZTM2000 coordinate system."""
    return nztm2000()


@pytest.fixture(params=range(len(NZ_REFERENCE_POINTS)), ids=["tasman", "fiordland"])
def reference_point(request):
    """One published LINZ reference point."""
    return NZ_REFERENCE_POINTS[request.param]


@pytest.fixture
def rounded_point():
    """LINZ point whose geographic coordinates are rounded to 1e-6 degrees."""
    return NZ_ROUNDED_POINT
