"""
Reference Ellipsoid Models.

This module defines the reference ellipsoid and the quantities derived from
it that both projection families depend on: eccentricity and its even
powers, the semi-minor axis, the third flattening, and the two principal
radii of curvature.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: Oblate ellipsoid of revolution

An ellipsoid is fully determined by its semi-major axis ``a`` and its
flattening ``f``. Everything else is derived:

    e² = 2f − f²            first eccentricity squared
    b  = a(1 − f)           semi-minor axis
    n  = (a − b)/(a + b)    third flattening

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
- ICSM (2020). Geocentric Datum of Australia 2020 Technical Manual, ch. 5.
"""

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from nzproj.common.constants import GeodeticConstants
from nzproj.common.errors import InvalidParameterError
from nzproj.common.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    e : float
        First eccentricity: e = sqrt(2f - f²)
    e2, e4, e6 : float
        Even powers of the eccentricity used by the projection series.
    b : float
        Semi-minor axis (polar radius) in meters.
    n : float
        Third flattening: n = (a - b) / (a + b)

    Raises
    ------
    InvalidParameterError
        If ``a`` is not a positive finite number or ``f`` is outside
        ``[0, 1)``; such values do not describe an oblate ellipsoid and
        would make every derived constant non-finite.
    """
    a: float
    f: float
    name: str = "custom"

    def __post_init__(self):
        """Validate the ellipsoid shape."""
        if not math.isfinite(self.a) or self.a <= 0.0:
            logger.error(f"Rejected ellipsoid '{self.name}': semi-major axis {self.a}")
            raise InvalidParameterError(
                f"Semi-major axis must be a positive finite length, got {self.a}",
                parameter="a",
                value=self.a,
            )
        if not math.isfinite(self.f) or not 0.0 <= self.f < 1.0:
            logger.error(f"Rejected ellipsoid '{self.name}': flattening {self.f}")
            raise InvalidParameterError(
                f"Flattening must lie in [0, 1), got {self.f}",
                parameter="f",
                value=self.f,
            )

    @classmethod
    def from_inverse_flattening(
        cls,
        a: float,
        inverse_flattening: float,
        name: str = "custom"
    ) -> 'EllipsoidParameters':
        """Create an ellipsoid from its semi-major axis and 1/f.

        Parameters
        ----------
        a : float
            Semi-major axis in meters.
        inverse_flattening : float
            Reciprocal of the flattening; ``inf`` for a sphere.
        name : str
            Identifier for the ellipsoid.

        Returns
        -------
        EllipsoidParameters
        """
        if inverse_flattening == 0.0:
            raise InvalidParameterError(
                "Inverse flattening must be non-zero",
                parameter="inverse_flattening",
                value=inverse_flattening,
            )
        return cls(a=a, f=1.0 / inverse_flattening, name=name)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return 2.0 * self.f - self.f ** 2

    @property
    def e(self) -> float:
        """First eccentricity."""
        return math.sqrt(self.e2)

    @property
    def e4(self) -> float:
        return self.e ** 4

    @property
    def e6(self) -> float:
        return self.e ** 6

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1.0 - self.f)

    @property
    def n(self) -> float:
        """Third flattening."""
        return (self.a - self.b) / (self.a + self.b)

    @property
    def inverse_flattening(self) -> float:
        return math.inf if self.f == 0.0 else 1.0 / self.f


# GRS80 ellipsoid - the reference surface of NZGD2000
GRS80 = EllipsoidParameters.from_inverse_flattening(
    a=GeodeticConstants.GRS80_SEMI_MAJOR_AXIS.value,
    inverse_flattening=GeodeticConstants.GRS80_INVERSE_FLATTENING.value,
    name="GRS80"
)

WGS84 = EllipsoidParameters.from_inverse_flattening(
    a=GeodeticConstants.WGS84_SEMI_MAJOR_AXIS.value,
    inverse_flattening=GeodeticConstants.WGS84_INVERSE_FLATTENING.value,
    name="WGS84"
)


def radius_of_curvature_meridian(
    latitude_rad: ArrayLike,
    ellipsoid: EllipsoidParameters = GRS80
) -> NDArray[np.float64]:
    """Compute the radius of curvature in the meridian plane.

    Parameters
    ----------
    latitude_rad : float or array_like
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: GRS80).

    Returns
    -------
    float or ndarray
        Radius of curvature ρ in meters.

    Notes
    -----
    ρ = a(1 - e²) / (1 - e² sin²φ)^(3/2)
    """
    sin_lat = np.sin(latitude_rad)
    denominator = (1.0 - ellipsoid.e2 * sin_lat ** 2) ** 1.5
    return ellipsoid.a * (1.0 - ellipsoid.e2) / denominator


def radius_of_curvature_prime_vertical(
    latitude_rad: ArrayLike,
    ellipsoid: EllipsoidParameters = GRS80
) -> NDArray[np.float64]:
    """Compute the radius of curvature in the prime vertical.

    Parameters
    ----------
    latitude_rad : float or array_like
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: GRS80).

    Returns
    -------
    float or ndarray
        Radius of curvature ν in meters.

    Notes
    -----
    ν = a / (1 - e² sin²φ)^(1/2)
    """
    sin_lat = np.sin(latitude_rad)
    denominator = np.sqrt(1.0 - ellipsoid.e2 * sin_lat ** 2)
    return ellipsoid.a / denominator
