"""
Transverse Mercator Projection (Redfearn series).

The Transverse Mercator projection is a conformal cylindrical map projection
in which the surface of the ellipsoid is projected onto a cylinder tangent
along a meridian. Scale along that central meridian is k0.

Scientific Context
------------------
Domain: Cartography, mathematical geodesy
Model: Redfearn's series (1948) in powers of the longitude difference

The forward transform corrects northing with terms up to the 8th power and
easting with terms up to the 6th power of Δλ = λ - λ0. The inverse recovers
a footpoint latitude from the meridian arc through the rectifying latitude
series, then corrects latitude and longitude with series in powers of
E / (k0 ν) up to the 7th order. Both directions are closed-form; there is
no iteration.

Accuracy
--------
Truncation error is below a millimetre within about 3° of the central
meridian and grows quickly beyond 6°. This is the intended operating
envelope of a Transverse Mercator system.

References
----------
- Redfearn, J.C.B. (1948). Transverse Mercator formulae. Empire Survey
  Review, 9(69), 318-322.
- ICSM (2020). Geocentric Datum of Australia 2020 Technical Manual, 5.3.
- LINZ (2009). New Zealand Transverse Mercator 2000, LINZS25002.
"""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

from nzproj.common.errors import InvalidParameterError
from nzproj.common.logging_config import get_logger
from nzproj.common.units import AngleLike, LengthLike, to_meters, to_radians
from nzproj.geospatial.ellipsoid import (
    EllipsoidParameters,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
)
from nzproj.geospatial.projections import (
    Coordinate,
    Projection,
    as_output,
    ellipsoid_proj4_terms,
    wrap_longitude_difference,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class TransverseMercatorParams:
    """Parameters describing a Transverse Mercator projection.

    Attributes
    ----------
    semi_major_axis : float
        Semi-major axis of the reference ellipsoid in meters.
    flattening : float
        Flattening of the reference ellipsoid.
    origin_latitude, origin_longitude : float
        Projection origin in radians; origin_longitude is the central
        meridian.
    false_northing, false_easting : float
        False coordinates in meters.
    scale_factor : float
        Central meridian scale factor k0.
    """
    semi_major_axis: float
    flattening: float
    origin_latitude: float
    origin_longitude: float
    false_northing: float = 0.0
    false_easting: float = 0.0
    scale_factor: float = 1.0

    @property
    def ellipsoid(self) -> EllipsoidParameters:
        return EllipsoidParameters(a=self.semi_major_axis, f=self.flattening)

    @classmethod
    def from_degrees(
        cls,
        ellipsoid: EllipsoidParameters,
        origin_latitude: AngleLike,
        origin_longitude: AngleLike,
        false_northing: LengthLike = 0.0,
        false_easting: LengthLike = 0.0,
        scale_factor: float = 1.0
    ) -> 'TransverseMercatorParams':
        """Create parameters from angles in degrees (or pint quantities)."""
        return cls(
            semi_major_axis=ellipsoid.a,
            flattening=ellipsoid.f,
            origin_latitude=to_radians(origin_latitude, "origin_latitude"),
            origin_longitude=to_radians(origin_longitude, "origin_longitude"),
            false_northing=to_meters(false_northing, "false_northing"),
            false_easting=to_meters(false_easting, "false_easting"),
            scale_factor=float(scale_factor),
        )


@dataclass(frozen=True)
class TransverseMercatorConstants:
    """Constants derived once from `TransverseMercatorParams`.

    Attributes
    ----------
    ellipsoid : EllipsoidParameters
        Validated reference ellipsoid.
    b : float
        Semi-minor axis in meters.
    e, e2, e4, e6 : float
        Eccentricity and its even powers.
    A0, A2, A4, A6 : float
        Meridian arc series coefficients.
    m0 : float
        Meridian arc length from the equator to the origin latitude.
    n : float
        Third flattening (a - b) / (a + b).
    G : float
        Mean length of one degree of meridian (rectifying radius · π/180).
    """
    ellipsoid: EllipsoidParameters
    b: float
    e: float
    e2: float
    e4: float
    e6: float
    A0: float
    A2: float
    A4: float
    A6: float
    m0: float
    n: float
    G: float


def _meridian_arc(phi, a: float, A0: float, A2: float, A4: float, A6: float):
    return a * (A0 * phi - A2 * np.sin(2.0 * phi) + A4 * np.sin(4.0 * phi) - A6 * np.sin(6.0 * phi))


def derive_constants(params: TransverseMercatorParams) -> TransverseMercatorConstants:
    """Derive the ellipsoid powers and meridian arc coefficients.

    Raises
    ------
    InvalidParameterError
        If the ellipsoid is invalid or the scale factor is not positive.
    """
    k0 = params.scale_factor
    if not math.isfinite(k0) or k0 <= 0.0:
        raise InvalidParameterError(
            f"Central meridian scale factor must be positive, got {k0}",
            parameter="scale_factor",
            value=k0,
        )

    ellipsoid = params.ellipsoid
    a = ellipsoid.a
    e2 = ellipsoid.e2
    e4 = ellipsoid.e4
    e6 = ellipsoid.e6

    A0 = 1.0 - (e2 / 4.0) - (3.0 * e4 / 64.0) - (5.0 * e6 / 256.0)
    A2 = 3.0 * (e2 + e4 / 4.0 + 15.0 * e6 / 128.0) / 8.0
    A4 = 15.0 * (e4 + 3.0 * e6 / 4.0) / 256.0
    A6 = 35.0 * e6 / 3072.0

    n = ellipsoid.n
    n2 = n ** 2
    n4 = n ** 4
    G = a * (1.0 - n) * (1.0 - n2) * (1.0 + 9.0 * n2 / 4.0 + 225.0 * n4 / 64.0) * math.pi / 180.0

    return TransverseMercatorConstants(
        ellipsoid=ellipsoid,
        b=ellipsoid.b,
        e=ellipsoid.e,
        e2=e2,
        e4=e4,
        e6=e6,
        A0=A0,
        A2=A2,
        A4=A4,
        A6=A6,
        m0=float(_meridian_arc(params.origin_latitude, a, A0, A2, A4, A6)),
        n=n,
        G=G,
    )


class TransverseMercator(Projection):
    """Transverse Mercator projection evaluated with Redfearn's series.

    Parameters
    ----------
    params : TransverseMercatorParams
        Projection parameters (angles in radians).

    Raises
    ------
    InvalidParameterError
        If the ellipsoid or scale factor is invalid.

    Notes
    -----
    Distortion and series truncation error increase with distance from the
    central meridian. Typically valid within 3° of the central meridian for
    millimetre accuracy.
    """

    def __init__(self, params: TransverseMercatorParams):
        try:
            constants = derive_constants(params)
        except InvalidParameterError as e:
            logger.error(f"Invalid Transverse Mercator parameters: {e.message}")
            raise

        self._params = params
        self._constants = constants

        logger.debug(
            f"Transverse Mercator constants: e2={constants.e2:.12e} A0={constants.A0:.12f} "
            f"A2={constants.A2:.12e} A4={constants.A4:.12e} A6={constants.A6:.12e} "
            f"m0={constants.m0:.4f}"
        )

    @property
    def params(self) -> TransverseMercatorParams:
        return self._params

    @property
    def constants(self) -> TransverseMercatorConstants:
        return self._constants

    @property
    def name(self) -> str:
        return f"Transverse Mercator (CM={np.degrees(self._params.origin_longitude):g}°)"

    @property
    def proj4_string(self) -> str:
        p = self._params
        return (
            f"+proj=tmerc +lat_0={float(np.degrees(p.origin_latitude))!r} "
            f"+lon_0={float(np.degrees(p.origin_longitude))!r} "
            f"+k={p.scale_factor!r} +x_0={p.false_easting!r} +y_0={p.false_northing!r} "
            f"{ellipsoid_proj4_terms(p.semi_major_axis, p.flattening)} +units=m +no_defs"
        )

    @property
    def preserves_angles(self) -> bool:
        return True

    @property
    def preserves_area(self) -> bool:
        return False

    def meridian_arc(self, lat: ArrayLike) -> Coordinate:
        """Meridian arc length in meters from the equator to ``lat`` (degrees)."""
        phi = np.radians(np.asarray(lat, dtype=np.float64))
        return as_output(self._m(phi))

    def _m(self, phi):
        c = self._constants
        return _meridian_arc(phi, self._params.semi_major_axis, c.A0, c.A2, c.A4, c.A6)

    def forward(self, lon: ArrayLike, lat: ArrayLike) -> Tuple[Coordinate, Coordinate]:
        lam = np.radians(np.asarray(lon, dtype=np.float64))
        phi = np.radians(np.asarray(lat, dtype=np.float64))
        x, y = self._forward(lam, phi)
        return as_output(x), as_output(y)

    def _forward(self, lam, phi):
        p = self._params
        c = self._constants
        k0 = p.scale_factor

        t = np.tan(phi)
        t2 = t ** 2
        t4 = t ** 4
        t6 = t ** 6

        w = wrap_longitude_difference(lam - p.origin_longitude)
        w2 = w ** 2
        w4 = w ** 4
        w6 = w ** 6
        w8 = w ** 8

        nu = radius_of_curvature_prime_vertical(phi, c.ellipsoid)
        psi = nu / radius_of_curvature_meridian(phi, c.ellipsoid)
        psi2 = psi ** 2
        psi3 = psi ** 3
        psi4 = psi ** 4

        sin_phi = np.sin(phi)
        cos_phi = np.cos(phi)
        cos_phi2 = cos_phi ** 2
        cos_phi3 = cos_phi ** 3
        cos_phi4 = cos_phi ** 4
        cos_phi5 = cos_phi ** 5
        cos_phi6 = cos_phi ** 6
        cos_phi7 = cos_phi ** 7

        n_t1 = w2 * nu * sin_phi * cos_phi / 2.0
        n_t2 = w4 * nu * sin_phi * cos_phi3 * (4.0 * psi2 + psi - t2) / 24.0
        n_t3 = w6 * nu * sin_phi * cos_phi5 * (
            8.0 * psi4 * (11.0 - 24.0 * t2)
            - 28.0 * psi3 * (1.0 - 6.0 * t2)
            + psi2 * (1.0 - 32.0 * t2)
            - 2.0 * psi * t2
            + t4
        ) / 720.0
        n_t4 = w8 * nu * sin_phi * cos_phi7 * (1385.0 - 3111.0 * t2 + 543.0 * t4 - t6) / 40320.0

        northing = p.false_northing + k0 * (self._m(phi) - c.m0 + n_t1 + n_t2 + n_t3 + n_t4)

        e_t1 = w2 * cos_phi2 * (psi - t2) / 6.0
        e_t2 = w4 * cos_phi4 * (
            4.0 * psi3 * (1.0 - 6.0 * t2)
            + psi2 * (1.0 + 8.0 * t2)
            - 2.0 * psi * t2
            + t4
        ) / 120.0
        e_t3 = w6 * cos_phi6 * (61.0 - 479.0 * t2 + 179.0 * t4 - t6) / 5040.0

        easting = p.false_easting + k0 * nu * w * cos_phi * (1.0 + e_t1 + e_t2 + e_t3)

        return easting, northing

    def inverse(self, x: ArrayLike, y: ArrayLike) -> Tuple[Coordinate, Coordinate]:
        lam, phi = self._inverse(
            np.asarray(x, dtype=np.float64),
            np.asarray(y, dtype=np.float64)
        )
        return as_output(np.degrees(lam)), as_output(np.degrees(phi))

    def footpoint_latitude(self, y: ArrayLike) -> Coordinate:
        """Footpoint latitude in degrees for a projected northing."""
        phi = self._footpoint(np.asarray(y, dtype=np.float64))
        return as_output(np.degrees(phi))

    def _footpoint(self, y):
        p = self._params
        c = self._constants

        m = c.m0 + (y - p.false_northing) / p.scale_factor

        n = c.n
        n2 = n ** 2
        n3 = n ** 3
        n4 = n ** 4

        sigma = m * np.pi / (180.0 * c.G)

        return (
            sigma
            + (3.0 * n / 2.0 - 27.0 * n3 / 32.0) * np.sin(2.0 * sigma)
            + (21.0 * n2 / 16.0 - 55.0 * n4 / 32.0) * np.sin(4.0 * sigma)
            + (151.0 * n3 / 96.0) * np.sin(6.0 * sigma)
            + (1097.0 * n4 / 512.0) * np.sin(8.0 * sigma)
        )

    def _inverse(self, x, y):
        p = self._params
        c = self._constants
        k0 = p.scale_factor

        phi_d = self._footpoint(y)

        rho_d = radius_of_curvature_meridian(phi_d, c.ellipsoid)
        nu_d = radius_of_curvature_prime_vertical(phi_d, c.ellipsoid)

        t = np.tan(phi_d)
        t2 = t ** 2
        t4 = t ** 4
        t6 = t ** 6

        psi = nu_d / rho_d
        psi2 = psi ** 2
        psi3 = psi ** 3
        psi4 = psi ** 4

        easting = x - p.false_easting

        x1 = easting / (k0 * nu_d)
        x3 = x1 ** 3
        x5 = x1 ** 5
        x7 = x1 ** 7

        sec_phi_d = 1.0 / np.cos(phi_d)
        lat_factor = t * easting / (k0 * rho_d)

        lat_t1 = lat_factor * x1 / 2.0
        lat_t2 = lat_factor * x3 * (-4.0 * psi2 + 9.0 * psi * (1.0 - t2) + 12.0 * t2) / 24.0
        lat_t3 = lat_factor * x5 * (
            8.0 * psi4 * (11.0 - 24.0 * t2)
            - 12.0 * psi3 * (21.0 - 71.0 * t2)
            + 15.0 * psi2 * (15.0 - 98.0 * t2 + 15.0 * t4)
            + 180.0 * psi * (5.0 * t2 - 3.0 * t4)
            + 360.0 * t4
        ) / 720.0
        lat_t4 = lat_factor * x7 * (1385.0 + 3633.0 * t2 + 4095.0 * t4 + 1575.0 * t6) / 40320.0

        phi = phi_d - lat_t1 + lat_t2 - lat_t3 + lat_t4

        lon_t1 = x1 * sec_phi_d
        lon_t2 = x3 * sec_phi_d * (psi + 2.0 * t2) / 6.0
        lon_t3 = x5 * sec_phi_d * (
            -4.0 * psi3 * (1.0 - 6.0 * t2)
            + psi2 * (9.0 - 68.0 * t2)
            + 72.0 * psi * t2
            + 24.0 * t4
        ) / 120.0
        lon_t4 = x7 * sec_phi_d * (61.0 + 662.0 * t2 + 1320.0 * t4 + 720.0 * t6) / 5040.0

        lam = p.origin_longitude + lon_t1 - lon_t2 + lon_t3 - lon_t4

        return lam, phi
