"""
Lambert Conformal Conic Projection (two standard parallels).

The Lambert Conformal Conic projection is a projection in which geographic
meridians are represented by straight lines which meet at the projection of
the pole, and geographic parallels are represented by arcs of circles
centred on that point. With two standard parallels the cone is secant and
scale is true along both of them.

Scientific Context
------------------
Domain: Cartography, mathematical geodesy
Model: Ellipsoidal conformal conic (Snyder 1987, ch. 15)

For latitude φ on an ellipsoid with eccentricity e:

    m(φ) = cos φ / sqrt(1 - e² sin² φ)
    t(φ) = tan(π/4 - φ/2) / ((1 - e sin φ) / (1 + e sin φ))^(e/2)
    ρ(φ) = a F t(φ)^n

The cone constant n, the scale constant F and the origin radius ρ0 are
derived once, in that order, from the standard parallels and the origin.

Sign Convention
---------------
n is negative when the standard parallels lie in the southern hemisphere.
The inverse then negates the radius recovered from (x, y) so that
t = (ρ / aF)^(1/n) stays positive.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper
  1395, pp. 104-110.
- LINZ (2009). New Zealand Continental Shelf Lambert Conformal 2000,
  LINZS25004.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike

from nzproj.common.constants import GeodeticConstants
from nzproj.common.errors import ConvergenceError, InvalidParameterError
from nzproj.common.logging_config import get_logger
from nzproj.common.units import AngleLike, LengthLike, to_meters, to_radians
from nzproj.geospatial.ellipsoid import EllipsoidParameters
from nzproj.geospatial.projections import (
    Coordinate,
    Projection,
    as_output,
    ellipsoid_proj4_terms,
    wrap_longitude_difference,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class InverseSolverConfig:
    """Configuration for the iterative latitude solve of the inverse.

    Attributes
    ----------
    tolerance : float
        Convergence threshold in radians on successive latitude estimates.
    max_iterations : int
        Bound on refinement steps before a ConvergenceError is raised.
    """
    tolerance: float = GeodeticConstants.LATITUDE_CONVERGENCE_TOLERANCE.value
    max_iterations: int = int(GeodeticConstants.MAX_INVERSE_ITERATIONS.value)

    def __post_init__(self):
        if not self.tolerance > 0.0:
            raise InvalidParameterError(
                f"Solver tolerance must be positive, got {self.tolerance}",
                parameter="tolerance",
                value=self.tolerance,
            )
        if self.max_iterations < 1:
            raise InvalidParameterError(
                f"Solver needs at least one iteration, got {self.max_iterations}",
                parameter="max_iterations",
                value=self.max_iterations,
            )


@dataclass(frozen=True)
class LambertConformalConicParams:
    """Parameters describing a Lambert Conformal Conic projection.

    Attributes
    ----------
    semi_major_axis : float
        Semi-major axis of the reference ellipsoid in meters.
    flattening : float
        Flattening of the reference ellipsoid.
    first_standard_parallel, second_standard_parallel : float
        Latitudes of the standard parallels in radians.
    origin_latitude, origin_longitude : float
        Projection origin in radians.
    false_northing, false_easting : float
        False coordinates in meters.
    """
    semi_major_axis: float
    flattening: float
    first_standard_parallel: float
    second_standard_parallel: float
    origin_latitude: float
    origin_longitude: float
    false_northing: float = 0.0
    false_easting: float = 0.0

    @property
    def ellipsoid(self) -> EllipsoidParameters:
        return EllipsoidParameters(a=self.semi_major_axis, f=self.flattening)

    @classmethod
    def from_degrees(
        cls,
        ellipsoid: EllipsoidParameters,
        first_standard_parallel: AngleLike,
        second_standard_parallel: AngleLike,
        origin_latitude: AngleLike,
        origin_longitude: AngleLike,
        false_northing: LengthLike = 0.0,
        false_easting: LengthLike = 0.0
    ) -> 'LambertConformalConicParams':
        """Create parameters from angles in degrees (or pint quantities).

        Parameters
        ----------
        ellipsoid : EllipsoidParameters
            Reference ellipsoid.
        first_standard_parallel, second_standard_parallel : float or Quantity
            Standard parallels; bare numbers are degrees.
        origin_latitude, origin_longitude : float or Quantity
            Projection origin; bare numbers are degrees.
        false_northing, false_easting : float or Quantity
            False coordinates; bare numbers are meters.
        """
        return cls(
            semi_major_axis=ellipsoid.a,
            flattening=ellipsoid.f,
            first_standard_parallel=to_radians(first_standard_parallel, "first_standard_parallel"),
            second_standard_parallel=to_radians(second_standard_parallel, "second_standard_parallel"),
            origin_latitude=to_radians(origin_latitude, "origin_latitude"),
            origin_longitude=to_radians(origin_longitude, "origin_longitude"),
            false_northing=to_meters(false_northing, "false_northing"),
            false_easting=to_meters(false_easting, "false_easting"),
        )


@dataclass(frozen=True)
class LambertConformalConicConstants:
    """Constants derived once from `LambertConformalConicParams`.

    Attributes
    ----------
    e : float
        Eccentricity of the reference ellipsoid.
    n : float
        Cone constant; negative for a southern-hemisphere cone.
    F : float
        Scale constant.
    rho0 : float
        Radius of the parallel through the origin, in meters.
    """
    e: float
    n: float
    F: float
    rho0: float


def _m(phi, e: float):
    return np.cos(phi) / np.sqrt(1.0 - e ** 2 * np.sin(phi) ** 2)


def _t(phi, e: float):
    e_sin = e * np.sin(phi)
    return np.tan(np.pi / 4.0 - phi / 2.0) / ((1.0 - e_sin) / (1.0 + e_sin)) ** (e / 2.0)


def _rho(phi, a: float, F: float, n: float, e: float):
    return a * F * _t(phi, e) ** n


def derive_constants(params: LambertConformalConicParams) -> LambertConformalConicConstants:
    """Derive e, n, F and ρ0, in dependency order.

    Raises
    ------
    InvalidParameterError
        If the parameters do not define a cone: coincident standard
        parallels, a parallel at a pole, or parallels symmetric about the
        equator (n = 0).
    """
    ellipsoid = params.ellipsoid
    phi1 = params.first_standard_parallel
    phi2 = params.second_standard_parallel

    for label, phi in (("first_standard_parallel", phi1), ("second_standard_parallel", phi2)):
        if not math.isfinite(phi) or abs(phi) >= math.pi / 2.0:
            raise InvalidParameterError(
                f"Standard parallel must lie strictly between the poles, got {phi} rad",
                parameter=label,
                value=phi,
            )
    if phi1 == phi2:
        raise InvalidParameterError(
            "Standard parallels must differ; a tangent cone is not supported",
            parameter="second_standard_parallel",
            value=phi2,
        )

    e = ellipsoid.e
    with np.errstate(divide="ignore", invalid="ignore"):
        n = float(
            (np.log(_m(phi1, e)) - np.log(_m(phi2, e)))
            / (np.log(_t(phi1, e)) - np.log(_t(phi2, e)))
        )
        F = float(_m(phi1, e) / (n * _t(phi1, e) ** n))
        rho0 = float(_rho(params.origin_latitude, ellipsoid.a, F, n, e))

    # rho0 is zero when the origin is the apex of the cone
    for label, value, may_be_zero in (("n", n, False), ("F", F, False), ("rho0", rho0, True)):
        if not math.isfinite(value) or (value == 0.0 and not may_be_zero):
            raise InvalidParameterError(
                f"Derived constant {label} = {value} does not define a cone; "
                f"check the standard parallels and origin latitude",
                parameter=label,
                value=value,
            )

    return LambertConformalConicConstants(e=e, n=n, F=F, rho0=rho0)


class LambertConformalConic(Projection):
    """Lambert Conformal Conic projection with two standard parallels.

    Parameters
    ----------
    params : LambertConformalConicParams
        Projection parameters (angles in radians).
    solver : InverseSolverConfig, optional
        Tolerance and iteration bound for the inverse latitude solve.

    Raises
    ------
    InvalidParameterError
        If the ellipsoid or the cone is degenerate.

    Notes
    -----
    All derived constants are computed in the constructor and held in a
    frozen `LambertConformalConicConstants`; instances are immutable and
    may be shared between threads.
    """

    def __init__(
        self,
        params: LambertConformalConicParams,
        solver: Optional[InverseSolverConfig] = None
    ):
        try:
            constants = derive_constants(params)
        except InvalidParameterError as e:
            logger.error(f"Invalid Lambert Conformal Conic parameters: {e.message}")
            raise

        self._params = params
        self._constants = constants
        self._solver = solver or InverseSolverConfig()

        logger.debug(
            f"Lambert Conformal Conic constants: e={constants.e:.12f} n={constants.n:.12f} "
            f"F={constants.F:.12f} rho0={constants.rho0:.4f}"
        )

    @property
    def params(self) -> LambertConformalConicParams:
        return self._params

    @property
    def constants(self) -> LambertConformalConicConstants:
        return self._constants

    @property
    def solver(self) -> InverseSolverConfig:
        return self._solver

    @property
    def name(self) -> str:
        p = self._params
        return (
            f"Lambert Conformal Conic ({np.degrees(p.first_standard_parallel):g}°, "
            f"{np.degrees(p.second_standard_parallel):g}°)"
        )

    @property
    def proj4_string(self) -> str:
        p = self._params
        return (
            f"+proj=lcc +lat_1={float(np.degrees(p.first_standard_parallel))!r} "
            f"+lat_2={float(np.degrees(p.second_standard_parallel))!r} "
            f"+lat_0={float(np.degrees(p.origin_latitude))!r} "
            f"+lon_0={float(np.degrees(p.origin_longitude))!r} "
            f"+x_0={p.false_easting!r} +y_0={p.false_northing!r} "
            f"{ellipsoid_proj4_terms(p.semi_major_axis, p.flattening)} +units=m +no_defs"
        )

    @property
    def preserves_angles(self) -> bool:
        return True

    @property
    def preserves_area(self) -> bool:
        return False

    def _radius(self, phi):
        c = self._constants
        return _rho(phi, self._params.semi_major_axis, c.F, c.n, c.e)

    def forward(self, lon: ArrayLike, lat: ArrayLike) -> Tuple[Coordinate, Coordinate]:
        lam = np.radians(np.asarray(lon, dtype=np.float64))
        phi = np.radians(np.asarray(lat, dtype=np.float64))
        x, y = self._forward(lam, phi)
        return as_output(x), as_output(y)

    def _forward(self, lam, phi):
        p = self._params
        c = self._constants

        theta = c.n * wrap_longitude_difference(lam - p.origin_longitude)
        rho = self._radius(phi)

        x = p.false_easting + rho * np.sin(theta)
        y = p.false_northing + c.rho0 - rho * np.cos(theta)

        return x, y

    def inverse(self, x: ArrayLike, y: ArrayLike) -> Tuple[Coordinate, Coordinate]:
        lam, phi = self._inverse(
            np.asarray(x, dtype=np.float64),
            np.asarray(y, dtype=np.float64)
        )
        return as_output(np.degrees(lam)), as_output(np.degrees(phi))

    def _inverse(self, x, y):
        p = self._params
        c = self._constants

        easting = x - p.false_easting
        northing = c.rho0 - (y - p.false_northing)

        with np.errstate(divide="ignore", invalid="ignore"):
            lam = p.origin_longitude + np.arctan(easting / northing) / c.n

            rho = np.sqrt(easting ** 2 + northing ** 2)
            if c.n < 0.0:
                rho = -rho

            t = (rho / (p.semi_major_axis * c.F)) ** (1.0 / c.n)

        phi = np.pi / 2.0 - 2.0 * np.arctan(t)
        phi = self._solve_latitude(t, phi)

        return lam, phi

    def _solve_latitude(self, t, phi):
        """Fixed-point refinement of latitude from the isometric term t."""
        e = self._constants.e
        tolerance = self._solver.tolerance
        residual = math.inf

        for iteration in range(1, self._solver.max_iterations + 1):
            e_sin = e * np.sin(phi)
            refined = np.pi / 2.0 - 2.0 * np.arctan(
                t * ((1.0 - e_sin) / (1.0 + e_sin)) ** (e / 2.0)
            )
            # Non-finite lanes carry invalid input through as NaN
            change = np.abs(refined - phi)
            residual = float(np.max(change, where=np.isfinite(change), initial=0.0))
            phi = refined
            if residual <= tolerance:
                return phi

        logger.error(
            f"Latitude did not converge after {self._solver.max_iterations} iterations "
            f"(residual={residual:.3e} rad, tolerance={tolerance:.3e} rad)"
        )
        raise ConvergenceError(
            f"Lambert Conformal Conic inverse did not converge within "
            f"{self._solver.max_iterations} iterations",
            iterations=self._solver.max_iterations,
            residual=residual,
            tolerance=tolerance,
        )
