"""
Geodetic Constants for Map Projection.

This module provides the defining constants of the reference ellipsoids and
the numerical tolerances used by the projection engines. Every constant
carries its unit and an authoritative source.

References
----------
- GRS80 parameters: Moritz, H. (2000). Geodetic Reference System 1980.
  Journal of Geodesy, 74(1), 128-133.
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- NZGD2000: LINZS25000, Standard for New Zealand Geodetic Datum 2000
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A geodetic constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of constants used throughout the projection engines.

    Reference Ellipsoids
    --------------------
    GRS80 is the ellipsoid of NZGD2000 and therefore of every New Zealand
    projection. WGS84 differs from it only in the inverse flattening.

    Numerical Tolerances
    --------------------
    Defaults for the iterative Lambert Conformal Conic inverse.
    """

    # =========================================================================
    # GRS80 Ellipsoid Parameters (NZGD2000)
    # =========================================================================

    GRS80_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="GRS80, Moritz (2000)",
        description="Semi-major axis (equatorial radius) of GRS80 ellipsoid"
    )

    GRS80_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257222101,
        uncertainty=0.0,  # Derived from defining constants, fixed by convention
        unit="dimensionless",
        source="GRS80, Moritz (2000)",
        description="Inverse flattening of GRS80 ellipsoid: 1/f"
    )

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # =========================================================================

    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    WGS84_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Inverse flattening of WGS84 ellipsoid: 1/f"
    )

    # =========================================================================
    # Inverse Solver Tolerances
    # =========================================================================

    LATITUDE_CONVERGENCE_TOLERANCE: Final[Constant] = Constant(
        value=1.0e-9,
        uncertainty=0.0,
        unit="rad",
        source="Snyder (1987), USGS Prof. Paper 1395, eq. 7-9",
        description="Largest change in latitude accepted as converged (~2e-5 arc-seconds)"
    )

    MAX_INVERSE_ITERATIONS: Final[Constant] = Constant(
        value=50,
        uncertainty=0.0,
        unit="count",
        source="Convention; well-formed inputs converge in under 10 iterations",
        description="Iteration bound for the Lambert Conformal Conic latitude solve"
    )
