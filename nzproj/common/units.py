"""
Unit Registry for Projection Parameters.

This module provides a centralized unit system using the `pint` library.
Projection parameters may be supplied either as bare numbers, following the
package conventions (angles in degrees, lengths in metres), or as pint
quantities carrying their own units. Everything is normalised to radians and
metres exactly once, when a parameter record is built.

Example Usage
-------------
>>> from nzproj.common.units import Q_, to_radians, to_meters
>>> to_radians(Q_(90, 'degree'))
1.5707963267948966
>>> to_meters(Q_(6378.137, 'km'))
6378137.0
"""

import math
from typing import Union

import numpy as np
import pint
from pint import UnitRegistry as PintUnitRegistry

from nzproj.common.errors import InvalidParameterError

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

AngleLike = Union[float, int, pint.Quantity]
LengthLike = Union[float, int, pint.Quantity]


def _convert(value: pint.Quantity, unit: str, name: str) -> float:
    try:
        return float(value.to(unit).magnitude)
    except pint.DimensionalityError as e:
        raise InvalidParameterError(
            f"Parameter '{name}' has incompatible units. "
            f"Expected {unit}, got {value.units}",
            parameter=name,
            value=str(value),
        ) from e


def to_radians(value: AngleLike, name: str = "angle") -> float:
    """Normalise an angle to radians.

    Parameters
    ----------
    value : float or pint.Quantity
        A bare number is taken to be in degrees. A quantity must have an
        angular unit (degree, arcminute, radian, ...).
    name : str
        Parameter name used in error messages.

    Returns
    -------
    float
        The angle in radians.

    Raises
    ------
    InvalidParameterError
        If the quantity is not an angle.
    """
    if isinstance(value, pint.Quantity):
        return _convert(value, "radian", name)
    return float(np.radians(value))


def to_meters(value: LengthLike, name: str = "length") -> float:
    """Normalise a length to metres.

    Parameters
    ----------
    value : float or pint.Quantity
        A bare number is taken to be in metres.
    name : str
        Parameter name used in error messages.

    Returns
    -------
    float
        The length in metres.

    Raises
    ------
    InvalidParameterError
        If the quantity is not a length.
    """
    if isinstance(value, pint.Quantity):
        return _convert(value, "meter", name)
    return float(value)


def dms_to_degrees(degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> float:
    """Convert a degrees-minutes-seconds angle to decimal degrees.

    The sign is taken from whichever component is negative, so
    ``dms_to_degrees(-41, 43, 44.6973)`` and ``dms_to_degrees(-0.0, 30)``
    are both southern/western angles.

    Parameters
    ----------
    degrees, minutes, seconds : float
        Components of the angle.

    Returns
    -------
    float
        Angle in decimal degrees.
    """
    negative = math.copysign(1.0, degrees) < 0 or minutes < 0 or seconds < 0
    total = (
        Q_(abs(degrees), "degree")
        + Q_(abs(minutes), "arcminute")
        + Q_(abs(seconds), "arcsecond")
    )
    magnitude = float(total.to("degree").magnitude)
    return -magnitude if negative else magnitude
