"""
Map Projection Interface and Bounding Box Helpers.

Every projection in this package implements `Projection`: a forward
transform from geographic coordinates (degrees) to projected coordinates
(linear units of the ellipsoid axis, normally meters), and the matching
inverse. Generic consumers such as `bounding_box_corner_transform` depend
only on this contract.

Conventions
-----------
- Geographic coordinates are (longitude, latitude) in DEGREES at the public
  boundary and radians internally. Conversion happens exactly once on entry
  to ``forward`` and once on exit from ``inverse``.
- Inputs may be scalars or array-likes. Scalars yield Python floats, arrays
  yield ndarrays of the broadcast shape.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray
from pyproj import CRS

from nzproj.common.logging_config import get_logger

logger = get_logger(__name__)

Coordinate = Union[float, NDArray[np.float64]]


def as_output(value: ArrayLike) -> Coordinate:
    """Return a Python float for 0-d results, an ndarray otherwise."""
    array = np.asarray(value, dtype=np.float64)
    if array.ndim == 0:
        return float(array)
    return array


def wrap_longitude_difference(dlam):
    """Wrap a longitude difference in radians into [-π, π].

    Values already inside the range are returned unchanged, so 170°W may be
    given either as -170 or as 190 relative to a 173°E central meridian.
    """
    dlam = np.asarray(dlam, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        return np.where(np.abs(dlam) > np.pi, (dlam + np.pi) % (2.0 * np.pi) - np.pi, dlam)


class Projection(ABC):
    """Abstract base class for map projections.

    All projections in this system must implement this interface to
    ensure consistent handling of coordinates and units.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the projection."""
        pass

    @property
    @abstractmethod
    def proj4_string(self) -> str:
        """PROJ.4 definition string."""
        pass

    @property
    @abstractmethod
    def preserves_angles(self) -> bool:
        """Whether this is a conformal projection."""
        pass

    @property
    @abstractmethod
    def preserves_area(self) -> bool:
        """Whether this is an equal-area projection."""
        pass

    @abstractmethod
    def forward(self, lon: ArrayLike, lat: ArrayLike) -> Tuple[Coordinate, Coordinate]:
        """Transform geographic coordinates to projected coordinates.

        Parameters
        ----------
        lon, lat : float or array_like
            Geographic coordinates in degrees.

        Returns
        -------
        Tuple
            (x, y) projected coordinates (easting, northing) in meters.
        """
        pass

    @abstractmethod
    def inverse(self, x: ArrayLike, y: ArrayLike) -> Tuple[Coordinate, Coordinate]:
        """Transform projected coordinates to geographic coordinates.

        Parameters
        ----------
        x, y : float or array_like
            Projected coordinates (easting, northing) in meters.

        Returns
        -------
        Tuple
            (lon, lat) geographic coordinates in degrees.
        """
        pass

    def to_crs(self) -> CRS:
        """Build the equivalent `pyproj.CRS` from the PROJ.4 definition."""
        return CRS.from_proj4(self.proj4_string)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.proj4_string!r})"


def ellipsoid_proj4_terms(a: float, f: float) -> str:
    """PROJ.4 terms describing an ellipsoid by axis and flattening."""
    if f == 0.0:
        return f"+a={a!r} +b={a!r}"
    return f"+a={a!r} +rf={1.0 / f!r}"


def bounding_box_corner_transform(
    projection: Projection,
    bbox: Sequence[float]
) -> Optional[List[float]]:
    """Transform a geographic bounding box through a projection.

    The four corners of the box are projected and the axis-aligned
    rectangle enclosing their images is returned.

    Parameters
    ----------
    projection : Projection
        Any object whose ``forward(lon, lat) -> (x, y)`` accepts arrays.
    bbox : sequence of float
        ``[min_lon, min_lat, max_lon, max_lat]`` in degrees. Values after
        the fourth are ignored.

    Returns
    -------
    list of float or None
        ``[x0, y0, x1, y1]`` in projected units, or None when fewer than
        four values were supplied.

    Notes
    -----
    Only the corners are transformed. Under a conic or transverse projection
    the images of the box edges are curves that may bulge beyond the corner
    rectangle, so for large boxes the result can under-estimate the true
    projected extent.
    """
    if len(bbox) < 4:
        logger.warning(
            f"Bounding box needs 4 values [min_lon, min_lat, max_lon, max_lat], "
            f"got {len(bbox)}"
        )
        return None

    min_lon, min_lat, max_lon, max_lat = (float(v) for v in bbox[:4])

    # SW, NW, NE, SE
    lons = np.array([min_lon, min_lon, max_lon, max_lon])
    lats = np.array([min_lat, max_lat, max_lat, min_lat])

    xs, ys = projection.forward(lons, lats)
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)

    return [float(np.min(xs)), float(np.min(ys)), float(np.max(xs)), float(np.max(ys))]
