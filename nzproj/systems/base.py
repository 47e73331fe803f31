"""
Named coordinate systems.

A named coordinate system is a projection engine plus constant metadata:
its EPSG code, its geographic area of use, and the projected bounds and
center derived from that area. Forward and inverse calls are delegated to
the engine.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from numpy.typing import ArrayLike
from pyproj import CRS

from nzproj.common.logging_config import get_logger
from nzproj.common.types import GeographicExtent, ProjectedBounds
from nzproj.geospatial.projections import (
    Coordinate,
    Projection,
    bounding_box_corner_transform,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class CoordinateSystem:
    """A projection engine identified as a real-world coordinate system.

    Attributes
    ----------
    name : str
        Official name of the system.
    epsg : int
        EPSG code.
    projection : Projection
        The engine that performs the transforms.
    extent : GeographicExtent
        Area of use in degrees.
    bounds : ProjectedBounds
        Rectangle enclosing the projected corners of ``extent``.
    center : Tuple[float, float]
        Projected image of the center of ``extent``.

    Notes
    -----
    ``bounds`` and ``center`` are derived once when the system is built.
    Coordinates are not checked against them; callers are responsible for
    staying inside the area of use.
    """
    name: str
    epsg: int
    projection: Projection
    extent: GeographicExtent
    bounds: ProjectedBounds = field(init=False)
    center: Tuple[float, float] = field(init=False)

    def __post_init__(self):
        corners = bounding_box_corner_transform(self.projection, self.extent.to_list())
        bounds = ProjectedBounds.from_sequence(corners)
        cx, cy = self.projection.forward(*self.extent.center)

        object.__setattr__(self, "bounds", bounds)
        object.__setattr__(self, "center", (float(cx), float(cy)))

        logger.debug(f"Built EPSG:{self.epsg} {self.name} with {bounds}")

    def forward(self, lon: ArrayLike, lat: ArrayLike) -> Tuple[Coordinate, Coordinate]:
        """Project geographic coordinates (degrees) to this system."""
        return self.projection.forward(lon, lat)

    def inverse(self, x: ArrayLike, y: ArrayLike) -> Tuple[Coordinate, Coordinate]:
        """Convert coordinates in this system to geographic degrees."""
        return self.projection.inverse(x, y)

    @property
    def crs(self) -> CRS:
        """The `pyproj.CRS` registered under this system's EPSG code."""
        return CRS.from_epsg(self.epsg)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.name,
            "epsg": self.epsg,
            "projection": self.projection.name,
            "proj4": self.projection.proj4_string,
            "extent": self.extent.to_dict(),
            "bounds": self.bounds.to_dict(),
            "center": list(self.center),
        }

    def __str__(self) -> str:
        return f"EPSG:{self.epsg} ({self.name})"
