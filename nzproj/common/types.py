"""
Type Definitions for Geographic Extents and Projected Bounds.

Axis-aligned rectangles are used in two places: the area of use of a
coordinate system (geographic, degrees) and its validity bounds (projected,
metres). Both share one implementation and differ only in the meaning of
their axes.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple


@dataclass(frozen=True)
class _Rectangle:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        """Validate rectangle ordering."""
        if self.min_x > self.max_x:
            raise ValueError(f"min_x ({self.min_x}) must be <= max_x ({self.max_x})")
        if self.min_y > self.max_y:
            raise ValueError(f"min_y ({self.min_y}) must be <= max_y ({self.max_y})")

    @classmethod
    def from_sequence(cls, values: Sequence[float]):
        """Build from ``[min_x, min_y, max_x, max_y]``."""
        if len(values) < 4:
            raise ValueError(f"Expected 4 values, got {len(values)}")
        return cls(
            float(values[0]), float(values[1]), float(values[2]), float(values[3])
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Tuple[float, float]:
        return (
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2,
        )

    def to_list(self) -> List[float]:
        """Convert to ``[min_x, min_y, max_x, max_y]``."""
        return [self.min_x, self.min_y, self.max_x, self.max_y]

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
        }


@dataclass(frozen=True)
class GeographicExtent(_Rectangle):
    """Geographic area of use in DEGREES.

    Attributes
    ----------
    min_x, max_x : float
        Longitude range in degrees. Eastern longitudes past the
        antimeridian are written above 180 (170°W is 190) so that
        ``min_x <= max_x`` holds for regions spanning it.
    min_y, max_y : float
        Latitude range in degrees.
    """

    @property
    def min_lon(self) -> float:
        return self.min_x

    @property
    def min_lat(self) -> float:
        return self.min_y

    @property
    def max_lon(self) -> float:
        return self.max_x

    @property
    def max_lat(self) -> float:
        return self.max_y

    def __str__(self) -> str:
        return f"Extent({self.min_x:.4f}°, {self.min_y:.4f}°, {self.max_x:.4f}°, {self.max_y:.4f}°)"


@dataclass(frozen=True)
class ProjectedBounds(_Rectangle):
    """Validity bounds in projected linear units (METERS).

    Attributes
    ----------
    min_x, max_x : float
        Easting range.
    min_y, max_y : float
        Northing range.
    """

    def __str__(self) -> str:
        return f"Bounds({self.min_x:.2f}, {self.min_y:.2f}, {self.max_x:.2f}, {self.max_y:.2f})"
