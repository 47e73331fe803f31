"""
Tests for the named New Zealand coordinate systems.
"""

import numpy as np
import pytest
from pyproj import Transformer

from nzproj.common.types import GeographicExtent, ProjectedBounds
from nzproj.geospatial.lambert_conformal_conic import LambertConformalConic
from nzproj.geospatial.transverse_mercator import TransverseMercator
from nzproj.systems import (
    CoordinateSystem,
    available_coordinate_systems,
    get_coordinate_system,
    new_zealand_transverse_mercator,
)

# NZGD2000 geographic
NZGD2000_GEOGRAPHIC = "EPSG:4167"


class TestNZCS2000:
    """Tests for the NZCS2000 Lambert Conformal Conic system."""

    def test_identity(self, nzcs) -> None:
        assert nzcs.epsg == 3851
        assert isinstance(nzcs.projection, LambertConformalConic)
        assert str(nzcs) == "EPSG:3851 (NZGD2000 / New Zealand Continental Shelf Lambert Conformal 2000)"

    def test_forward(self, nzcs, reference_point) -> None:
        x, y = nzcs.forward(reference_point["lon"], reference_point["lat"])
        assert x == pytest.approx(reference_point["nzcs"][0], abs=0.01)
        assert y == pytest.approx(reference_point["nzcs"][1], abs=0.01)

    def test_inverse(self, nzcs, reference_point) -> None:
        lon, lat = nzcs.inverse(*reference_point["nzcs"])
        assert lon == pytest.approx(reference_point["lon"], abs=1e-7)
        assert lat == pytest.approx(reference_point["lat"], abs=1e-7)

    def test_rounded_point(self, nzcs, rounded_point) -> None:
        """Published geographic values are rounded, so agreement is to 0.1 m."""
        x, y = nzcs.forward(rounded_point["lon"], rounded_point["lat"])
        assert x == pytest.approx(rounded_point["nzcs"][0], abs=0.1)
        assert y == pytest.approx(rounded_point["nzcs"][1], abs=0.1)

        lon, lat = nzcs.inverse(*rounded_point["nzcs"])
        assert lon == pytest.approx(rounded_point["lon"], abs=1e-6)
        assert lat == pytest.approx(rounded_point["lat"], abs=1e-6)

    def test_crs(self, nzcs) -> None:
        assert nzcs.crs.to_epsg() == 3851

    def test_agrees_with_proj(self, nzcs) -> None:
        transformer = Transformer.from_crs(NZGD2000_GEOGRAPHIC, "EPSG:3851", always_xy=True)
        lons, lats = np.meshgrid(np.linspace(162.0, 180.0, 7), np.linspace(-55.0, -30.0, 7))

        x, y = nzcs.forward(lons, lats)
        x_ref, y_ref = transformer.transform(lons, lats)

        np.testing.assert_allclose(x, x_ref, atol=1e-3, rtol=0)
        np.testing.assert_allclose(y, y_ref, atol=1e-3, rtol=0)


class TestNZTM2000:
    """Tests for the NZTM2000 Transverse Mercator system."""

    def test_identity(self, nztm) -> None:
        assert nztm.epsg == 2193
        assert isinstance(nztm.projection, TransverseMercator)
        assert str(nztm) == "EPSG:2193 (NZGD2000 / New Zealand Transverse Mercator 2000)"

    def test_forward(self, nztm, reference_point) -> None:
        x, y = nztm.forward(reference_point["lon"], reference_point["lat"])
        assert x == pytest.approx(reference_point["nztm"][0], abs=0.5)
        assert y == pytest.approx(reference_point["nztm"][1], abs=0.5)

    def test_inverse(self, nztm, reference_point) -> None:
        lon, lat = nztm.inverse(*reference_point["nztm"])
        assert lon == pytest.approx(reference_point["lon"], abs=1e-5)
        assert lat == pytest.approx(reference_point["lat"], abs=1e-5)

    def test_crs(self, nztm) -> None:
        assert nztm.crs.to_epsg() == 2193

    def test_agrees_with_proj(self, nztm) -> None:
        """Within 3° of the central meridian the series agrees with PROJ to 2 cm."""
        transformer = Transformer.from_crs(NZGD2000_GEOGRAPHIC, "EPSG:2193", always_xy=True)
        lons, lats = np.meshgrid(np.linspace(170.0, 176.0, 7), np.linspace(-47.0, -34.5, 7))

        x, y = nztm.forward(lons, lats)
        x_ref, y_ref = transformer.transform(lons, lats)

        np.testing.assert_allclose(x, x_ref, atol=0.02, rtol=0)
        np.testing.assert_allclose(y, y_ref, atol=0.02, rtol=0)


class TestSystemMetadata:
    """Tests for the derived extent, bounds and center."""

    @pytest.mark.parametrize("system_fixture", ["nzcs", "nztm"])
    def test_center_within_bounds(self, system_fixture, request) -> None:
        system = request.getfixturevalue(system_fixture)
        cx, cy = system.center
        assert system.bounds.min_x <= cx <= system.bounds.max_x
        assert system.bounds.min_y <= cy <= system.bounds.max_y

    @pytest.mark.parametrize("system_fixture", ["nzcs", "nztm"])
    def test_center_is_image_of_extent_center(self, system_fixture, request) -> None:
        system = request.getfixturevalue(system_fixture)
        x, y = system.forward(*system.extent.center)
        assert system.center == (x, y)

    def test_types(self, nztm) -> None:
        assert isinstance(nztm.extent, GeographicExtent)
        assert isinstance(nztm.bounds, ProjectedBounds)
        assert nztm.extent.min_lon == 166.37
        assert nztm.extent.max_lat == -34.1

    def test_systems_are_immutable(self, nztm) -> None:
        with pytest.raises(AttributeError):
            nztm.epsg = 4326

    def test_to_dict(self, nzcs) -> None:
        data = nzcs.to_dict()
        assert set(data) == {"name", "epsg", "projection", "proj4", "extent", "bounds", "center"}
        assert data["epsg"] == 3851
        assert data["extent"] == {"min_x": 160.0, "min_y": -60.0, "max_x": 190.0, "max_y": -25.0}
        assert data["proj4"].startswith("+proj=lcc")

    def test_systems_agree_on_a_point(self, nzcs, nztm, reference_point) -> None:
        """Going NZCS2000 -> geographic -> NZTM2000 lands on the published NZTM2000 value."""
        lon, lat = nzcs.inverse(*reference_point["nzcs"])
        x, y = nztm.forward(lon, lat)
        assert x == pytest.approx(reference_point["nztm"][0], abs=0.5)
        assert y == pytest.approx(reference_point["nztm"][1], abs=0.5)

    def test_custom_system(self) -> None:
        extent = GeographicExtent(min_x=172.0, min_y=-44.0, max_x=174.0, max_y=-40.0)
        system = CoordinateSystem(
            name="custom",
            epsg=0,
            projection=new_zealand_transverse_mercator(),
            extent=extent,
        )
        assert system.bounds.width > 0.0
        assert system.bounds.height > 0.0


class TestRegistry:
    """Tests for lookup by EPSG code."""

    def test_available(self) -> None:
        assert available_coordinate_systems() == [2193, 3851]

    @pytest.mark.parametrize("epsg", [2193, 3851, "2193"])
    def test_lookup(self, epsg) -> None:
        assert get_coordinate_system(epsg).epsg == int(epsg)

    def test_unknown_code(self) -> None:
        with pytest.raises(KeyError, match="4326"):
            get_coordinate_system(4326)

    def test_each_lookup_builds_new_instance(self) -> None:
        assert get_coordinate_system(2193) is not get_coordinate_system(2193)
