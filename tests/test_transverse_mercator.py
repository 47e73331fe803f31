"""
Tests for the Transverse Mercator (Redfearn series) projection engine.
"""

import math

import numpy as np
import pytest
from pyproj import Proj

from nzproj.common.errors import InvalidParameterError
from nzproj.geospatial.ellipsoid import GRS80
from nzproj.geospatial.transverse_mercator import TransverseMercator, TransverseMercatorParams
from nzproj.systems import new_zealand_transverse_mercator


class TestFixedPoints:
    """Tests against published LINZ NZTM2000 conversions."""

    def test_forward(self, reference_point) -> None:
        tm = new_zealand_transverse_mercator()
        x, y = tm.forward(reference_point["lon"], reference_point["lat"])
        assert x == pytest.approx(reference_point["nztm"][0], abs=0.5)
        assert y == pytest.approx(reference_point["nztm"][1], abs=0.5)

    def test_inverse(self, reference_point) -> None:
        tm = new_zealand_transverse_mercator()
        lon, lat = tm.inverse(*reference_point["nztm"])
        assert lon == pytest.approx(reference_point["lon"], abs=1e-5)
        assert lat == pytest.approx(reference_point["lat"], abs=1e-5)

    def test_rounded_point(self, rounded_point) -> None:
        tm = new_zealand_transverse_mercator()
        x, y = tm.forward(rounded_point["lon"], rounded_point["lat"])
        assert x == pytest.approx(rounded_point["nztm"][0], abs=0.5)
        assert y == pytest.approx(rounded_point["nztm"][1], abs=0.5)


class TestForwardInverse:
    """Tests for forward and inverse transforms."""

    def test_central_meridian_has_false_easting(self) -> None:
        """Points on the central meridian project to x = E0."""
        tm = new_zealand_transverse_mercator()
        x, _ = tm.forward(np.full(5, 173.0), np.linspace(-47.0, -34.0, 5))
        np.testing.assert_allclose(x, 1_600_000.0, atol=1e-6, rtol=0)

    def test_false_easting_inverts_to_central_meridian(self) -> None:
        """x = E0 inverts to λ0 for any northing."""
        tm = new_zealand_transverse_mercator()
        lon, _ = tm.inverse(1_600_000.0, 5_500_000.0)
        assert lon == pytest.approx(173.0, abs=1e-12)

    def test_equator_on_central_meridian(self) -> None:
        """The origin (0°, 173°) maps to the false origin."""
        tm = new_zealand_transverse_mercator()
        x, y = tm.forward(173.0, 0.0)
        assert x == pytest.approx(1_600_000.0, abs=1e-6)
        assert y == pytest.approx(10_000_000.0, abs=1e-6)

    def test_symmetric_about_central_meridian(self) -> None:
        """Equal offsets east and west give mirrored eastings."""
        tm = new_zealand_transverse_mercator()
        x_east, y_east = tm.forward(175.0, -40.0)
        x_west, y_west = tm.forward(171.0, -40.0)
        assert x_east - 1_600_000.0 == pytest.approx(1_600_000.0 - x_west, abs=1e-6)
        assert y_east == pytest.approx(y_west, abs=1e-6)

    def test_roundtrip_grid(self) -> None:
        """inverse(forward(p)) recovers p within 3° of the central meridian."""
        tm = new_zealand_transverse_mercator()
        lons, lats = np.meshgrid(np.linspace(170.0, 176.0, 13), np.linspace(-47.5, -34.0, 13))

        x, y = tm.forward(lons, lats)
        lon_back, lat_back = tm.inverse(x, y)

        np.testing.assert_allclose(lon_back, lons, atol=1e-7, rtol=0)
        np.testing.assert_allclose(lat_back, lats, atol=1e-7, rtol=0)

    def test_roundtrip_across_new_zealand(self) -> None:
        """The round trip stays within 1e-5° across the full NZTM2000 area of use."""
        tm = new_zealand_transverse_mercator()
        lons, lats = np.meshgrid(np.linspace(167.5, 178.5, 12), np.linspace(-47.3, -34.1, 12))

        x, y = tm.forward(lons, lats)
        lon_back, lat_back = tm.inverse(x, y)

        np.testing.assert_allclose(lon_back, lons, atol=1e-5, rtol=0)
        np.testing.assert_allclose(lat_back, lats, atol=1e-5, rtol=0)

    def test_projected_roundtrip(self) -> None:
        """forward(inverse(x, y)) recovers (x, y) to 0.5 m across mainland New Zealand."""
        tm = new_zealand_transverse_mercator()
        xs, ys = np.meshgrid(
            np.linspace(1_100_000.0, 2_100_000.0, 9),
            np.linspace(4_750_000.0, 6_200_000.0, 9),
        )
        lon, lat = tm.inverse(xs, ys)
        x_back, y_back = tm.forward(lon, lat)
        np.testing.assert_allclose(x_back, xs, atol=0.5, rtol=0)
        np.testing.assert_allclose(y_back, ys, atol=0.5, rtol=0)

    def test_longitude_across_antimeridian(self) -> None:
        """A longitude given west of the antimeridian is measured from the central meridian."""
        tm = new_zealand_transverse_mercator()
        x_west, y_west = tm.forward(-179.0, -40.0)
        x_east, y_east = tm.forward(181.0, -40.0)
        assert x_west == pytest.approx(x_east, abs=1e-6)
        assert y_west == pytest.approx(y_east, abs=1e-6)
        assert x_west > 1_600_000.0

    def test_array_matches_scalar(self) -> None:
        tm = new_zealand_transverse_mercator()
        lons = np.array([168.0, 172.5, 177.0])
        lats = np.array([-46.0, -41.0, -37.0])
        xs, ys = tm.forward(lons, lats)
        for i in range(3):
            x, y = tm.forward(lons[i], lats[i])
            assert xs[i] == pytest.approx(x, rel=1e-12)
            assert ys[i] == pytest.approx(y, rel=1e-12)

    def test_scalar_inputs_return_floats(self) -> None:
        tm = new_zealand_transverse_mercator()
        x, y = tm.forward(172.0, -42.0)
        lon, lat = tm.inverse(x, y)
        assert all(isinstance(v, float) for v in (x, y, lon, lat))

    def test_repeated_calls_identical(self) -> None:
        tm = new_zealand_transverse_mercator()
        assert tm.forward(167.9, -44.7) == tm.forward(167.9, -44.7)
        assert tm.inverse(1_197_666.98, 5_040_771.40) == tm.inverse(1_197_666.98, 5_040_771.40)


class TestMeridianArc:
    """Tests for the meridian arc and footpoint latitude."""

    def test_equator(self) -> None:
        tm = new_zealand_transverse_mercator()
        assert tm.meridian_arc(0.0) == 0.0

    def test_quarter_meridian(self) -> None:
        """Equator-to-pole distance on GRS80."""
        tm = new_zealand_transverse_mercator()
        assert tm.meridian_arc(90.0) == pytest.approx(10_001_965.7293, abs=0.01)

    def test_odd_in_latitude(self) -> None:
        tm = new_zealand_transverse_mercator()
        assert tm.meridian_arc(-41.0) == pytest.approx(-tm.meridian_arc(41.0), rel=1e-15)

    def test_footpoint_inverts_meridian_arc(self) -> None:
        """On the central meridian the footpoint latitude is the latitude itself."""
        tm = new_zealand_transverse_mercator()
        lats = np.array([-46.0, -41.0, -35.0])
        _, ys = tm.forward(np.full(3, 173.0), lats)
        np.testing.assert_allclose(tm.footpoint_latitude(ys), lats, atol=1e-8, rtol=0)


class TestParameterValidation:
    """Tests for rejection of invalid parameters."""

    @pytest.mark.parametrize("k0", [0.0, -0.9996, float("nan")])
    def test_invalid_scale_factor(self, k0: float) -> None:
        params = TransverseMercatorParams.from_degrees(GRS80, 0.0, 173.0, scale_factor=k0)
        with pytest.raises(InvalidParameterError, match="scale factor"):
            TransverseMercator(params)

    def test_invalid_ellipsoid(self) -> None:
        params = TransverseMercatorParams(
            semi_major_axis=-1.0, flattening=0.0, origin_latitude=0.0, origin_longitude=0.0
        )
        with pytest.raises(InvalidParameterError):
            TransverseMercator(params)


class TestAgainstProj:
    """Agreement with PROJ's exact Transverse Mercator."""

    def test_forward_agrees_with_proj(self) -> None:
        tm = new_zealand_transverse_mercator()
        proj = Proj(tm.proj4_string)
        lons, lats = np.meshgrid(np.linspace(170.0, 176.0, 7), np.linspace(-47.0, -34.5, 7))

        x, y = tm.forward(lons, lats)
        x_ref, y_ref = proj(lons, lats)

        np.testing.assert_allclose(x, x_ref, atol=0.02, rtol=0)
        np.testing.assert_allclose(y, y_ref, atol=0.02, rtol=0)

    def test_inverse_agrees_with_proj(self) -> None:
        tm = new_zealand_transverse_mercator()
        proj = Proj(tm.proj4_string)
        xs = np.array([1_400_000.0, 1_600_000.0, 1_800_000.0])
        ys = np.array([4_900_000.0, 5_400_000.0, 6_100_000.0])

        lon, lat = tm.inverse(xs, ys)
        lon_ref, lat_ref = proj(xs, ys, inverse=True)

        np.testing.assert_allclose(lon, lon_ref, atol=1e-7, rtol=0)
        np.testing.assert_allclose(lat, lat_ref, atol=1e-7, rtol=0)

    def test_metadata(self) -> None:
        tm = new_zealand_transverse_mercator()
        assert tm.preserves_angles and not tm.preserves_area
        assert "+proj=tmerc" in tm.proj4_string
        assert "+k=0.9996" in tm.proj4_string
        assert tm.to_crs().is_projected
        assert math.isfinite(tm.constants.G)
