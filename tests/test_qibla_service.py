"""Tests for qibla service."""

import pytest

from noor.domain.models import Location
from noor.services.qibla_service import (
    COMPASS_POINTS,
    KAABA,
    calculate_qibla,
    calculate_qibla_bearing,
    compass_label,
)


class TestCompassLabel:
    """Compass label tests."""

    @pytest.mark.parametrize(
        "bearing, label",
        [
            (0, "N"),
            (90, "E"),
            (180, "S"),
            (270, "W"),
            (359, "N"),
            (45, "NE"),
            (22.5, "NNE"),
            (11.24, "N"),
            (11.25, "NNE"),
            (348.75, "N"),
            (337.5, "NNW"),
        ],
    )
    def test_labels(self, bearing: float, label: str) -> None:
        assert compass_label(bearing) == label

    def test_sixteen_points(self) -> None:
        assert len(COMPASS_POINTS) == 16
        assert [compass_label(i * 22.5) for i in range(16)] == list(COMPASS_POINTS)


class TestQiblaBearing:
    """Qibla bearing tests."""

    @pytest.mark.parametrize(
        "latitude, longitude, expected",
        [
            (51.5074, -0.1278, 119.0),  # London
            (40.7128, -74.0060, 58.5),  # New York
            (41.0082, 28.9784, 151.6),  # Istanbul
            (-6.2088, 106.8456, 295.1),  # Jakarta
        ],
    )
    def test_known_cities(self, latitude: float, longitude: float, expected: float) -> None:
        bearing = calculate_qibla_bearing(Location(latitude=latitude, longitude=longitude))
        assert bearing == pytest.approx(expected, abs=0.5)

    def test_same_meridian(self) -> None:
        """Due north from the south, due south from the north."""
        south = Location(latitude=0, longitude=KAABA.longitude)
        north = Location(latitude=40, longitude=KAABA.longitude)

        assert calculate_qibla_bearing(south) == pytest.approx(0)
        assert calculate_qibla_bearing(north) == pytest.approx(180)

    def test_from_kaaba(self) -> None:
        """The direction is undefined at the Kaaba; 0 is used."""
        assert calculate_qibla_bearing(KAABA) == 0.0
        assert calculate_qibla(Location(latitude=21.4225, longitude=39.8262)).compass == "N"

    @pytest.mark.parametrize("latitude", [-90, -60, -21.4225, 0, 21.4225, 45, 89.9, 90])
    @pytest.mark.parametrize("longitude", [-180, -140.1738, -90, 0, 39.8262, 100, 180])
    def test_bearing_range(self, latitude: float, longitude: float) -> None:
        bearing = calculate_qibla_bearing(Location(latitude=latitude, longitude=longitude))
        assert 0 <= bearing < 360


class TestCalculateQibla:
    """calculate_qibla tests."""

    def test_london(self) -> None:
        result = calculate_qibla(Location(latitude=51.5074, longitude=-0.1278))

        assert result.compass == "ESE"
        assert result.rounded_bearing == 119
        assert result.compass == compass_label(result.bearing)
