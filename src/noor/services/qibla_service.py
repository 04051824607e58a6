"""Qibla direction calculation."""

import math

from noor.domain.models import Location, QiblaResult

KAABA = Location(latitude=21.4225, longitude=39.8262, city="Makkah")

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
SECTOR_DEGREES = 360 / len(COMPASS_POINTS)


def compass_label(bearing: float) -> str:
    """16-point compass label for a bearing in degrees."""
    index = math.floor(bearing / SECTOR_DEGREES + 0.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def calculate_qibla_bearing(location: Location) -> float:
    """
    Initial great-circle bearing from `location` to the Kaaba.

    Returns degrees clockwise from true north in [0, 360). The direction is
    undefined at the Kaaba itself; 0 is returned there.
    """
    if (location.latitude, location.longitude) == (KAABA.latitude, KAABA.longitude):
        return 0.0

    d_lng = math.radians(KAABA.longitude - location.longitude)
    lat1 = math.radians(location.latitude)
    lat2 = math.radians(KAABA.latitude)

    y = math.sin(d_lng) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lng)

    return (math.degrees(math.atan2(y, x)) + 360) % 360


def calculate_qibla(location: Location) -> QiblaResult:
    """Qibla bearing and compass label for a location."""
    bearing = calculate_qibla_bearing(location)
    return QiblaResult(bearing=bearing, compass=compass_label(bearing))
