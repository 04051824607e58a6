"""Coordinate to timezone lookup."""

import logging
from functools import lru_cache

from timezonefinder import TimezoneFinder

from noor.domain.models import Location

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"


@lru_cache(maxsize=1)
def _finder() -> TimezoneFinder:
    return TimezoneFinder()


def timezone_for(location: Location) -> str:
    """IANA timezone name at the location, UTC when none is found."""
    tz_name = _finder().timezone_at(lat=location.latitude, lng=location.longitude)
    if tz_name is None:
        logger.debug(f"No timezone for {location.latitude}, {location.longitude}, using UTC")
        return DEFAULT_TIMEZONE
    return tz_name
