"""Prayer time calculation service."""

import logging
import math
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from pyIslam.praytimes import Prayer, PrayerConf

from noor.domain.models import (
    DAILY_PRAYERS,
    CalculationMethod,
    Location,
    PrayerName,
    PrayerTime,
    PrayerTimes,
)
from noor.infrastructure.timezones import timezone_for
from noor.services.ports import PrayerTimeCalculatorPort

logger = logging.getLogger(__name__)

# Local hour of day for each prayer at the equator
BASE_HOURS: dict[PrayerName, float] = {
    PrayerName.FAJR: 5.5,
    PrayerName.SUNRISE: 6.5,
    PrayerName.DHUHR: 12.0,
    PrayerName.ASR: 15.5,
    PrayerName.MAGHRIB: 18.5,
    PrayerName.ISHA: 20.0,
}

LATITUDE_FACTOR_HOURS = 0.5


def latitude_adjustment(latitude: float) -> float:
    """Hours added to every base time at the given latitude."""
    return math.sin(math.radians(latitude)) * LATITUDE_FACTOR_HOURS


def hour_to_time(hour: float) -> time:
    """Convert a fractional hour of day to a time, truncated to the minute."""
    whole_hours = math.floor(hour)
    minutes = int((hour - whole_hours) * 60)
    return time(hour=whole_hours % 24, minute=minutes)


class PrayerService(PrayerTimeCalculatorPort):
    """
    Table-based prayer time calculator.

    Every prayer is a fixed local hour shifted by a latitude term. The
    calculation method is carried along for reporting only and does not
    change the result.
    """

    def __init__(
        self,
        location: Location,
        *,
        method: CalculationMethod = CalculationMethod.MWL,
        timezone_name: str | None = None,
    ) -> None:
        """
        Initialize prayer service.

        Args:
            location: Coordinates to calculate for
            method: Calculation method (echoed, see class docstring)
            timezone_name: IANA timezone, looked up from the location if omitted
        """
        self._location = location
        self._method = method
        self._tz_name = timezone_name or timezone_for(location)
        self._tz = ZoneInfo(self._tz_name)

    @property
    def engine(self) -> str:
        """Engine identifier."""
        return "table"

    @property
    def location(self) -> Location:
        """Location."""
        return self._location

    @property
    def method(self) -> CalculationMethod:
        """Calculation method."""
        return self._method

    @property
    def timezone(self) -> ZoneInfo:
        """Timezone object."""
        return self._tz

    @property
    def timezone_name(self) -> str:
        """Timezone name."""
        return self._tz_name

    def calculate(self, target_date: date) -> PrayerTimes:
        """Calculate prayer times for the given date."""
        adjustment = latitude_adjustment(self._location.latitude)
        times = {
            prayer.value: hour_to_time(base_hour + adjustment)
            for prayer, base_hour in BASE_HOURS.items()
        }
        return PrayerTimes(date=target_date, timezone=self._tz_name, **times)

    def calculate_range(self, start_date: date, days: int) -> list[PrayerTimes]:
        """Calculate prayer times for n days starting at the given date."""
        return [self.calculate(start_date + timedelta(days=i)) for i in range(days)]

    def _localize(self, now: datetime | None) -> datetime:
        if now is None:
            return datetime.now(self._tz)
        if now.tzinfo is None:
            return now.replace(tzinfo=self._tz)
        return now

    def get_next_prayer(
        self,
        now: datetime | None = None,
        target_date: date | None = None,
    ) -> PrayerTime:
        """
        First of the five daily prayers strictly after `now`.

        The prayers of `target_date` (default: today at the location) are
        scanned in order; when all of them have passed, fajr of the following
        day is returned. A naive `now` is taken as local time at the location.
        """
        now = self._localize(now)
        if target_date is None:
            target_date = now.astimezone(self._tz).date()

        day_times = self.calculate(target_date)
        for prayer in DAILY_PRAYERS:
            prayer_time = day_times.get_prayer_time(prayer)
            if prayer_time.datetime > now:
                return prayer_time

        tomorrow_times = self.calculate(target_date + timedelta(days=1))
        return tomorrow_times.get_prayer_time(PrayerName.FAJR)

    def get_time_until_next_prayer(
        self,
        now: datetime | None = None,
        target_date: date | None = None,
    ) -> timedelta:
        """Time remaining until the next prayer."""
        now = self._localize(now)
        return self.get_next_prayer(now, target_date).datetime - now


class AstronomicalPrayerService(PrayerService):
    """Angle-based prayer times computed with pyIslam."""

    def __init__(
        self,
        location: Location,
        *,
        method: CalculationMethod = CalculationMethod.MWL,
        timezone_name: str | None = None,
        fajr_isha_method: int = 2,
        asr_fiqh: int = 1,
        rounding_seconds: int = 30,
    ) -> None:
        """
        Initialize prayer service.

        Args:
            location: Coordinates to calculate for
            method: Calculation method (echoed)
            timezone_name: IANA timezone, looked up from the location if omitted
            fajr_isha_method: pyIslam fajr/isha method id
            asr_fiqh: pyIslam asr juristic method id
            rounding_seconds: Added before truncating to the minute
        """
        super().__init__(location, method=method, timezone_name=timezone_name)
        self._fajr_isha_method = fajr_isha_method
        self._asr_fiqh = asr_fiqh
        self._rounding_seconds = rounding_seconds

    @property
    def engine(self) -> str:
        """Engine identifier."""
        return "astronomical"

    def _utc_offset_hours(self, target_date: date) -> float:
        """UTC offset at local noon of the given date."""
        noon = datetime.combine(target_date, time(12), tzinfo=self._tz)
        offset = noon.utcoffset()
        if offset is None:
            return 0.0
        return offset.total_seconds() / 3600

    def _round(self, time_obj: time, target_date: date) -> time:
        dt = datetime.combine(target_date, time_obj) + timedelta(seconds=self._rounding_seconds)
        return dt.time().replace(second=0, microsecond=0)

    def calculate(self, target_date: date) -> PrayerTimes:
        """Calculate prayer times for the given date."""
        conf = PrayerConf(
            self._location.longitude,
            self._location.latitude,
            self._utc_offset_hours(target_date),
            self._fajr_isha_method,
            self._asr_fiqh,
        )
        prayer = Prayer(conf, target_date)

        return PrayerTimes(
            date=target_date,
            timezone=self._tz_name,
            fajr=self._round(prayer.fajr_time(), target_date),
            sunrise=self._round(prayer.sherook_time(), target_date),
            dhuhr=self._round(prayer.dohr_time(), target_date),
            asr=self._round(prayer.asr_time(), target_date),
            maghrib=self._round(prayer.maghreb_time(), target_date),
            isha=self._round(prayer.ishaa_time(), target_date),
        )


def create_prayer_service(
    location: Location,
    method: CalculationMethod = CalculationMethod.MWL,
    *,
    engine: str = "table",
    fajr_isha_method: int = 2,
    asr_fiqh: int = 1,
) -> PrayerService:
    """Build the prayer service for the configured engine."""
    if engine == "astronomical":
        return AstronomicalPrayerService(
            location,
            method=method,
            fajr_isha_method=fajr_isha_method,
            asr_fiqh=asr_fiqh,
        )
    if engine != "table":
        raise ValueError(f"Unknown prayer engine: {engine}")
    return PrayerService(location, method=method)


def compute_prayer_times(
    latitude: float,
    longitude: float,
    target_date: date,
    method: CalculationMethod = CalculationMethod.MWL,
    now: datetime | None = None,
) -> tuple[PrayerTimes, PrayerTime]:
    """Prayer times for a date and location, with the next upcoming prayer."""
    service = PrayerService(Location(latitude=latitude, longitude=longitude), method=method)
    times = service.calculate(target_date)
    next_prayer = service.get_next_prayer(now, target_date)
    logger.debug(
        f"Prayer times for {latitude}, {longitude} on {target_date} ({method.value}): "
        f"next {next_prayer.name.value} at {next_prayer.time_str}"
    )
    return times, next_prayer
