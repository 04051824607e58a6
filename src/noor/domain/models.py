"""Domain models and value objects."""

import math
from dataclasses import dataclass, field, fields
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Self
from zoneinfo import ZoneInfo


class PrayerName(str, Enum):
    """Prayer time names."""

    FAJR = "fajr"
    SUNRISE = "sunrise"
    DHUHR = "dhuhr"
    ASR = "asr"
    MAGHRIB = "maghrib"
    ISHA = "isha"

    @property
    def display_name(self) -> str:
        """Human readable name."""
        return self.value.capitalize()

    @property
    def is_obligatory(self) -> bool:
        """Sunrise marks the end of fajr and is not a prayer itself."""
        return self is not PrayerName.SUNRISE


# The five daily prayers, in the order they are scanned for "next prayer".
DAILY_PRAYERS: tuple[PrayerName, ...] = tuple(p for p in PrayerName if p.is_obligatory)


class CalculationMethod(str, Enum):
    """Prayer time calculation methods."""

    MWL = "MWL"
    ISNA = "ISNA"
    EGYPT = "Egypt"
    MAKKAH = "Makkah"
    KARACHI = "Karachi"
    TEHRAN = "Tehran"
    JAFARI = "Jafari"

    @property
    def display_name(self) -> str:
        """Name of the authority behind the method."""
        names = {
            CalculationMethod.MWL: "Muslim World League",
            CalculationMethod.ISNA: "Islamic Society of North America",
            CalculationMethod.EGYPT: "Egyptian General Authority of Survey",
            CalculationMethod.MAKKAH: "Umm Al-Qura University, Makkah",
            CalculationMethod.KARACHI: "University of Islamic Sciences, Karachi",
            CalculationMethod.TEHRAN: "Institute of Geophysics, University of Tehran",
            CalculationMethod.JAFARI: "Shia Ithna-Ashari, Leva Institute, Qum",
        }
        return names[self]


class NisabStandard(str, Enum):
    """Precious metal used as the nisab benchmark."""

    GOLD = "gold"
    SILVER = "silver"


@dataclass(frozen=True)
class Location:
    """Geographic coordinate (immutable value object)."""

    latitude: float
    longitude: float
    city: str = ""

    def __post_init__(self) -> None:
        """Coordinate validation."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Invalid latitude: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Invalid longitude: {self.longitude}")


@dataclass(frozen=True)
class PrayerTime:
    """A single prayer time."""

    name: PrayerName
    time: time
    date: date
    timezone: str = "UTC"

    @property
    def datetime(self) -> datetime:
        """Timezone-aware datetime."""
        return datetime.combine(self.date, self.time, tzinfo=ZoneInfo(self.timezone))

    @property
    def time_str(self) -> str:
        """HH:MM format."""
        return self.time.strftime("%H:%M")


@dataclass(frozen=True)
class PrayerTimes:
    """All prayer times of one day at one location."""

    date: date
    fajr: time
    sunrise: time
    dhuhr: time
    asr: time
    maghrib: time
    isha: time
    timezone: str = "UTC"

    def get_time(self, prayer: PrayerName) -> time:
        """Time of day for the given prayer."""
        return getattr(self, prayer.value)

    def get_prayer_time(self, prayer: PrayerName) -> PrayerTime:
        """Return as a PrayerTime."""
        return PrayerTime(
            name=prayer,
            time=self.get_time(prayer),
            date=self.date,
            timezone=self.timezone,
        )

    def get_datetime(self, prayer: PrayerName) -> datetime:
        """Timezone-aware timestamp for the given prayer."""
        return self.get_prayer_time(prayer).datetime

    def all_prayer_times(self) -> list[PrayerTime]:
        """All times as an ordered list."""
        return [self.get_prayer_time(prayer) for prayer in PrayerName]


@dataclass(frozen=True)
class QiblaResult:
    """Direction of the Kaaba from a location."""

    bearing: float
    compass: str

    @property
    def rounded_bearing(self) -> int:
        """Bearing in whole degrees."""
        return round(self.bearing) % 360


@dataclass(frozen=True)
class MetalPrices:
    """Precious metal market prices per gram."""

    gold_per_gram: float
    silver_per_gram: float
    currency: str = "USD"
    last_updated: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        """Price validation."""
        for name, value in [("gold", self.gold_per_gram), ("silver", self.silver_per_gram)]:
            if not value > 0:
                raise ValueError(f"Invalid {name} price: {value}")

    def price_per_gram(self, standard: NisabStandard) -> float:
        """Price of the given metal."""
        if standard is NisabStandard.GOLD:
            return self.gold_per_gram
        return self.silver_per_gram


def _to_amount(name: str, value: Any) -> float:
    """Validate a monetary amount. Rejects anything that is not a finite, non-negative number."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a non-negative amount, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class ZakatInput:
    """Zakatable assets and deductible liabilities. Missing fields are zero."""

    # Assets
    cash: float = 0.0
    gold: float = 0.0
    silver: float = 0.0
    investments: float = 0.0
    business_assets: float = 0.0
    receivables: float = 0.0
    cryptocurrency: float = 0.0
    other: float = 0.0

    # Deductions
    personal_debts: float = 0.0
    business_debts: float = 0.0
    immediate_expenses: float = 0.0

    ASSET_FIELDS = (
        "cash",
        "gold",
        "silver",
        "investments",
        "business_assets",
        "receivables",
        "cryptocurrency",
        "other",
    )
    DEDUCTION_FIELDS = ("personal_debts", "business_debts", "immediate_expenses")

    def __post_init__(self) -> None:
        """Amount validation."""
        for f in fields(self):
            object.__setattr__(self, f.name, _to_amount(f.name, getattr(self, f.name)))

    @property
    def breakdown(self) -> dict[str, float]:
        """Asset amounts by category."""
        return {name: getattr(self, name) for name in self.ASSET_FIELDS}

    @property
    def deductions(self) -> dict[str, float]:
        """Deduction amounts by category."""
        return {name: getattr(self, name) for name in self.DEDUCTION_FIELDS}

    @property
    def total_assets(self) -> float:
        """Sum of all assets."""
        return sum(self.breakdown.values())

    @property
    def total_deductions(self) -> float:
        """Sum of all deductions."""
        return sum(self.deductions.values())

    @property
    def net_wealth(self) -> float:
        """Assets minus deductions."""
        return self.total_assets - self.total_deductions

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build from a dictionary; unknown keys are ignored."""
        known = set(cls.ASSET_FIELDS) | set(cls.DEDUCTION_FIELDS)
        return cls(**{key: value for key, value in data.items() if key in known})


@dataclass(frozen=True)
class ZakatResult:
    """Outcome of a Zakat calculation."""

    total_wealth: float
    nisab_value: float
    zakat_due: float
    is_eligible: bool
    breakdown: dict[str, float]
    deductions: dict[str, float]


@dataclass(frozen=True)
class NisabThreshold:
    """Nisab expressed in one metal."""

    standard: NisabStandard
    grams: float
    price_per_gram: float

    @property
    def value(self) -> float:
        """Monetary value of the threshold."""
        return self.grams * self.price_per_gram


@dataclass(frozen=True)
class NisabInfo:
    """Current nisab thresholds and the rules applied with them."""

    gold: NisabThreshold
    silver: NisabThreshold
    recommended: NisabStandard
    zakat_rate: float
    lunar_year_days: int
    currency: str
    last_updated: datetime
