"""Domain layer - Business entities and value objects."""

from noor.domain.models import (
    CalculationMethod,
    Location,
    MetalPrices,
    NisabInfo,
    NisabStandard,
    NisabThreshold,
    PrayerName,
    PrayerTime,
    PrayerTimes,
    QiblaResult,
    ZakatInput,
    ZakatResult,
)

__all__ = [
    "CalculationMethod",
    "Location",
    "MetalPrices",
    "NisabInfo",
    "NisabStandard",
    "NisabThreshold",
    "PrayerName",
    "PrayerTime",
    "PrayerTimes",
    "QiblaResult",
    "ZakatInput",
    "ZakatResult",
]
