"""Service layer - Business logic."""

from noor.services.ports import MetalPriceProviderPort, PrayerTimeCalculatorPort
from noor.services.prayer_service import (
    AstronomicalPrayerService,
    PrayerService,
    compute_prayer_times,
    create_prayer_service,
)
from noor.services.qibla_service import calculate_qibla, compass_label
from noor.services.zakat_service import ZakatService, calculate_nisab, calculate_zakat

__all__ = [
    "AstronomicalPrayerService",
    "MetalPriceProviderPort",
    "PrayerService",
    "PrayerTimeCalculatorPort",
    "ZakatService",
    "calculate_nisab",
    "calculate_qibla",
    "calculate_zakat",
    "compass_label",
    "compute_prayer_times",
    "create_prayer_service",
]
