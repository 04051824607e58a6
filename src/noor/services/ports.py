"""Service layer interfaces (ports)."""

from abc import ABC, abstractmethod
from datetime import date

from noor.domain.models import MetalPrices, PrayerTimes


class PrayerTimeCalculatorPort(ABC):
    """Prayer time calculator interface (port)."""

    @abstractmethod
    def calculate(self, target_date: date) -> PrayerTimes:
        """Calculate prayer times for the given date."""

    @abstractmethod
    def calculate_range(self, start_date: date, days: int) -> list[PrayerTimes]:
        """Calculate prayer times for n days starting at the given date."""


class MetalPriceProviderPort(ABC):
    """Precious metal price source (port)."""

    @abstractmethod
    def get_prices(self) -> MetalPrices:
        """Current gold and silver prices per gram."""
