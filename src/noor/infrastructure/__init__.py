"""Infrastructure layer - Adapters and implementations."""

from noor.infrastructure.price_provider import StaticMetalPriceProvider
from noor.infrastructure.timezones import timezone_for

__all__ = [
    "StaticMetalPriceProvider",
    "timezone_for",
]
