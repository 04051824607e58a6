"""Zakat calculation service."""

import logging

from noor.domain.models import (
    MetalPrices,
    NisabInfo,
    NisabStandard,
    NisabThreshold,
    ZakatInput,
    ZakatResult,
)
from noor.services.ports import MetalPriceProviderPort

logger = logging.getLogger(__name__)

NISAB_GRAMS = {
    NisabStandard.GOLD: 85,
    NisabStandard.SILVER: 595,
}
ZAKAT_RATE = 0.025
LUNAR_YEAR_DAYS = 354


def nisab_threshold(prices: MetalPrices, standard: NisabStandard = NisabStandard.GOLD) -> NisabThreshold:
    """Nisab in grams of the given metal, at current prices."""
    return NisabThreshold(
        standard=standard,
        grams=NISAB_GRAMS[standard],
        price_per_gram=prices.price_per_gram(standard),
    )


def calculate_nisab(prices: MetalPrices, standard: NisabStandard = NisabStandard.GOLD) -> float:
    """Monetary value of the nisab."""
    return nisab_threshold(prices, standard).value


def calculate_zakat(zakat_input: ZakatInput, prices: MetalPrices) -> ZakatResult:
    """
    Zakat due on net wealth, measured against the gold nisab.

    Wealth at or above the nisab owes 2.5% of the whole net amount; below it
    nothing is due.
    """
    total_wealth = zakat_input.net_wealth
    nisab_value = calculate_nisab(prices, NisabStandard.GOLD)
    is_eligible = total_wealth >= nisab_value
    zakat_due = total_wealth * ZAKAT_RATE if is_eligible else 0.0

    return ZakatResult(
        total_wealth=total_wealth,
        nisab_value=nisab_value,
        zakat_due=zakat_due,
        is_eligible=is_eligible,
        breakdown=zakat_input.breakdown,
        deductions=zakat_input.deductions,
    )


class ZakatService:
    """Zakat calculations against the current metal prices."""

    def __init__(self, price_provider: MetalPriceProviderPort) -> None:
        """
        Initialize zakat service.

        Args:
            price_provider: Source of gold and silver prices
        """
        self._price_provider = price_provider

    @property
    def prices(self) -> MetalPrices:
        """Current metal prices."""
        return self._price_provider.get_prices()

    def calculate(self, zakat_input: ZakatInput) -> ZakatResult:
        """Calculate zakat at current prices."""
        result = calculate_zakat(zakat_input, self.prices)
        logger.debug(
            f"Zakat: wealth={result.total_wealth:.2f} nisab={result.nisab_value:.2f} "
            f"due={result.zakat_due:.2f}"
        )
        return result

    def nisab_info(self) -> NisabInfo:
        """Gold and silver nisab at current prices."""
        prices = self.prices
        return NisabInfo(
            gold=nisab_threshold(prices, NisabStandard.GOLD),
            silver=nisab_threshold(prices, NisabStandard.SILVER),
            recommended=NisabStandard.GOLD,
            zakat_rate=ZAKAT_RATE,
            lunar_year_days=LUNAR_YEAR_DAYS,
            currency=prices.currency,
            last_updated=prices.last_updated,
        )
