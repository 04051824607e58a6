"""Metal price providers."""

import logging
from datetime import datetime

from noor.config import AppConfig
from noor.domain.models import MetalPrices
from noor.services.ports import MetalPriceProviderPort

logger = logging.getLogger(__name__)


class StaticMetalPriceProvider(MetalPriceProviderPort):
    """Serves fixed prices, e.g. taken from configuration."""

    def __init__(self, prices: MetalPrices) -> None:
        """
        Initialize provider.

        Args:
            prices: Prices to serve
        """
        self._prices = prices

    @classmethod
    def from_config(cls, config: AppConfig) -> "StaticMetalPriceProvider":
        """Build from application configuration."""
        prices = MetalPrices(
            gold_per_gram=config.gold_price,
            silver_per_gram=config.silver_price,
            currency=config.currency,
            last_updated=datetime.now(),
        )
        logger.info(
            f"Metal prices: gold={prices.gold_per_gram} silver={prices.silver_per_gram} "
            f"{prices.currency}/g"
        )
        return cls(prices)

    def get_prices(self) -> MetalPrices:
        """Current gold and silver prices per gram."""
        return self._prices

