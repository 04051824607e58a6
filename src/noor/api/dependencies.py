"""Application state and dependencies."""

import logging
from dataclasses import dataclass
from datetime import datetime

from noor.config import AppConfig, get_config
from noor.infrastructure.price_provider import StaticMetalPriceProvider
from noor.services.zakat_service import ZakatService

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Application state container."""

    config: AppConfig
    price_provider: StaticMetalPriceProvider
    zakat_service: ZakatService
    started_at: datetime


# Global application state (singleton)
_app_state: AppState | None = None


async def initialize_app_state(config: AppConfig | None = None) -> AppState:
    """
    Initialize application state.

    Args:
        config: Application configuration (default: from environment)

    Returns:
        Initialized AppState
    """
    global _app_state

    if _app_state is not None:
        return _app_state

    if config is None:
        config = get_config()

    price_provider = StaticMetalPriceProvider.from_config(config)
    zakat_service = ZakatService(price_provider)

    _app_state = AppState(
        config=config,
        price_provider=price_provider,
        zakat_service=zakat_service,
        started_at=datetime.now(),
    )
    logger.info(f"Prayer engine: {config.prayer_engine}")

    return _app_state


def get_app_state() -> AppState:
    """Get current application state."""
    if _app_state is None:
        raise RuntimeError("Application state not initialized")
    return _app_state


async def shutdown_app_state() -> None:
    """Shutdown application state."""
    global _app_state
    _app_state = None
