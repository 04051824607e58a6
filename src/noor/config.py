"""Configuration management."""

import logging
import os
from dataclasses import dataclass
from typing import Self

PRAYER_ENGINES = ("table", "astronomical")


@dataclass
class AppConfig:
    """Application configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Presentation
    locale: str = "en_US"
    currency: str = "USD"

    # Metal prices per gram, in `currency`
    gold_price: float = 65.50
    silver_price: float = 0.85

    # Prayer time engine
    prayer_engine: str = "table"
    fajr_isha_method: int = 2
    asr_fiqh: int = 1

    def __post_init__(self) -> None:
        """Validate engine selection."""
        if self.prayer_engine not in PRAYER_ENGINES:
            raise ValueError(f"Unknown prayer engine: {self.prayer_engine}")

    @classmethod
    def from_env(cls) -> Self:
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("NOOR_HOST", "0.0.0.0"),
            port=int(os.getenv("NOOR_PORT", "8080")),
            log_level=os.getenv("NOOR_LOG_LEVEL", "INFO"),
            locale=os.getenv("NOOR_LOCALE", "en_US"),
            currency=os.getenv("NOOR_CURRENCY", "USD"),
            gold_price=float(os.getenv("NOOR_GOLD_PRICE", "65.50")),
            silver_price=float(os.getenv("NOOR_SILVER_PRICE", "0.85")),
            prayer_engine=os.getenv("NOOR_PRAYER_ENGINE", "table").lower(),
            fajr_isha_method=int(os.getenv("NOOR_FAJR_ISHA_METHOD", "2")),
            asr_fiqh=int(os.getenv("NOOR_ASR_FIQH", "1")),
        )


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get application configuration."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def setup_logging(level: str = "INFO") -> None:
    """Setup application logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
