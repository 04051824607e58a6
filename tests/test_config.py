"""Tests for configuration."""

import pytest

from noor.config import AppConfig
from noor.infrastructure.price_provider import StaticMetalPriceProvider


class TestAppConfig:
    """AppConfig tests."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("NOOR_PORT", "NOOR_GOLD_PRICE", "NOOR_PRAYER_ENGINE"):
            monkeypatch.delenv(name, raising=False)

        config = AppConfig.from_env()

        assert config.port == 8080
        assert config.gold_price == 65.50
        assert config.silver_price == 0.85
        assert config.prayer_engine == "table"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NOOR_PORT", "9000")
        monkeypatch.setenv("NOOR_GOLD_PRICE", "70.25")
        monkeypatch.setenv("NOOR_CURRENCY", "EUR")
        monkeypatch.setenv("NOOR_PRAYER_ENGINE", "Astronomical")
        monkeypatch.setenv("NOOR_FAJR_ISHA_METHOD", "5")

        config = AppConfig.from_env()

        assert config.port == 9000
        assert config.gold_price == 70.25
        assert config.currency == "EUR"
        assert config.prayer_engine == "astronomical"
        assert config.fajr_isha_method == 5

    def test_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown prayer engine"):
            AppConfig(prayer_engine="sundial")

    def test_price_provider_from_config(self) -> None:
        config = AppConfig(gold_price=80.0, silver_price=1.1, currency="GBP")
        prices = StaticMetalPriceProvider.from_config(config).get_prices()

        assert prices.gold_per_gram == 80.0
        assert prices.silver_per_gram == 1.1
        assert prices.currency == "GBP"
