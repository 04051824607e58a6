"""Tests for zakat service."""

import pytest

from noor.domain.models import MetalPrices, NisabStandard, ZakatInput
from noor.infrastructure.price_provider import StaticMetalPriceProvider
from noor.services.zakat_service import (
    LUNAR_YEAR_DAYS,
    ZAKAT_RATE,
    ZakatService,
    calculate_nisab,
    calculate_zakat,
)


@pytest.fixture
def prices() -> MetalPrices:
    """Default metal prices."""
    return MetalPrices(gold_per_gram=65.50, silver_per_gram=0.85)


class TestNisab:
    """Nisab tests."""

    def test_gold_nisab(self, prices: MetalPrices) -> None:
        assert calculate_nisab(prices) == pytest.approx(5567.50)

    def test_silver_nisab(self, prices: MetalPrices) -> None:
        assert calculate_nisab(prices, NisabStandard.SILVER) == pytest.approx(505.75)


class TestCalculateZakat:
    """calculate_zakat tests."""

    def test_no_wealth(self, prices: MetalPrices) -> None:
        result = calculate_zakat(ZakatInput(), prices)

        assert result.total_wealth == 0
        assert result.is_eligible is False
        assert result.zakat_due == 0

    def test_cash_above_nisab(self, prices: MetalPrices) -> None:
        result = calculate_zakat(ZakatInput(cash=10000), prices)

        assert result.nisab_value == pytest.approx(5567.50)
        assert result.total_wealth == 10000
        assert result.is_eligible is True
        assert result.zakat_due == pytest.approx(250.00)

    def test_nisab_boundary_is_inclusive(self, prices: MetalPrices) -> None:
        result = calculate_zakat(ZakatInput(cash=85 * 65.50), prices)

        assert result.is_eligible is True
        assert result.zakat_due == pytest.approx(5567.50 * ZAKAT_RATE)

    def test_just_below_nisab(self, prices: MetalPrices) -> None:
        result = calculate_zakat(ZakatInput(cash=5567.49), prices)

        assert result.is_eligible is False
        assert result.zakat_due == 0

    def test_deductions_reduce_wealth(self, prices: MetalPrices) -> None:
        result = calculate_zakat(
            ZakatInput(cash=8000, investments=2000, personal_debts=3000, immediate_expenses=1500),
            prices,
        )

        assert result.total_wealth == 5500
        assert result.is_eligible is False

    def test_debts_exceeding_assets(self, prices: MetalPrices) -> None:
        result = calculate_zakat(ZakatInput(cash=100, business_debts=1000), prices)

        assert result.total_wealth == -900
        assert result.is_eligible is False
        assert result.zakat_due == 0

    def test_all_asset_categories_count(self, prices: MetalPrices) -> None:
        values = {name: 1000.0 for name in ZakatInput.ASSET_FIELDS}
        result = calculate_zakat(ZakatInput(**values), prices)

        assert result.total_wealth == 8000
        assert result.zakat_due == pytest.approx(200)
        assert result.breakdown == values

    def test_silver_price_does_not_affect_eligibility(self) -> None:
        cheap_silver = MetalPrices(gold_per_gram=65.50, silver_per_gram=0.01)
        result = calculate_zakat(ZakatInput(cash=1000), cheap_silver)

        assert result.is_eligible is False


class TestZakatService:
    """ZakatService tests."""

    @pytest.fixture
    def provider(self, prices: MetalPrices) -> StaticMetalPriceProvider:
        return StaticMetalPriceProvider(prices)

    @pytest.fixture
    def service(self, provider: StaticMetalPriceProvider) -> ZakatService:
        return ZakatService(provider)

    def test_calculate(self, service: ZakatService) -> None:
        result = service.calculate(ZakatInput(cash=10000))
        assert result.zakat_due == pytest.approx(250)

    def test_nisab_info(self, service: ZakatService, prices: MetalPrices) -> None:
        info = service.nisab_info()

        assert info.gold.grams == 85
        assert info.gold.value == pytest.approx(5567.50)
        assert info.silver.grams == 595
        assert info.silver.value == pytest.approx(505.75)
        assert info.recommended == NisabStandard.GOLD
        assert info.zakat_rate == 0.025
        assert info.lunar_year_days == LUNAR_YEAR_DAYS == 354
        assert info.currency == "USD"
        assert info.last_updated == prices.last_updated
