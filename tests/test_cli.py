"""Tests for the command-line interface."""

import sys

import pytest

from noor.cli import _price_provider, create_parser, main
from noor.config import AppConfig
from noor.infrastructure.price_provider import StaticMetalPriceProvider


def run_cli(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["noor", *args])
    return main()


class TestParser:
    """Argument parser tests."""

    def test_times_arguments(self) -> None:
        args = create_parser().parse_args(
            ["times", "--lat", "41", "--lng", "29", "--days", "3", "--method", "Egypt"]
        )

        assert args.command == "times"
        assert args.days == 3
        assert args.method.display_name == "Egyptian General Authority of Survey"

    def test_invalid_method(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["times", "--lat", "0", "--lng", "0", "--method", "Sundial"])

    def test_zakat_arguments(self) -> None:
        args = create_parser().parse_args(["zakat", "--cash", "100", "--business-assets", "50"])

        assert args.cash == 100
        assert args.business_assets == 50
        assert args.personal_debts == 0


class TestCommands:
    """Subcommand output tests."""

    def test_times(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        code = run_cli(
            monkeypatch, "times", "--lat", "0", "--lng", "0", "--date", "2024-03-20", "--days", "2"
        )

        out = capsys.readouterr().out
        assert code == 0
        assert "20.03.2024" in out
        assert "21.03.2024" in out
        assert "05:30" in out
        assert "Muslim World League" in out
        assert "Remaining: " in out

    def test_qibla(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        code = run_cli(monkeypatch, "qibla", "--lat", "51.5074", "--lng", "-0.1278")

        assert code == 0
        assert "118.99° (ESE)" in capsys.readouterr().out

    def test_invalid_location(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        code = run_cli(monkeypatch, "qibla", "--lat", "95", "--lng", "0")

        assert code == 2
        assert "Invalid latitude" in capsys.readouterr().err

    def test_zakat(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        code = run_cli(monkeypatch, "zakat", "--cash", "10000", "--gold-price", "65.50")

        out = capsys.readouterr().out
        assert code == 0
        assert "Zakat due: $250.00" in out

    def test_zakat_below_nisab(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        code = run_cli(monkeypatch, "zakat", "--cash", "1000", "--gold-price", "65.50")

        assert code == 0
        assert "No zakat is due" in capsys.readouterr().out

    def test_zakat_negative_amount(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        code = run_cli(monkeypatch, "zakat", "--cash", "-5")

        assert code == 2
        assert "non-negative" in capsys.readouterr().err

    def test_nisab(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        code = run_cli(monkeypatch, "nisab", "--gold-price", "100", "--silver-price", "1")

        out = capsys.readouterr().out
        assert code == 0
        assert "$8,500.00 (recommended)" in out
        assert "$595.00" in out
        assert "354 days" in out


class TestPriceProvider:
    """Price option handling."""

    def test_overrides_configured_prices(self) -> None:
        args = create_parser().parse_args(["nisab", "--gold-price", "100"])

        config, provider = _price_provider(args)

        assert isinstance(config, AppConfig)
        assert isinstance(provider, StaticMetalPriceProvider)
        assert provider.get_prices().gold_per_gram == 100
        assert provider.get_prices().silver_per_gram == config.silver_price
