"""Command-line interface for Noor."""

import argparse
import sys
from dataclasses import replace
from datetime import date, datetime

from noor import __version__
from noor.config import AppConfig, get_config
from noor.domain.models import CalculationMethod
from noor.infrastructure.price_provider import StaticMetalPriceProvider


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="noor",
        description="Prayer times, Qibla direction and Zakat calculation",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"noor {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", "-H", help="Server address (default: NOOR_HOST or 0.0.0.0)")
    serve_parser.add_argument(
        "--port", "-p", type=int, help="Server port (default: NOOR_PORT or 8080)"
    )
    serve_parser.add_argument(
        "--log-level",
        "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: NOOR_LOG_LEVEL or INFO)",
    )

    # times command
    times_parser = subparsers.add_parser("times", help="Show prayer times")
    times_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    times_parser.add_argument("--lng", type=float, required=True, help="Longitude")
    times_parser.add_argument(
        "--date",
        type=date.fromisoformat,
        help="First day, YYYY-MM-DD (default: today)",
    )
    times_parser.add_argument(
        "--days", "-d", type=int, default=1, help="Number of days (default: 1)"
    )
    times_parser.add_argument(
        "--method",
        "-m",
        type=CalculationMethod,
        choices=list(CalculationMethod),
        default=CalculationMethod.MWL,
        help="Calculation method (default: MWL)",
    )
    times_parser.add_argument(
        "--engine",
        "-e",
        choices=["table", "astronomical"],
        help="Prayer time engine (default: NOOR_PRAYER_ENGINE or table)",
    )

    # qibla command
    qibla_parser = subparsers.add_parser("qibla", help="Show Qibla direction")
    qibla_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    qibla_parser.add_argument("--lng", type=float, required=True, help="Longitude")

    # zakat command
    zakat_parser = subparsers.add_parser("zakat", help="Calculate zakat")
    for name in (
        "cash",
        "gold",
        "silver",
        "investments",
        "business-assets",
        "receivables",
        "cryptocurrency",
        "other",
        "personal-debts",
        "business-debts",
        "immediate-expenses",
    ):
        zakat_parser.add_argument(f"--{name}", type=float, default=0.0, metavar="AMOUNT")
    zakat_parser.add_argument("--gold-price", type=float, help="Gold price per gram")
    zakat_parser.add_argument("--silver-price", type=float, help="Silver price per gram")

    # nisab command
    nisab_parser = subparsers.add_parser("nisab", help="Show current nisab values")
    nisab_parser.add_argument("--gold-price", type=float, help="Gold price per gram")
    nisab_parser.add_argument("--silver-price", type=float, help="Silver price per gram")

    return parser


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the web server."""
    import uvicorn

    from noor.api.app import create_app
    from noor.config import setup_logging

    config = get_config()
    config = replace(
        config,
        host=args.host or config.host,
        port=args.port or config.port,
        log_level=args.log_level or config.log_level,
    )
    setup_logging(config.log_level)

    app = create_app(config)

    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def cmd_times(args: argparse.Namespace) -> None:
    """Show prayer times."""
    from noor.domain.models import Location
    from noor.services.prayer_service import create_prayer_service

    config = get_config()
    service = create_prayer_service(
        Location(latitude=args.lat, longitude=args.lng),
        args.method,
        engine=args.engine or config.prayer_engine,
        fajr_isha_method=config.fajr_isha_method,
        asr_fiqh=config.asr_fiqh,
    )

    now = datetime.now(service.timezone)
    start = args.date or now.date()
    times_list = service.calculate_range(start, args.days)

    print(f"\n📍 Location: {args.lat:.4f}, {args.lng:.4f}")
    print(f"🌍 Timezone: {service.timezone_name}")
    print(f"🧭 Method: {args.method.display_name} ({service.engine})")
    print()

    print("=" * 75)
    print(
        f"{'Date':<15} {'Fajr':>8} {'Sunrise':>8} {'Dhuhr':>8} {'Asr':>8} {'Maghrib':>8} {'Isha':>8}"
    )
    print("-" * 75)

    for times in times_list:
        print(
            f"{times.date.strftime('%d.%m.%Y'):<15} "
            f"{times.fajr.strftime('%H:%M'):>8} "
            f"{times.sunrise.strftime('%H:%M'):>8} "
            f"{times.dhuhr.strftime('%H:%M'):>8} "
            f"{times.asr.strftime('%H:%M'):>8} "
            f"{times.maghrib.strftime('%H:%M'):>8} "
            f"{times.isha.strftime('%H:%M'):>8}"
        )

    print("=" * 75)

    next_prayer = service.get_next_prayer(now)
    print(f"⏭️  Next: {next_prayer.name.display_name} at {next_prayer.time_str} ({next_prayer.date})")
    countdown = service.get_time_until_next_prayer(now)
    hours, remainder = divmod(int(countdown.total_seconds()), 3600)
    print(f"⏳ Remaining: {hours:02d}:{remainder // 60:02d}")


def cmd_qibla(args: argparse.Namespace) -> None:
    """Show Qibla direction."""
    from noor.domain.models import Location
    from noor.services.qibla_service import calculate_qibla

    result = calculate_qibla(Location(latitude=args.lat, longitude=args.lng))

    print(f"\n📍 Location: {args.lat:.4f}, {args.lng:.4f}")
    print(f"🕋 Qibla: {result.bearing:.2f}° ({result.compass})")


def _price_provider(args: argparse.Namespace) -> tuple[AppConfig, StaticMetalPriceProvider]:
    config = get_config()
    config = replace(
        config,
        gold_price=args.gold_price or config.gold_price,
        silver_price=args.silver_price or config.silver_price,
    )
    return config, StaticMetalPriceProvider.from_config(config)


def cmd_zakat(args: argparse.Namespace) -> None:
    """Calculate zakat."""
    from babel.numbers import format_currency

    from noor.domain.models import ZakatInput
    from noor.services.zakat_service import ZakatService

    config, provider = _price_provider(args)
    service = ZakatService(provider)

    result = service.calculate(ZakatInput.from_dict(vars(args)))

    def money(amount: float) -> str:
        return format_currency(amount, config.currency, locale=config.locale)

    print(f"\n💰 Net wealth: {money(result.total_wealth)}")
    print(f"⚖️  Nisab (85 g gold): {money(result.nisab_value)}")
    if result.is_eligible:
        print(f"✅ Zakat due: {money(result.zakat_due)}")
    else:
        print("ℹ️  Wealth is below the nisab threshold. No zakat is due.")


def cmd_nisab(args: argparse.Namespace) -> None:
    """Show nisab values."""
    from babel.numbers import format_currency

    from noor.services.zakat_service import ZakatService

    config, provider = _price_provider(args)
    info = ZakatService(provider).nisab_info()

    for threshold in (info.gold, info.silver):
        value = format_currency(threshold.value, info.currency, locale=config.locale)
        recommended = " (recommended)" if threshold.standard is info.recommended else ""
        print(
            f"{threshold.standard.value.capitalize():<8} {threshold.grams:>5g} g × "
            f"{threshold.price_per_gram:g} = {value}{recommended}"
        )
    print(f"Rate: {info.zakat_rate:.1%}, held for {info.lunar_year_days} days")


def main() -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        # Serve by default
        args.command = "serve"
        args.host = None
        args.port = None
        args.log_level = None

    commands = {
        "serve": cmd_serve,
        "times": cmd_times,
        "qibla": cmd_qibla,
        "zakat": cmd_zakat,
        "nisab": cmd_nisab,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        try:
            cmd_func(args)
        except ValueError as e:
            print(f"❌ Error: {e}", file=sys.stderr)
            return 2
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
