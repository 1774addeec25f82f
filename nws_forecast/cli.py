# ABOUTME: Command-line entry point that fetches one NWS forecast and prints it as JSON.
# ABOUTME: Loads config from the environment, lets flags override it, and configures logging.

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from nws_forecast.config import NwsConfig, load_config
from nws_forecast.deps import create_http_client
from nws_forecast.errors import WeatherError
from nws_forecast.models import UnitSystem, WeatherResult
from nws_forecast.nws_service import WeatherService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nws-forecast", description="Summarize the NWS hourly forecast.")
    parser.add_argument("--lat", help="Latitude, overrides NWS_LATITUDE")
    parser.add_argument("--lon", help="Longitude, overrides NWS_LONGITUDE")
    parser.add_argument("--hours", type=int, help="Number of hourly periods to summarize")
    parser.add_argument("--units", choices=[u.value for u in UnitSystem])
    parser.add_argument("--current-only", action="store_true", help="Skip the forecast summary")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def apply_overrides(config: NwsConfig, args: argparse.Namespace) -> NwsConfig:
    """Return a copy of ``config`` with any command-line values applied."""
    updates: dict = {}
    if args.lat and args.lon:
        updates["coordinates"] = (args.lat, args.lon)
    if args.hours is not None:
        updates["forecast_hours"] = args.hours
    if args.units:
        updates["units"] = UnitSystem(args.units)
    # Re-validate so --hours 0 is rejected like NWS_FORECAST_HOURS=0 would be
    return NwsConfig.model_validate({**config.model_dump(), **updates})


async def fetch(config: NwsConfig, need_forecast: bool) -> WeatherResult:
    async with create_http_client(config) as client:
        return await WeatherService(client, config).get_weather(need_forecast=need_forecast)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = apply_overrides(load_config(), args)
    except ValidationError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        result = asyncio.run(fetch(config, need_forecast=not args.current_only))
    except WeatherError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
