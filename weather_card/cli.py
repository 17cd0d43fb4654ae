# ABOUTME: Command-line entry point that loads the weather card once and prints it.
# ABOUTME: Wires configuration, the retrying HTTP client and the load controller together.

import argparse
import asyncio
import logging
import os
import sys

from weather_card.city import StaticProfileProvider
from weather_card.config import config_from_env
from weather_card.controller import WeatherLoadController
from weather_card.deps import WidgetDeps, create_http_client
from weather_card.models import DEFAULT_LOCATION_FIELD, ErrorState, Units, WidgetConfiguration
from weather_card.render import render_card

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weather-card", description="Show current weather for a city")
    parser.add_argument("--city", help="fallback city when no profile location is available")
    parser.add_argument("--profile-location", help="location value served as the user's profile field")
    parser.add_argument("--units", choices=[u.value for u in Units], help="default display units")
    parser.add_argument("--toggle", action="store_true", help="flip the display units once before printing")
    parser.add_argument("--credit", action="store_true", default=None, help="show the data source credit")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


async def run(config: WidgetConfiguration, deps: WidgetDeps, toggle: bool = False) -> int:
    """Load once with the given dependencies, print the card and return the exit status."""
    controller = WeatherLoadController(config, deps.geocoder, deps.weather, deps.profile_provider)
    try:
        state = await controller.load()
        if toggle:
            controller.toggle_units()
        print(render_card(state, controller.display_units, config.show_credit))
    finally:
        controller.destroy()
    return 1 if isinstance(state, ErrorState) else 0


async def _main(args: argparse.Namespace) -> int:
    config = config_from_env(fallback_city=args.city, default_units=args.units, show_credit=args.credit)
    profile = None
    if args.profile_location is not None:
        key = config.location_field_key or DEFAULT_LOCATION_FIELD
        profile = StaticProfileProvider({key: args.profile_location})

    async with create_http_client() as client:
        deps = WidgetDeps(http_client=client, profile_provider=profile)
        return await run(config, deps, toggle=args.toggle)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else os.environ.get("WEATHER_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return asyncio.run(_main(args))


if __name__ == "__main__":
    sys.exit(main())
