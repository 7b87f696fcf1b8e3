#!/usr/bin/env python3
"""
Drive cycle simulation - Main Entry Point

Usage:
    drive-cycle                                   # Prompt for coordinates
    drive-cycle --start 40 -75 --destination 40.1 -74.9
    drive-cycle --web                             # Run debug web interface
"""

import argparse
import asyncio
import logging
import sys

from .console import format_outcome, format_report, parse_coordinate, prompt_coordinates
from .control import SimulationDriver
from .exceptions import InvalidInputError
from .params import Parameters
from .perception import NavigationState

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Hourly drive cycle simulation")
    parser.add_argument(
        "--start",
        nargs=2,
        metavar=("LAT", "LON"),
        help="Current latitude and longitude (prompted if omitted)",
    )
    parser.add_argument(
        "--destination",
        nargs=2,
        metavar=("LAT", "LON"),
        help="Destination latitude and longitude (prompted if omitted)",
    )
    parser.add_argument("--speed", type=float, help="Distance per hour")
    parser.add_argument("--heading", type=float, help="Heading in degrees")
    parser.add_argument("--hours", type=int, help="Maximum hours to simulate")
    parser.add_argument(
        "--freeze-cycle",
        action="store_true",
        help="Keep the same mock perception every hour",
    )
    parser.add_argument(
        "--params",
        metavar="FILE",
        help="JSON file with runtime parameters",
    )
    parser.add_argument(
        "--web",
        action="store_true",
        help="Enable web interface for debugging",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def build_params(args) -> Parameters:
    """Load parameters and apply command line overrides."""
    params = Parameters.load(args.params)
    overrides = {
        "speed": args.speed,
        "heading": args.heading,
        "max_hours": args.hours,
    }
    params.override(**{k: v for k, v in overrides.items() if v is not None})
    if args.freeze_cycle:
        params.advance_cycle = False
    return params


def read_initial_state(args) -> NavigationState:
    """Initial state from flags, prompting for anything missing."""
    if args.start and args.destination:
        lat, lon = (parse_coordinate(v, "start") for v in args.start)
        dest_lat, dest_lon = (parse_coordinate(v, "destination") for v in args.destination)
        return NavigationState(lat, lon, dest_lat, dest_lon)
    if args.start or args.destination:
        raise InvalidInputError("--start and --destination must be given together")
    return prompt_coordinates()


def print_report(report):
    for line in format_report(report):
        print(line)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)

    try:
        params = build_params(args)
    except InvalidInputError as e:
        logger.error(f"Invalid parameter: {e}")
        return 2

    if args.web:
        from .web import run_server

        async def run_web():
            runner = await run_server(params=params)
            logger.info("Press Ctrl+C to stop")
            try:
                while True:
                    await asyncio.sleep(1)
            except asyncio.CancelledError:
                pass
            finally:
                await runner.cleanup()

        try:
            asyncio.run(run_web())
        except KeyboardInterrupt:
            logger.info("Web interface stopped")
        return 0

    try:
        initial_state = read_initial_state(args)
        result = SimulationDriver(params).run(initial_state, on_tick=print_report)
    except InvalidInputError as e:
        logger.error(f"Invalid input: {e}")
        return 2

    outcome = format_outcome(result)
    if outcome:
        print(outcome)
    return 0


if __name__ == "__main__":
    sys.exit(main())
