"""
Command-line interface for the application.

This module provides the main entry point for the CLI and acts as the
rendering collaborator: it runs a flow, renders the returned view and
prints it.
"""

from __future__ import annotations

import argparse
import logging
import sys

from bikeshare_explorer import __version__
from bikeshare_explorer.config import get_settings
from bikeshare_explorer.flows.explore import country_stations, network_stations, search_networks
from bikeshare_explorer.renderers.directory import build_countries_text, build_directory_text
from bikeshare_explorer.renderers.stations import build_country_stations_text, build_stations_text


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bikeshare-explorer",
        description="Search bike-share networks and check station availability",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    search_parser = subparsers.add_parser("search", help="Search networks by name, city or country")
    search_parser.add_argument("query", nargs="*", help="Search text (empty lists everything)")

    countries_parser = subparsers.add_parser(
        "countries", help="Show per-country network counts for a search"
    )
    countries_parser.add_argument("query", nargs="*", help="Search text (empty lists everything)")

    stations_parser = subparsers.add_parser("stations", help="Show the stations of one network")
    stations_parser.add_argument("network_id", help="Network id, e.g. 'velib'")

    country_parser = subparsers.add_parser(
        "country", help="Show stations across every network in a country"
    )
    country_parser.add_argument("country_code", help="ISO 3166-1 alpha-2 code, e.g. 'fr'")
    country_parser.add_argument(
        "--max-networks",
        type=int,
        default=None,
        help="Networks to query (default: max_networks_to_query from settings)",
    )

    return parser


def configure_logging(debug: bool = False) -> None:
    """Send library logs to stderr at the configured level."""
    settings = get_settings()
    level = logging.DEBUG if debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _emit(text: str, has_error: bool) -> int:
    print(text.rstrip())
    return 1 if has_error else 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"API: {settings.api_base_url}")
    print(f"Max networks per country: {settings.max_networks_to_query}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    view = search_networks(" ".join(args.query))
    return _emit(build_directory_text(view), view.has_error)


def cmd_countries(args: argparse.Namespace) -> int:
    """Handle the 'countries' command."""
    view = search_networks(" ".join(args.query))
    return _emit(build_countries_text(view), view.has_error)


def cmd_stations(args: argparse.Namespace) -> int:
    """Handle the 'stations' command."""
    view = network_stations(args.network_id)
    return _emit(build_stations_text(view), view.has_error)


def cmd_country(args: argparse.Namespace) -> int:
    """Handle the 'country' command."""
    if args.max_networks is not None and args.max_networks < 1:
        print("Error: --max-networks must be at least 1", file=sys.stderr)
        return 2
    view = country_stations(args.country_code, max_networks=args.max_networks)
    return _emit(build_country_stations_text(view), view.has_error)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(getattr(args, "debug", False))

    commands = {
        "info": cmd_info,
        "search": cmd_search,
        "countries": cmd_countries,
        "stations": cmd_stations,
        "country": cmd_country,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
