"""CLI helpers for querying boards and configuring London departures."""

import asyncio
import json
import sys
from dataclasses import asdict
from typing import Any

import aiohttp

from london_departures.adapters.config import AppConfig
from london_departures.adapters.display.formatters import BoardFormatter
from london_departures.adapters.display.renderers import TextBoardRenderer
from london_departures.domain.errors import DepartureBoardError
from london_departures.domain.models import RAIL_MODE, StationBoard, StopPoint
from london_departures.wiring import create_board_service


async def search_stations(query: str, mode: str = "dlr") -> list[StopPoint]:
    """Search for stations serving a mode."""
    config = AppConfig()
    async with aiohttp.ClientSession() as session:
        board_service = create_board_service(config, session)
        return await board_service.search_stations(query, mode)


async def get_departures(station: str, mode: str = RAIL_MODE, rows: int | None = None) -> StationBoard:
    """Fetch one board; station is a CRS code for rail, a stop id otherwise."""
    config = AppConfig()
    async with aiohttp.ClientSession() as session:
        board_service = create_board_service(config, session)
        return await board_service.get_departures(station, mode, rows)


async def get_all_arrivals(mode: str = "dlr", rows: int | None = None) -> StationBoard:
    """Fetch upcoming arrivals across every stop of a light-rail mode."""
    config = AppConfig()
    async with aiohttp.ClientSession() as session:
        board_service = create_board_service(config, session)
        return await board_service.get_mode_departures(mode, rows)


def format_stop_points(stop_points: list[StopPoint]) -> str:
    """Format search results for the terminal."""
    lines = [f"\nFound {len(stop_points)} station(s):\n"]
    for stop in stop_points:
        lines.append(f"  {stop.name}")
        lines.append(f"    ID: {stop.id}")
        lines.append(f"    Modes: {', '.join(stop.modes)}")
        lines.append("")
    return "\n".join(lines)


def board_to_dict(board: StationBoard) -> dict[str, Any]:
    """Convert a board to JSON-serialisable data."""
    return asdict(board)


def generate_config_snippet(name: str, modes: list[str], crs: str | None = None) -> str:
    """Generate a [[stations]] TOML snippet."""
    normalized = [m.strip().lower() for m in modes if m.strip()]
    snippet = f'[[stations]]\nname = "{name}"\nmodes = {json.dumps(normalized)}\n'
    if crs:
        snippet += f'crs = "{crs.strip().upper()}"\n'
    elif RAIL_MODE in normalized:
        snippet += '# crs = "XXX"  # three-letter National Rail code, required for rail\n'
    return snippet


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="London Departures Helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for DLR stations
  london-departures-cli search "Canary Wharf" --mode dlr

  # Show the rail board for Stratford
  london-departures-cli departures SRA --mode rail

  # Show arrivals at a DLR stop
  london-departures-cli departures 940GZZDLCAN --mode dlr --rows 5

  # Show arrivals across the whole DLR network
  london-departures-cli all-arrivals --mode dlr

  # Generate config snippet
  london-departures-cli generate "Stratford" --modes rail dlr --crs SRA
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Station name to search for")
    search_parser.add_argument("--mode", default="dlr", help="Transport mode (default: dlr)")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Departures command
    departures_parser = subparsers.add_parser("departures", help="Show a departure board")
    departures_parser.add_argument("station", help="CRS code (rail) or TfL stop id")
    departures_parser.add_argument("--mode", default=RAIL_MODE, help="Transport mode (default: rail)")
    departures_parser.add_argument("--rows", type=int, default=None, help="Number of departures")
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # All arrivals command
    all_parser = subparsers.add_parser("all-arrivals", help="Show arrivals across a mode")
    all_parser.add_argument("--mode", default="dlr", help="Transport mode (default: dlr)")
    all_parser.add_argument("--rows", type=int, default=None, help="Number of arrivals")
    all_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate config snippet")
    generate_parser.add_argument("name", help="Station name")
    generate_parser.add_argument("--modes", nargs="+", default=["dlr"], help="Modes served")
    generate_parser.add_argument("--crs", default=None, help="National Rail CRS code")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    renderer = TextBoardRenderer(BoardFormatter())

    try:
        if args.command == "search":
            results = await search_stations(args.query, args.mode)
            if args.json:
                print(json.dumps([asdict(r) for r in results], indent=2, ensure_ascii=False))
            else:
                if not results:
                    print(f"No stations found for '{args.query}' ({args.mode})", file=sys.stderr)
                    sys.exit(1)
                print(format_stop_points(results))

        elif args.command in ("departures", "all-arrivals"):
            if args.command == "departures":
                board = await get_departures(args.station, args.mode, args.rows)
            else:
                board = await get_all_arrivals(args.mode, args.rows)
            if args.json:
                print(json.dumps(board_to_dict(board), indent=2, ensure_ascii=False))
            else:
                print("\n".join(renderer.render_board(board)))

        elif args.command == "generate":
            print(generate_config_snippet(args.name, args.modes, args.crs))

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except DepartureBoardError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
