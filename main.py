# main.py
"""
Weekly league command line.

  python main.py [--roster FILE] [--verbose] weekly [--source URL ...] [--concurrent] [--headed]
  python main.py [--roster FILE] add-player NAME
  python main.py [--roster FILE] serve [--host HOST] [--port PORT]
"""

import argparse
import asyncio
import logging
import os

from league.config import LeagueConfig
from league.pipeline import WeeklyReport, run_weekly
from league.storage import RosterStore


def print_report(report: WeeklyReport) -> None:
    print("\n" + "=" * 60)
    print(f"LEAGUE WEEK {report.week}")
    print("=" * 60)
    for track in report.tracks:
        print(f"\n--- {track.name} ---")
        if track.is_error:
            print(f"  ({track.error})")
        for line in track.result_lines():
            print(f"  {line}")
    print("\n--- Weekly ranking ---")
    if not report.ranking:
        print("  No registered players scored this week.")
    for line in report.ranking_lines():
        print(f"  {line}")
    print("=" * 60)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weekly racing league")
    parser.add_argument("--roster", default=None, help="Path to the roster file (one player per line)")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    weekly = sub.add_parser("weekly", help="Scrape sources and print the weekly ranking")
    weekly.add_argument("--source", action="append", default=None, help="Leaderboard URL (repeatable)")
    weekly.add_argument("--concurrent", action="store_true", help="Scrape all sources at once")
    weekly.add_argument("--headed", action="store_true", help="Show the browser window")

    add = sub.add_parser("add-player", help="Register a player")
    add.add_argument("name")

    serve = sub.add_parser("serve", help="Run the web app")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=int(os.environ.get("PORT", 3000)))
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = LeagueConfig.from_env()
    if args.roster:
        config.roster_path = args.roster
    roster = RosterStore(config.roster_path)

    if args.command == "add-player":
        try:
            added = roster.add(args.name)
        except ValueError as exc:
            print(f"Error: {exc}")
            return 1
        print(f"Added {args.name.strip()}" if added else f"{args.name.strip()} is already registered")
        return 0

    if args.command == "serve":
        import uvicorn

        os.environ["LEAGUE_ROSTER_PATH"] = config.roster_path
        uvicorn.run("web.app:app", host=args.host, port=args.port)
        return 0

    if args.source:
        config.sources = args.source
    if args.concurrent:
        config.concurrent_scrapes = True
    if args.headed:
        config.headless = False

    report = asyncio.run(run_weekly(config, roster=roster))
    print_report(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
