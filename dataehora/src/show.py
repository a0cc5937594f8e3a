"""CLI entry point: Brasília clock, theme and next national holiday.

Usage:
    python -m dataehora.src.show
    python -m dataehora.src.show --at 2025-04-20T10:00:00-03:00 --no-sync
    python -m dataehora.src.show --year 2025 --to 2026 --csv feriados.csv
"""

import argparse
from datetime import datetime

from .clock import Clock, FixedClock, SyncedClock, SystemClock, WorldTimeSource
from .config import load_config
from .countdown import holiday_message, upcoming
from .formatting import PortugueseFormatter
from .holidays import holidays_frame
from .theme import PREFERENCES, resolve_theme


def build_clock(cfg: dict, at: datetime | None = None, sync: bool = True) -> Clock:
    tz = cfg["timezone"]
    if at is not None:
        return FixedClock(at, tz)
    ts = cfg["time_sync"]
    if not (sync and ts["enabled"]):
        return SystemClock(tz)
    source = WorldTimeSource(ts["url"], timeout=ts["timeout_seconds"])
    return SyncedClock(source, tz, refresh_seconds=ts["refresh_seconds"])


def print_status(clock: Clock, preference: str, prefers_dark: bool = False) -> None:
    fmt = PortugueseFormatter()
    now = clock.now()
    print(now.strftime("%H:%M:%S"))
    print(fmt.long_date(now.date()))
    print(f"Tema: {resolve_theme(preference, now, prefers_dark)}")
    print(holiday_message(upcoming(now, fmt)))


def print_holidays(start_year: int, end_year: int, csv_path: str | None) -> None:
    df = holidays_frame(start_year, end_year)
    if csv_path:
        df.to_csv(csv_path, index=False)
        print(f"Saved {len(df)} holidays to {csv_path}")
    else:
        print(df.to_string(index=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Brasília time and next Brazilian national holiday")
    parser.add_argument(
        "--at", type=datetime.fromisoformat, default=None,
        help="Use a fixed instant (ISO 8601; without offset it is Brasília wall time)",
    )
    parser.add_argument("--no-sync", action="store_true", help="Skip official time sync")
    parser.add_argument("--theme", choices=PREFERENCES, default=None, help="Theme preference")
    parser.add_argument(
        "--prefers-dark", action="store_true",
        help="System prefers a dark color scheme (used by the 'default' theme)",
    )
    parser.add_argument("--year", type=int, default=None, help="List holidays of this year")
    parser.add_argument("--to", type=int, default=None, help="Last year of the listing (inclusive)")
    parser.add_argument("--csv", default=None, help="Write the holiday listing to CSV")
    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.year is None and (args.csv or args.to is not None):
        parser.error("--csv and --to require --year")

    cfg = load_config()

    if args.year is not None:
        print_holidays(args.year, args.to or args.year, args.csv)
        return

    clock = build_clock(cfg, at=args.at, sync=not args.no_sync)
    print_status(clock, args.theme or cfg["theme"]["preference"], args.prefers_dark)


if __name__ == "__main__":
    main()
