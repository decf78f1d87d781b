"""Command-line access to the timetable computations on a dataset file."""

import argparse
import asyncio
import json
import sys
from datetime import date

from train_timetable.adapters.config import AppConfig
from train_timetable.adapters.json_store import JsonScheduleRepository
from train_timetable.adapters.serializers import (
    classification_to_dict,
    schedule_view_to_dict,
    validity_dates_to_dict,
)
from train_timetable.application.services import TimetableService
from train_timetable.domain.errors import TimetableError
from train_timetable.domain.models import DayClassification, ScheduleView

GAP = "-"


def format_classification(classification: DayClassification, reference_date: date) -> str:
    """Render a day classification as a short human-readable report."""
    lines = [
        f"Date: {reference_date.isoformat()}",
        f"  Day type: {classification.day_type}",
        f"  Valid period: {'yes' if classification.is_valid_period else 'no'}",
        f"  Holiday: {'yes' if classification.is_holiday else 'no'}",
        f"  Weekend: {'yes' if classification.is_weekend else 'no'}",
        f"  Valid: {'yes' if classification.is_valid else 'no'}",
    ]
    return "\n".join(lines)


def format_schedule_table(view: ScheduleView) -> str:
    """Render a schedule view as a table: one row per station, one column per train."""
    if view.is_empty():
        return f"No train running for line {view.line}, direction {view.direction}."

    first = next(iter(view.stations.values()))
    headers = [
        f"{number} ({service})"
        for number, service in zip(first.train_numbers, first.service_types, strict=True)
    ]
    station_width = max(len("Station"), *(len(station) for station in view.stations))
    column_widths = [
        max(len(header), *(len(tt.times[i] or GAP) for tt in view.stations.values()))
        for i, header in enumerate(headers)
    ]

    rows = [
        "  ".join(
            ["Station".ljust(station_width)]
            + [header.ljust(width) for header, width in zip(headers, column_widths, strict=True)]
        ).rstrip()
    ]
    for station, timetable in view.stations.items():
        cells = [
            (time or GAP).ljust(width)
            for time, width in zip(timetable.times, column_widths, strict=True)
        ]
        rows.append("  ".join([station.ljust(station_width), *cells]).rstrip())
    return "\n".join(rows)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, use YYYY-MM-DD") from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        description="Train timetable dataset queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Is today an ordinary, weekend or holiday service day?
  train-timetable-cli validity

  # Timetable of line L1, direction A on a given date
  train-timetable-cli schedules L1 A --date 2024-06-12

  # Same, as the JSON served by the API
  train-timetable-cli schedules L1 A --json
        """,
    )
    parser.add_argument(
        "--data-file", help="Dataset JSON file (defaults to DATA_FILE / configuration)"
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    validity_parser = subparsers.add_parser("validity", help="Classify a date")
    validity_parser.add_argument("--date", type=_parse_date, help="Date (YYYY-MM-DD), default today")

    subparsers.add_parser("validity-dates", help="Show the dataset validity dates")

    schedules_parser = subparsers.add_parser(
        "schedules", help="Show the timetable of a line and direction"
    )
    schedules_parser.add_argument("line", help="Line identifier")
    schedules_parser.add_argument("direction", help="Direction identifier")
    schedules_parser.add_argument(
        "--date", type=_parse_date, help="Date (YYYY-MM-DD), default today"
    )

    subparsers.add_parser("announcements", help="Show the dataset announcements")
    subparsers.add_parser("stations", help="Show the dataset station metadata")

    return parser


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def run_command(args: argparse.Namespace, service: TimetableService, today: date) -> None:
    """Execute a parsed subcommand and print its result."""
    if args.command == "validity":
        reference_date = args.date or today
        classification = await service.compute_validity(reference_date)
        if args.json:
            _print_json(classification_to_dict(classification))
        else:
            print(format_classification(classification, reference_date))

    elif args.command == "validity-dates":
        validity = await service.load_validity_dates()
        if args.json:
            _print_json(validity_dates_to_dict(validity))
        elif validity is None:
            print("No validity data in dataset.")
        else:
            print(f"Valid from {validity.date_debut} to {validity.date_fin}")

    elif args.command == "schedules":
        view = await service.compute_schedules(args.line, args.direction, args.date or today)
        if args.json:
            _print_json(schedule_view_to_dict(view))
        else:
            print(format_schedule_table(view))

    elif args.command == "announcements":
        announcements = await service.load_announcements()
        if args.json or announcements:
            _print_json(announcements)
        else:
            print("No announcements.")

    elif args.command == "stations":
        _print_json(await service.load_stations())


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    repository = JsonScheduleRepository(args.data_file or config.data_file)
    service = TimetableService(repository, clock=config.today)

    try:
        await run_command(args, service, config.today())
    except TimetableError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
