"""Get one class timetable, or the class catalog, as JSON or a table.

Run with: python scripts/scrape_timetable.py o29
Table:    python scripts/scrape_timetable.py o29 --table
Local:    python scripts/scrape_timetable.py --file tests/fixtures/plan_o6.html
Catalog:  python scripts/scrape_timetable.py --list
Columns:  python scripts/scrape_timetable.py o29 --columns --output data/o29.json

Exit codes:
  0 = success (JSON or table on stdout, or file written with --output)
  1 = error (message on stderr)
"""

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import TypeAdapter

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.timetable import service  # noqa: E402
from src.timetable.config import get_config  # noqa: E402
from src.timetable.errors import ScrapingError  # noqa: E402
from src.timetable.logging import setup_logging  # noqa: E402
from src.timetable.markup import WEEKDAYS  # noqa: E402
from src.timetable.models import (  # noqa: E402
    ClassEntry,
    GroupedField,
    Schedule,
    SingleField,
    WeekdayField,
)
from src.timetable.pages.schedule import SchedulePage  # noqa: E402


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Get a class timetable from the school plan as JSON or table.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("schedule_id", nargs="?", help="Timetable id, e.g. o29.")
    source.add_argument("--file", type=Path, help="Parse a saved timetable page.")
    source.add_argument(
        "--list", action="store_true", help="List available class timetables."
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--table", action="store_true", help="Print a human-readable table."
    )
    output_group.add_argument(
        "--columns",
        action="store_true",
        help="Output one list per weekday instead of one object per row.",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write JSON here.")
    return parser.parse_args()


def _format_field(field: WeekdayField) -> str:
    if field is None:
        return "-"
    if isinstance(field, SingleField):
        occupant = field.occupant
        return f"{occupant.subject} {occupant.teacher} {occupant.classroom}".strip()
    assert isinstance(field, GroupedField)
    return " | ".join(
        f"[{number}] {occupant.subject} {occupant.teacher} {occupant.classroom}".strip()
        for number, occupant in sorted(field.groups.items())
    )


def _print_table(schedule: Schedule) -> None:
    for row in schedule:
        print(row.time)
        for weekday in WEEKDAYS:
            print(f"  {weekday:<10} {_format_field(row.day(weekday))}")


def _write(payload: str, output: Path | None) -> None:
    if output is None:
        print(payload)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    _log(f"Wrote {output}")


def main() -> int:
    args = _parse_args()
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    try:
        if args.list:
            classes = service.get_classes(config)
            payload = TypeAdapter(list[ClassEntry]).dump_json(classes, indent=2)
            _write(payload.decode(), args.output)
            return 0

        if args.file is not None:
            schedule = SchedulePage().extract(args.file.read_bytes())
        else:
            schedule = service.get_schedule(args.schedule_id, config)
    except ScrapingError as e:
        _log(f"ERROR: {type(e).__name__}: {e}")
        return 1
    except OSError as e:
        _log(f"ERROR: {e}")
        return 1

    if args.table:
        _print_table(schedule)
    elif args.columns:
        _write(schedule.to_columns().model_dump_json(indent=2), args.output)
    else:
        _write(schedule.model_dump_json(indent=2), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
