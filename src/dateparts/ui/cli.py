# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from dateparts.adapters.jsonl import CandidateFileError
from dateparts.app import check_candidate_file, check_date_parts
from dateparts.config import ConfigurationError, configure_logging, get_cli_config
from dateparts.domain.calendar import get_days_in_month, is_valid_date, is_valid_ordered_date
from dateparts.domain.parsing import parse_part, parse_parts, split_date_string
from dateparts.domain.types import OrderedDate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dateparts.domain.types import DateParts

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _add_parts_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "parts",
        nargs="+",
        metavar="PART",
        help="Three integers in any order, or a single date string such as 2023-06-15",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check whether three integers can form a valid year/month/day date"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check whether the parts form a valid date")
    _add_parts_argument(check)
    check.add_argument(
        "--ordered",
        action="store_true",
        help="Read the parts strictly as year, month, day instead of trying every order",
    )

    orders = subparsers.add_parser("orders", help="List every ordering that yields a valid date")
    _add_parts_argument(orders)

    days = subparsers.add_parser("days-in-month", help="Print the day count of a month")
    days.add_argument("year", type=str, help="Year number")
    days.add_argument("month", type=str, help="Month number")

    check_file = subparsers.add_parser(
        "check-file",
        help="Check every record of a JSON-lines file ({\"parts\": [a, b, c], \"id\": ...})",
    )
    check_file.add_argument("path", type=str, help="Path to the JSON-lines file")

    return parser.parse_args(list(argv))


def _resolve_parts(values: Sequence[str]) -> DateParts:
    if len(values) == 1:
        return split_date_string(values[0])
    return parse_parts(values)


def _run_check(parts: DateParts, *, ordered: bool) -> int:
    if ordered:
        is_valid = is_valid_ordered_date(*parts)
    else:
        is_valid = is_valid_date(*parts)
    print("valid" if is_valid else "invalid")
    return EXIT_OK if is_valid else EXIT_INVALID


def _run_orders(parts: DateParts) -> int:
    outcome = check_date_parts(*parts)
    if not outcome.is_valid:
        print("invalid")
        return EXIT_INVALID
    for order in outcome.orders:
        print(f"{order} {OrderedDate(*order.arrange(outcome.parts)).isoformat()}")
    return EXIT_OK


def _run_days_in_month(year: int, month: int) -> int:
    print(get_days_in_month(year, month))
    return EXIT_OK


def _run_check_file(path: str) -> int:
    batch = check_candidate_file(path)
    for record, outcome in batch.results:
        if outcome.is_valid:
            print(f"{record.label}: valid ({','.join(outcome.orders)})")
        else:
            print(f"{record.label}: invalid")
    print(f"checked={batch.checked} valid={batch.valid} invalid={batch.invalid}")
    return EXIT_OK if batch.invalid == 0 else EXIT_INVALID


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        config = get_cli_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(EXIT_ERROR)
    configure_logging(level=config.log_level)

    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parts: DateParts | None = None
    year_month: tuple[int, int] | None = None
    try:
        parsed_args = _parse_args(args_list)
        if parsed_args.command in ("check", "orders"):
            parts = _resolve_parts(parsed_args.parts)
        elif parsed_args.command == "days-in-month":
            year_month = (parse_part(parsed_args.year), parse_part(parsed_args.month))
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(EXIT_ERROR)

    try:
        if parsed_args.command == "check" and parts is not None:
            status = _run_check(parts, ordered=parsed_args.ordered)
        elif parsed_args.command == "orders" and parts is not None:
            status = _run_orders(parts)
        elif parsed_args.command == "days-in-month" and year_month is not None:
            status = _run_days_in_month(*year_month)
        elif parsed_args.command == "check-file":
            status = _run_check_file(parsed_args.path)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except CandidateFileError:
        log.exception("Invalid candidate file")
        sys.exit(EXIT_ERROR)
    except Exception:
        log.exception("Fatal error during check")
        sys.exit(EXIT_ERROR)

    if status != EXIT_OK:
        sys.exit(status)
