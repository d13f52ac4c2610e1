"""Pure date-part validation logic."""

from __future__ import annotations

from .calendar import (
    MONTHS_OF_30_DAYS,
    get_days_in_month,
    is_valid_date,
    is_valid_day,
    is_valid_month,
    is_valid_ordered_date,
    is_valid_year,
)
from .orderings import candidate_dates, check_parts, matching_orders
from .parsing import InvalidDatePartError, parse_part, parse_parts, split_date_string
from .types import DateOrder, DateParts, DateRole, OrderedDate, PartsCheck

__all__ = [
    "MONTHS_OF_30_DAYS",
    "DateOrder",
    "DateParts",
    "DateRole",
    "InvalidDatePartError",
    "OrderedDate",
    "PartsCheck",
    "candidate_dates",
    "check_parts",
    "get_days_in_month",
    "is_valid_date",
    "is_valid_day",
    "is_valid_month",
    "is_valid_ordered_date",
    "is_valid_year",
    "matching_orders",
    "parse_part",
    "parse_parts",
    "split_date_string",
]
