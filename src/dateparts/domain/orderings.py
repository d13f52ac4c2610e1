"""Report which role orderings make three parts a valid date."""

from __future__ import annotations

from .calendar import is_valid_ordered_date
from .types import DateOrder, OrderedDate, PartsCheck


def matching_orders(
    candidate_part_a: int,
    candidate_part_b: int,
    candidate_part_c: int,
) -> tuple[DateOrder, ...]:
    """Return every ordering under which the parts form a valid date.

    The result is non-empty exactly when ``is_valid_date`` holds for the same parts.
    """

    parts = (candidate_part_a, candidate_part_b, candidate_part_c)
    return tuple(order for order in DateOrder if is_valid_ordered_date(*order.arrange(parts)))


def check_parts(candidate_part_a: int, candidate_part_b: int, candidate_part_c: int) -> PartsCheck:
    parts = (candidate_part_a, candidate_part_b, candidate_part_c)
    return PartsCheck(parts=parts, orders=matching_orders(*parts))


def candidate_dates(
    candidate_part_a: int,
    candidate_part_b: int,
    candidate_part_c: int,
) -> tuple[OrderedDate, ...]:
    return check_parts(candidate_part_a, candidate_part_b, candidate_part_c).dates


__all__ = ["candidate_dates", "check_parts", "matching_orders"]
