"""Value types describing date parts and the roles they may take."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .calendar import is_valid_ordered_date

if TYPE_CHECKING:
    from collections.abc import Sequence

type DateParts = tuple[int, int, int]


class DateRole(StrEnum):
    """Role a candidate part plays once assigned."""

    YEAR = "y"
    MONTH = "m"
    DAY = "d"


class DateOrder(StrEnum):
    """Assignment of roles to argument positions, e.g. ``dmy`` for day/month/year."""

    YMD = "ymd"
    YDM = "ydm"
    MYD = "myd"
    MDY = "mdy"
    DMY = "dmy"
    DYM = "dym"

    @property
    def roles(self) -> tuple[DateRole, DateRole, DateRole]:
        first, second, third = (DateRole(letter) for letter in self.value)
        return first, second, third

    def arrange(self, parts: Sequence[int]) -> DateParts:
        """Return ``parts`` rearranged into (year, month, day) order."""

        if len(parts) != 3:
            raise ValueError(f"Expected three date parts, got {len(parts)}")
        by_role = dict(zip(self.roles, parts, strict=True))
        return by_role[DateRole.YEAR], by_role[DateRole.MONTH], by_role[DateRole.DAY]


@dataclass(frozen=True, slots=True)
class OrderedDate:
    year: int
    month: int
    day: int

    @property
    def is_valid(self) -> bool:
        return is_valid_ordered_date(self.year, self.month, self.day)

    def as_tuple(self) -> DateParts:
        return (self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, slots=True)
class PartsCheck:
    """Outcome of checking three unordered parts against every ordering."""

    parts: DateParts
    orders: tuple[DateOrder, ...] = ()

    @property
    def is_valid(self) -> bool:
        return bool(self.orders)

    @property
    def dates(self) -> tuple[OrderedDate, ...]:
        """Distinct valid dates in the order their first matching ordering appears."""

        seen: dict[DateParts, OrderedDate] = {}
        for order in self.orders:
            arranged = order.arrange(self.parts)
            seen.setdefault(arranged, OrderedDate(*arranged))
        return tuple(seen.values())


__all__ = ["DateOrder", "DateParts", "DateRole", "OrderedDate", "PartsCheck"]
