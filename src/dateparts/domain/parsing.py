"""Parse textual date parts into the integers the calendar checks expect."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .types import DateParts

_PART_PATTERN: Final = re.compile(r"[+-]?\d+")
_DATE_STRING_PATTERN: Final = re.compile(r"(\d+)([-/. ])(\d+)\2(\d+)")


class InvalidDatePartError(ValueError):
    """Raised when text cannot be read as an integer date part."""


def _to_int(digits: str, *, kind: str, text: str) -> int:
    try:
        return int(digits)
    except ValueError as exc:
        # str -> int conversion is capped by sys.get_int_max_str_digits()
        raise InvalidDatePartError(f"Invalid {kind}: {text!r} ({exc})") from exc


def parse_part(text: str) -> int:
    """Parse a single signed decimal integer, ignoring surrounding whitespace."""

    if not isinstance(text, str):
        raise InvalidDatePartError(f"Date part must be text, got {type(text).__name__}")
    normalized = text.strip()
    if not _PART_PATTERN.fullmatch(normalized):
        raise InvalidDatePartError(f"Invalid date part: {text!r}")
    return _to_int(normalized, kind="date part", text=text)


def parse_parts(values: Sequence[str]) -> DateParts:
    if len(values) != 3:
        raise InvalidDatePartError(f"Expected three date parts, got {len(values)}")
    first, second, third = (parse_part(value) for value in values)
    return first, second, third


def split_date_string(text: str) -> DateParts:
    """Split ``2023-06-15``, ``15/06/2023``, ``15.06.2023`` or ``15 06 2023`` into parts.

    The groups are returned in the order they appear; no roles are inferred.
    """

    match = _DATE_STRING_PATTERN.fullmatch(text.strip())
    if match is None:
        raise InvalidDatePartError(
            f"Invalid date string: {text!r} (expected three numbers joined by -, /, . or space)"
        )
    first, _separator, second, third = match.groups()
    return (
        _to_int(first, kind="date string", text=text),
        _to_int(second, kind="date string", text=text),
        _to_int(third, kind="date string", text=text),
    )


__all__ = ["InvalidDatePartError", "parse_part", "parse_parts", "split_date_string"]
