from __future__ import annotations

from importlib import metadata

from dateparts.domain.calendar import (
    get_days_in_month,
    is_valid_date,
    is_valid_day,
    is_valid_month,
    is_valid_ordered_date,
    is_valid_year,
)

try:
    __version__ = metadata.version("dateparts")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "__version__",
    "get_days_in_month",
    "is_valid_date",
    "is_valid_day",
    "is_valid_month",
    "is_valid_ordered_date",
    "is_valid_year",
]
