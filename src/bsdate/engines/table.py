"""
bsdate.engines.table
--------------------
Month-length lookup for Bikram Sambat years.

The calendar is defined by an almanac, not a formula, so month lengths come
from a versioned data asset:

  year,m1,...,m12        (Baisakh .. Chaitra)

Lines starting with '#' are comments; a ``# version: <label>`` comment names
the revision of the data. Years missing from the table use a fixed default
pattern. Month numbers outside 1..12 raise InvalidMonthError.

Table source resolution (``load_calendar_table``):
  1) explicit path argument
  2) $BSDATE_CALENDAR_TABLE
  3) packaged bsdate/data/bs_calendar.csv
"""

from __future__ import annotations

import csv
import importlib
import importlib.resources
import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..core.errors import CalendarTableError, InvalidMonthError

logger = logging.getLogger(__name__)

CALENDAR_TABLE_ENV = "BSDATE_CALENDAR_TABLE"
PACKAGED_TABLE = "bs_calendar.csv"

# Typical month lengths for years outside the table.
DEFAULT_MONTH_DAYS: Tuple[int, ...] = (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30)
FALLBACK_YEAR_DAYS = sum(DEFAULT_MONTH_DAYS)

_HEADER = ["year"] + [f"m{i}" for i in range(1, 13)]


def check_month(month: int) -> None:
    if not isinstance(month, int) or isinstance(month, bool) or not 1 <= month <= 12:
        raise InvalidMonthError(month)


@dataclass(frozen=True)
class CalendarTable:
    rows: Mapping[int, Tuple[int, ...]] = field(repr=False)
    version: str = "unversioned"
    source: str = "<memory>"
    default_pattern: Tuple[int, ...] = DEFAULT_MONTH_DAYS

    def __post_init__(self) -> None:
        pattern = tuple(self.default_pattern)
        if len(pattern) != 12 or any(not isinstance(n, int) or n <= 0 for n in pattern):
            raise CalendarTableError(f"{self.source}: default pattern needs 12 positive month lengths")
        object.__setattr__(self, "default_pattern", pattern)

    @classmethod
    def from_rows(
        cls,
        rows: Mapping[int, Sequence[int]],
        *,
        version: str = "unversioned",
        source: str = "<memory>",
    ) -> "CalendarTable":
        clean = {}
        for year, months in rows.items():
            months = tuple(months)
            if len(months) != 12:
                raise CalendarTableError(f"{source}: year {year} has {len(months)} months, expected 12")
            if any(not isinstance(n, int) or n <= 0 for n in months):
                raise CalendarTableError(f"{source}: year {year} has a non-positive month length")
            clean[int(year)] = months
        return cls(rows=MappingProxyType(clean), version=version, source=source)

    def is_table_year(self, year: int) -> bool:
        return year in self.rows

    def years(self) -> List[int]:
        return sorted(self.rows)

    def days_in_month(self, year: int, month: int) -> int:
        check_month(month)
        months = self.rows.get(year)
        if months is None:
            logger.debug("BS year %d not in calendar table; using default month pattern", year)
            return self.default_pattern[month - 1]
        return months[month - 1]

    def days_in_year(self, year: int) -> int:
        months = self.rows.get(year)
        if months is None:
            # Must equal the sum of days_in_month over the year.
            return sum(self.default_pattern)
        return sum(months)


def parse_calendar_csv(lines: Iterable[str], *, source: str = "<memory>") -> CalendarTable:
    """Parse the calendar CSV format described in the module docstring."""
    version = "unversioned"
    header: Optional[List[str]] = None
    rows = {}

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#"):
            key, sep, value = line[1:].partition(":")
            if sep and key.strip().lower() == "version":
                version = value.strip()
            continue

        cells = [c.strip() for c in next(csv.reader([line]))]
        if header is None:
            if cells != _HEADER:
                raise CalendarTableError(f"{source}:{lineno}: expected header {','.join(_HEADER)}")
            header = cells
            continue

        if len(cells) != 13:
            raise CalendarTableError(f"{source}:{lineno}: expected 13 columns, got {len(cells)}")
        try:
            year, *months = (int(c) for c in cells)
        except ValueError as e:
            raise CalendarTableError(f"{source}:{lineno}: {e}") from e
        if year in rows:
            raise CalendarTableError(f"{source}:{lineno}: duplicate year {year}")
        if any(n <= 0 for n in months):
            raise CalendarTableError(f"{source}:{lineno}: month lengths must be positive")
        rows[year] = tuple(months)

    if header is None:
        raise CalendarTableError(f"{source}: no header row")

    table = CalendarTable.from_rows(rows, version=version, source=source)
    if rows:
        logger.debug("Loaded BS calendar table %s (version %s, years %d..%d)",
                     source, version, min(rows), max(rows))
    return table


@lru_cache(maxsize=None)
def _load_path(path: str) -> CalendarTable:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return parse_calendar_csv(f, source=path)


@lru_cache(maxsize=None)
def _load_packaged() -> CalendarTable:
    pkg = importlib.import_module("bsdate.data")
    res = importlib.resources.files(pkg).joinpath(PACKAGED_TABLE)
    with res.open("r", encoding="utf-8", newline="") as f:
        return parse_calendar_csv(f, source=f"bsdate/data/{PACKAGED_TABLE}")


def load_calendar_table(path: Optional[Union[str, Path]] = None) -> CalendarTable:
    if path is None:
        path = os.environ.get(CALENDAR_TABLE_ENV, "").strip() or None
    if path is not None:
        return _load_path(str(Path(path).expanduser()))
    return _load_packaged()
