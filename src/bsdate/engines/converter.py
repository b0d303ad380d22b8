"""
bsdate.engines.converter
------------------------
Reference-anchored conversion between AD (Gregorian) and BS dates.

Every conversion is a signed day offset from a single ReferenceAnchor,
walked through the calendar table month by month. AD inputs are truncated
to their civil day in the converter's timezone before the offset is taken,
so two instants on the same day always map to the same BS date.
"""

from __future__ import annotations

from datetime import date, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from ..core.time import NEPAL_TZ, Clock, DateLike, civil_date, utc_now
from ..core.types import BSDate, ReferenceAnchor
from .table import CalendarTable, check_month, load_calendar_table

# 2080 Baisakh 1 BS = 14 April 2023 AD
DEFAULT_ANCHOR = ReferenceAnchor(bs=BSDate(2080, 1, 1), ad=date(2023, 4, 14))


class DateConverter:
    """
    Converts between calendars using ``table`` for month lengths and
    ``anchor`` as the origin of every walk. ``clock`` supplies "now".
    """
    def __init__(
        self,
        table: Optional[CalendarTable] = None,
        anchor: ReferenceAnchor = DEFAULT_ANCHOR,
        *,
        tz: timezone = NEPAL_TZ,
        clock: Clock = utc_now,
    ):
        self.table = table if table is not None else load_calendar_table()
        self.anchor = anchor
        self.tz = tz
        self.clock = clock

        a = anchor.bs
        dim = self.table.days_in_month(a.year, a.month)
        if not 1 <= a.day <= dim:
            raise ValueError(f"Anchor day {a} outside month length {dim}")

    def days_in_month(self, year: int, month: int) -> int:
        return self.table.days_in_month(year, month)

    def days_in_year(self, year: int) -> int:
        return self.table.days_in_year(year)

    # ---------------------------------------------------------
    # AD -> BS
    # ---------------------------------------------------------

    def ad_to_bs(self, value: DateLike) -> BSDate:
        diff = (civil_date(value, tz=self.tz) - self.anchor.ad).days
        y, m, d = self.anchor.bs.as_tuple()

        # Forward: consume the room left in each month until the rest fits.
        while diff > 0:
            room = self.days_in_month(y, m) - d
            if diff <= room:
                d += diff
                diff = 0
            else:
                diff -= room + 1
                y, m = _next_month(y, m)
                d = 1

        # Backward: stepping back d days from day d lands on the previous month's last day.
        while diff < 0:
            if -diff < d:
                d += diff
                diff = 0
            else:
                diff += d
                y, m = _prev_month(y, m)
                d = self.days_in_month(y, m)

        return BSDate(y, m, d)

    # ---------------------------------------------------------
    # BS -> AD
    # ---------------------------------------------------------

    def day_offset(self, bs: BSDate) -> int:
        """Signed number of days from the anchor to ``bs``."""
        check_month(bs.month)
        a = self.anchor.bs
        if (bs.year, bs.month) >= (a.year, a.month):
            span = self._months_between(a.year, a.month, bs.year, bs.month)
        else:
            span = -self._months_between(bs.year, bs.month, a.year, a.month)
        return span + bs.day - a.day

    def _months_between(self, y: int, m: int, y_end: int, m_end: int) -> int:
        """Days from the 1st of (y, m) to the 1st of (y_end, m_end), start <= end."""
        days = 0
        while (y, m) < (y_end, m_end):
            if m == 1 and y < y_end:
                days += self.days_in_year(y)
                y += 1
                continue
            days += self.days_in_month(y, m)
            y, m = _next_month(y, m)
        return days

    def bs_to_ad(self, bs: BSDate) -> date:
        return self.anchor.ad + timedelta(days=self.day_offset(bs))

    # ---------------------------------------------------------
    # Convenience
    # ---------------------------------------------------------

    def today(self) -> BSDate:
        return self.ad_to_bs(self.clock())

    def month_range(self, year: int, month: int) -> Tuple[date, date]:
        """AD dates of the first and last day of a BS month."""
        first = self.bs_to_ad(BSDate(year, month, 1))
        return first, first + timedelta(days=self.days_in_month(year, month) - 1)

    def info(self) -> Dict[str, Any]:
        years = self.table.years()
        return {
            "anchor_bs": str(self.anchor.bs),
            "anchor_ad": self.anchor.ad.isoformat(),
            "table_version": self.table.version,
            "table_source": self.table.source,
            "table_years": (years[0], years[-1]) if years else None,
            "tz": str(self.tz),
        }


def _next_month(y: int, m: int) -> Tuple[int, int]:
    return (y + 1, 1) if m == 12 else (y, m + 1)


def _prev_month(y: int, m: int) -> Tuple[int, int]:
    return (y - 1, 12) if m == 1 else (y, m - 1)
