from __future__ import annotations

import argparse
from datetime import timedelta
from typing import List, Optional, Tuple

import bsdate
from bsdate.core.time import sunday_first_weekday
from bsdate.display.digits import localize_digits


def dow_header(weekdays) -> str:
    return " ".join(w[:6].ljust(6) for w in weekdays)


def cell(top: str, bot: str, w: int = 6) -> Tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def month_grid(Y: int, M: int, *, locale: Optional[str] = None) -> List[List[Tuple[str, str]]]:
    """Sunday-first weeks of (BS day, AD mm-dd) cells for one BS month."""
    loc = bsdate.locale_info(locale)
    first, last = bsdate.month_range(Y, M)

    weeks: List[List[Tuple[str, str]]] = []
    wk: List[Tuple[str, str]] = [cell("", "") for _ in range(sunday_first_weekday(first))]
    d = first
    day = 1
    while d <= last:
        wk.append(cell(localize_digits(f"{day:2d}", loc.digits), f"{d.month:02d}-{d.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d += timedelta(days=1)
        day += 1
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def print_month(Y: int, M: int, *, locale: Optional[str] = None) -> None:
    loc = bsdate.locale_info(locale)
    first, last = bsdate.month_range(Y, M)
    header = dow_header(loc.weekdays)
    title = f"{bsdate.month_name(M, locale=locale)} {localize_digits(Y, loc.digits)}   ({first} .. {last})"
    print(title)
    print(header)
    print("-" * len(header))
    for wk in month_grid(Y, M, locale=locale):
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def main(argv: Optional[list] = None) -> int:
    p = argparse.ArgumentParser(description="Print BS month calendars with AD dates.")
    p.add_argument("year", type=int, help="BS year")
    p.add_argument("month", type=int, nargs="?", default=None, help="BS month 1..12 (default: whole year)")
    p.add_argument("--locale", default=None, help="locale code (default: $BSDATE_LOCALE or 'ne')")
    p.add_argument("--table", default=None, help="calendar CSV (default: $BSDATE_CALENDAR_TABLE or packaged)")
    args = p.parse_args(argv)
    if args.table is not None:
        bsdate.use_calendar_table(args.table)

    months = [args.month] if args.month is not None else list(range(1, 13))
    for M in months:
        print_month(args.year, M, locale=args.locale)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
