from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date
from typing import List, Optional


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_STYLES = ["full", "short", "long"]


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: List[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--locale", default=None, help="locale code (default: $BSDATE_LOCALE or 'ne')")
    p.add_argument("--table", default=None, help="calendar CSV (default: $BSDATE_CALENDAR_TABLE or packaged)")


def _setup(args: argparse.Namespace) -> None:
    import bsdate

    if args.table is not None:
        bsdate.use_calendar_table(args.table)


def cmd_to_bs(argv: List[str]) -> int:
    import bsdate

    p = argparse.ArgumentParser(prog="bsdate to-bs", description="AD -> BS date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--style", choices=_STYLES, default="full")
    _common(p)
    args = p.parse_args(argv)
    _setup(args)

    d = _parse_ymd(args.date)
    bs = bsdate.ad_to_bs(d)
    print(bsdate.format_bs_date(bs, args.style, locale=args.locale))
    print(f"{bsdate.weekday_name(d, locale=args.locale)}, {bsdate.format_ad_date(d, locale=args.locale)}")
    return 0


def cmd_to_ad(argv: List[str]) -> int:
    import bsdate

    p = argparse.ArgumentParser(prog="bsdate to-ad", description="BS -> AD date")
    p.add_argument("date", help="BS date as YYYY-MM-DD (ASCII or localized digits)")
    _common(p)
    args = p.parse_args(argv)
    _setup(args)

    bs = bsdate.parse_bs_date(args.date, locale=args.locale)
    if not bsdate.is_table_year(bs.year):
        print(f"warning: BS year {bs.year} is outside the calendar table; result is approximate",
              file=sys.stderr)
    d = bsdate.bs_to_ad(bs)
    print(d.isoformat())
    print(f"{bsdate.weekday_name(d, locale=args.locale)}, {bsdate.format_ad_date(d, locale=args.locale)}")
    return 0


def cmd_today(argv: List[str]) -> int:
    import bsdate

    p = argparse.ArgumentParser(prog="bsdate today", description="Current BS date")
    p.add_argument("--style", choices=_STYLES, default="full")
    _common(p)
    args = p.parse_args(argv)
    _setup(args)

    print(bsdate.current_bs_date_string(args.style, locale=args.locale))
    return 0


def cmd_relative(argv: List[str]) -> int:
    import bsdate

    p = argparse.ArgumentParser(prog="bsdate relative", description="Relative time of an ISO-8601 timestamp")
    p.add_argument("timestamp", help="ISO-8601 timestamp, e.g. 2025-12-29T10:00:00Z")
    p.add_argument("--now", default=None, help="ISO-8601 reference instant (default: current time)")
    p.add_argument("--dual", action="store_true", help="print the full dual-date view")
    _common(p)
    args = p.parse_args(argv)
    _setup(args)

    if args.dual:
        dual = bsdate.format_dual_date(args.timestamp, locale=args.locale, now=args.now)
        for k, v in vars(dual).items():
            print(f"{k:9s} {v}")
    else:
        print(bsdate.relative_time(args.timestamp, locale=args.locale, now=args.now))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if "--verbose" in argv:
        argv = [a for a in argv if a != "--verbose"]
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Shorthand: `bsdate YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_to_bs(argv)

    p = argparse.ArgumentParser(
        prog="bsdate",
        description="Bikram Sambat calendar toolkit CLI.",
        epilog="--verbose anywhere on the command line enables debug logging.",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("today", help="Current BS date")
    sub.add_parser("to-bs", help="AD -> BS date")
    sub.add_parser("to-ad", help="BS -> AD date")
    sub.add_parser("relative", help="Relative time of a timestamp")
    sub.add_parser("month", help="Print a BS month calendar with AD dates")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "to-bs":
        return cmd_to_bs(rest)

    if args.cmd == "to-ad":
        return cmd_to_ad(rest)

    if args.cmd == "relative":
        return cmd_relative(rest)

    if args.cmd == "month":
        return _run_module_main("bsdate.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "bsdate.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
