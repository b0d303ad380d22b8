from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import Optional

from bsdate.engines.converter import DateConverter
from bsdate.engines.table import load_calendar_table


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(
    conv: DateConverter,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        bs = conv.ad_to_bs(d0)
        back = conv.bs_to_ad(bs)
        dim = conv.days_in_month(bs.year, bs.month)

        if back != d0 or not 1 <= bs.day <= dim:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("bs:", bs, f"(month length {dim})")
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: Optional[list] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: AD -> BS -> AD.")
    p.add_argument("--table", type=str, default=None, help="Calendar CSV (default: packaged table).")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start", type=str, default="2013-04-13", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2034-04-13", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    conv = DateConverter(load_calendar_table(args.table))
    print(f"Testing table {conv.table.source} (version {conv.table.version}) ...")
    failures = roundtrip_test(conv, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
