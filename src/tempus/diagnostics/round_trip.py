from __future__ import annotations

import argparse
import logging
import random

from tempus.core.rata_die import from_rd, to_rd
from tempus.core.rules import RD_MAX, last_day_of_month

log = logging.getLogger(__name__)


def serial_round_trip(N: int, lo: int, hi: int, seed: int, *, max_failures: int) -> int:
    """rd -> fields -> rd for N random rd in [lo, hi]."""
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        rd = rng.randint(lo, hi)
        y, m, d = from_rd(rd)
        back = to_rd(y, m, d)
        if back != rd or not (1 <= d <= last_day_of_month(y, m).value):
            failures += 1
            print("\nFAIL (serial)")
            print("rd:", rd)
            print("fields:", (y, m, d))
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def field_round_trip(N: int, y_lo: int, y_hi: int, seed: int, *, max_failures: int) -> int:
    """fields -> rd -> fields for N random valid dates with year in [y_lo, y_hi]."""
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        y = rng.randint(y_lo, y_hi)
        # year 0 starts at the epoch, 0000-03-01
        m = rng.randint(3 if y == 0 else 1, 12)
        d = rng.randint(1, last_day_of_month(y, m).value)
        rd = to_rd(y, m, d)
        back = from_rd(rd)
        if back != (y, m, d):
            failures += 1
            print("\nFAIL (field)")
            print("fields:", (y, m, d))
            print("rd:", rd)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip checks: fields <-> rata die.")
    p.add_argument("--N", type=int, default=20000, help="Trials per direction.")
    p.add_argument("--rd-min", type=int, default=0, help="Smallest rd to draw.")
    p.add_argument("--rd-max", type=int, default=RD_MAX, help="Largest rd to draw.")
    p.add_argument("--year-min", type=int, default=0, help="Smallest year to draw (year 0 starts in March).")
    p.add_argument("--year-max", type=int, default=9999, help="Largest year to draw.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per direction.")
    args = p.parse_args(argv)

    if not (0 <= args.rd_min <= args.rd_max <= RD_MAX):
        raise SystemExit(f"need 0 <= --rd-min <= --rd-max <= {RD_MAX}")
    if args.year_min < 0:
        raise SystemExit("--year-min must be >= 0")
    if args.year_max < args.year_min:
        raise SystemExit("--year-max must be >= --year-min")

    log.debug("round trip: N=%d seed=%d", args.N, args.seed)

    total_fail = serial_round_trip(
        args.N, args.rd_min, args.rd_max, args.seed, max_failures=args.max_failures
    )
    total_fail += field_round_trip(
        args.N, args.year_min, args.year_max, args.seed, max_failures=args.max_failures
    )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
