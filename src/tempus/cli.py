from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

import tempus
from tempus.arith import OVERFLOW_POLICIES

log = logging.getLogger(__name__)


def _run_module_main(modpath: str, argv: list[str]) -> int:
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


def _field_date(args: argparse.Namespace) -> tempus.FieldDate:
    return tempus.FieldDate(args.year, args.month, args.day)


def _add_ymd(p: argparse.ArgumentParser) -> None:
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)


def cmd_to_rd(args: argparse.Namespace) -> int:
    sd = _field_date(args).to_serial_date()
    print(sd.rd)
    return 0


def cmd_from_rd(args: argparse.Namespace) -> int:
    fd = tempus.SerialDate(args.rd).to_field_date()
    print(fd)
    return 0


def cmd_weekday(args: argparse.Namespace) -> int:
    print(_field_date(args).weekday().label)
    return 0


def cmd_leap(args: argparse.Namespace) -> int:
    leap = tempus.is_leap_year(args.year)
    print("leap" if leap else "common")
    return 0


def cmd_month_end(args: argparse.Namespace) -> int:
    print(tempus.last_day_of_month(args.year, args.month))
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    fd = _field_date(args)
    log.debug("shifting %s: years=%d months=%d days=%d sub=%s", fd, args.years, args.months, args.days, args.sub)

    # years, then months, then days
    if args.sub:
        fd = tempus.sub_years(fd, tempus.Years(args.years), overflow=args.overflow)
        fd = tempus.sub_months(fd, tempus.Months(args.months), overflow=args.overflow)
        fd = fd - tempus.Days(args.days)
    else:
        fd = tempus.add_years(fd, tempus.Years(args.years), overflow=args.overflow)
        fd = tempus.add_months(fd, tempus.Months(args.months), overflow=args.overflow)
        fd = fd + tempus.Days(args.days)

    print(fd)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="tempus", description="Proleptic Gregorian date arithmetic.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr.")
    p.add_argument("--log-json", action="store_true", help="Log as JSON lines.")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_to = sub.add_parser("to-rd", help="Calendar date -> rata die")
    _add_ymd(p_to)
    p_to.set_defaults(func=cmd_to_rd)

    p_from = sub.add_parser("from-rd", help="Rata die -> calendar date")
    p_from.add_argument("rd", type=int)
    p_from.set_defaults(func=cmd_from_rd)

    p_wd = sub.add_parser("weekday", help="Weekday of a calendar date")
    _add_ymd(p_wd)
    p_wd.set_defaults(func=cmd_weekday)

    p_leap = sub.add_parser("leap", help="Leap-year test")
    p_leap.add_argument("year", type=int)
    p_leap.set_defaults(func=cmd_leap)

    p_me = sub.add_parser("month-end", help="Last day of a month")
    p_me.add_argument("year", type=int)
    p_me.add_argument("month", type=int)
    p_me.set_defaults(func=cmd_month_end)

    p_add = sub.add_parser("add", help="Shift a date by years, months and days")
    _add_ymd(p_add)
    p_add.add_argument("--years", type=int, default=0)
    p_add.add_argument("--months", type=int, default=0)
    p_add.add_argument("--days", type=int, default=0)
    p_add.add_argument("--sub", action="store_true", help="Subtract instead of add.")
    p_add.add_argument("--overflow", choices=OVERFLOW_POLICIES, default="roll",
                       help="What to do with a day missing from the target month.")
    p_add.set_defaults(func=cmd_add)

    sub.add_parser("round-trip", help="Randomized fields <-> rata die self check (diagnostics)")

    args, rest = p.parse_known_args(argv)

    from tempus.log import configure_logging
    configure_logging(verbose=args.verbose, log_json=args.log_json)

    if args.cmd == "round-trip":
        return _run_module_main("tempus.diagnostics.round_trip", rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    try:
        return args.func(args)
    except tempus.TempusError as e:
        log.debug("calendar error", exc_info=True)
        print(f"tempus: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
