from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from calpick.core.errors import CalpickError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

EXIT_OK = 0
EXIT_NEGATIVE = 1
EXIT_USAGE = 2


def _parse_iso(s: str):
    from calpick.core.date import CalendarDate

    d = CalendarDate.from_iso(s)
    if d is None:
        raise argparse.ArgumentTypeError(f"not a valid YYYY-MM-DD date: {s!r}")
    return d


def _engine(config_path: str | None):
    from calpick.config import build_engine, load_config

    cfg = load_config(config_path) if config_path else {}
    return build_engine(cfg)


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


def cmd_check(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="calpick check", description="Is a date selectable under a config?")
    p.add_argument("date", type=_parse_iso, help="YYYY-MM-DD")
    p.add_argument("--config", help="JSON constraint config")
    p.add_argument("--debug", action="store_true", help="print the engine's explanation record")
    args = p.parse_args(argv)

    eng = _engine(args.config)
    if args.debug:
        print(eng.explain(args.date))
    reasons = eng.disabled_reasons(args.date)
    if not reasons:
        print(f"{args.date}: enabled")
        return EXIT_OK
    print(f"{args.date}: disabled")
    for r in reasons:
        print(f"  - {r}")
    return EXIT_NEGATIVE


def cmd_range(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="calpick range", description="Is a two-endpoint selection valid?")
    p.add_argument("start", type=_parse_iso, help="YYYY-MM-DD")
    p.add_argument("end", type=_parse_iso, help="YYYY-MM-DD")
    p.add_argument("--config", help="JSON constraint config")
    args = p.parse_args(argv)

    eng = _engine(args.config)
    length = abs(args.start.diff_days(args.end)) + 1
    ok = eng.is_range_valid(args.start, args.end)
    print(f"{args.start} .. {args.end} ({length} days): {'valid' if ok else 'invalid'}")
    return EXIT_OK if ok else EXIT_NEGATIVE


def cmd_today(argv: list[str]) -> int:
    from calpick.core.date import CalendarDate

    p = argparse.ArgumentParser(prog="calpick today", description="Print today's civil date")
    p.add_argument("--tz", default=None, help="IANA timezone, UTC, or +HH:MM (default: local)")
    args = p.parse_args(argv)

    print(CalendarDate.today(args.tz).to_iso())
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    verbose = "-v" in argv or "--verbose" in argv
    argv = [a for a in argv if a not in ("-v", "--verbose")]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        # Shortcut: `calpick YYYY-MM-DD ...` == `calpick check YYYY-MM-DD ...`
        if argv and _DATE_RE.match(argv[0]):
            return cmd_check(argv)

        p = argparse.ArgumentParser(prog="calpick", description="Date-picker constraint engine CLI.")
        p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
        sub = p.add_subparsers(dest="cmd", required=True)
        sub.add_parser("check", help="Is a date selectable? Prints reasons when it is not.")
        sub.add_parser("range", help="Is a start/end selection valid?")
        sub.add_parser("today", help="Print today's date in a timezone.")
        sub.add_parser("pretty-month", help="Print a month grid with disabled days marked (diagnostics)")

        args, rest = p.parse_known_args(argv)

        if args.cmd == "check":
            return cmd_check(rest)
        if args.cmd == "range":
            return cmd_range(rest)
        if args.cmd == "today":
            return cmd_today(rest)
        if args.cmd == "pretty-month":
            return _run_module_main("calpick.diagnostics.pretty_month", rest)
    except (CalpickError, OSError) as ex:
        print(f"calpick: error: {ex}", file=sys.stderr)
        return EXIT_USAGE

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
