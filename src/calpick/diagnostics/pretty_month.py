from __future__ import annotations

import argparse

from calpick.config import build_engine, load_config
from calpick.core.date import CalendarDate
from calpick.engines.constraints import ConstraintEngine
from calpick.engines.rules import authoritative_rule

_DOW = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


def dow_header(first_day: int) -> str:
    return "     ".join(_DOW[(first_day + i) % 7] for i in range(7))


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]], first_day: int) -> None:
    header = dow_header(first_day)
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_calendar(eng: ConstraintEngine, year: int, month: int, first_day: int = 0) -> None:
    """Top row: day number. Bottom row: 'xx' if disabled, plus 'rN' for the governing rule."""
    first = CalendarDate(year, month, 1)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first.weekday() - first_day) % 7
    for _ in range(pad):
        wk.append(cell("", ""))

    d = first
    while d.month == month:
        rule = authoritative_rule(eng.rules, d)
        mark = "xx" if eng.is_date_disabled(d) else ".."
        tag = "" if rule is None else f"r{rule.index}"
        wk.append(cell(f"{d.day:2d}", f"{mark}{tag}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d = d.add_days(1)
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    state = "disabled" if eng.is_month_disabled(year, month) else "open"
    print_grid(f"{year}-{month:02d}  (month {state})", weeks, first_day)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month calendar with disabled days marked for a constraint config."
    )
    p.add_argument("--config", help="JSON constraint config (default: no constraints)")
    p.add_argument("--month", nargs=2, type=int, metavar=("Y", "M"),
                   help="Month to print: Y M (e.g. 2025 6). Default: current month.")
    p.add_argument("--first-day", type=int, default=0, choices=range(7),
                   help="First column weekday, 0=Sun..6=Sat (default: 0)")
    p.add_argument("--tz", default=None, help="Timezone used to resolve the current month")
    args = p.parse_args(argv)

    cfg = load_config(args.config) if args.config else {}
    eng = build_engine(cfg)

    if args.month:
        year, month = args.month
    else:
        today = CalendarDate.today(args.tz or cfg.get("timezone"))
        year, month = today.year, today.month

    month_calendar(eng, year, month, first_day=args.first_day)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
