"""
calpick.engines.constraints
---------------------------
The compiled constraint engine. Answers, for a date/month/year/range, whether
it is selectable, and explains why not.

A single check sequence drives both ``is_date_disabled`` and
``disabled_reasons``, so a date has reasons exactly when it is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, FrozenSet, Tuple

from calpick.core.date import CalendarDate
from calpick.core.errors import InvalidDateError
from calpick.core.time import days_in_month
from calpick.core.types import ConstraintProperties
from calpick.engines.messages import (
    AFTER_MAX_DATE,
    BEFORE_MIN_DATE,
    DISABLED_DATE,
    DISABLED_DAY_OF_WEEK,
    DISABLED_MONTH,
    DISABLED_YEAR,
)
from calpick.engines.rules import CompiledRule, authoritative_rule, effective_for


def _blocked(value: int, disabled: Optional[FrozenSet[int]], enabled: Optional[FrozenSet[int]]) -> bool:
    if disabled is not None and value in disabled:
        return True
    return enabled is not None and value not in enabled


def triggered_kinds(p: ConstraintProperties, d: CalendarDate) -> Iterator[str]:
    """Yield the reason kind of every dimension that disables ``d`` under ``p``."""
    # 1. Bounds are absolute: the enabled_dates whitelist does not lift them.
    if p.min_date is not None and d < p.min_date:
        yield BEFORE_MIN_DATE
    if p.max_date is not None and d > p.max_date:
        yield AFTER_MAX_DATE

    # 2. Force-enabled dates bypass every remaining dimension.
    if p.enabled_dates is not None and d in p.enabled_dates:
        return

    if p.disabled_dates is not None and d in p.disabled_dates:
        yield DISABLED_DATE

    if p.disabled_days_of_week is not None or p.enabled_days_of_week is not None:
        if _blocked(d.weekday(), p.disabled_days_of_week, p.enabled_days_of_week):
            yield DISABLED_DAY_OF_WEEK

    if _blocked(d.month, p.disabled_months, p.enabled_months):
        yield DISABLED_MONTH

    if _blocked(d.year, p.disabled_years, p.enabled_years):
        yield DISABLED_YEAR


@dataclass(frozen=True, eq=False)
class ConstraintEngine:
    """
    Immutable after construction: holds only frozen data, so one instance can
    be shared by any number of readers. Changing the configuration means
    building a new engine (see ``calpick.engines.factory.make_engine``).
    """
    base: ConstraintProperties
    rules: Tuple[CompiledRule, ...]
    messages: Mapping[str, str]

    def effective(self, d: CalendarDate) -> ConstraintProperties:
        """The constraint values that govern ``d`` (authoritative rule over globals)."""
        return effective_for(self.base, self.rules, d)

    # ---------------------------------------------------------
    # Day level
    # ---------------------------------------------------------

    def is_date_disabled(self, d: CalendarDate) -> bool:
        return next(triggered_kinds(self.effective(d), d), None) is not None

    def disabled_reasons(self, d: CalendarDate) -> List[str]:
        return [self.messages[k] for k in triggered_kinds(self.effective(d), d)]

    # ---------------------------------------------------------
    # Derived levels: a month/year is disabled only if all of its days are
    # ---------------------------------------------------------

    def is_month_disabled(self, year: int, month: int) -> bool:
        if not 1 <= month <= 12:
            raise InvalidDateError(f"month out of range: {month}")
        return all(
            self.is_date_disabled(CalendarDate(year, month, day))
            for day in range(1, days_in_month(year, month) + 1)
        )

    def is_year_disabled(self, year: int) -> bool:
        return all(self.is_month_disabled(year, month) for month in range(1, 13))

    # ---------------------------------------------------------
    # Ranges
    # ---------------------------------------------------------

    def is_range_valid(self, start: CalendarDate, end: CalendarDate) -> bool:
        if end < start:
            start, end = end, start

        # Range bounds come from the scope of the start date.
        p = self.effective(start)
        length = start.diff_days(end) + 1
        if p.min_range is not None and length < p.min_range:
            return False
        if p.max_range is not None and length > p.max_range:
            return False

        return not self.is_date_disabled(start) and not self.is_date_disabled(end)

    # ---------------------------------------------------------
    # Navigation / diagnostics
    # ---------------------------------------------------------

    def next_enabled_date(self, d: CalendarDate, step: int = 1, limit: int = 366) -> Optional[CalendarDate]:
        """First enabled date reached from ``d`` (exclusive) in ``step``-day hops, or None."""
        if step == 0:
            raise ValueError("step must be non-zero")
        for i in range(1, limit + 1):
            candidate = d.add_days(step * i)
            if not self.is_date_disabled(candidate):
                return candidate
        return None

    def explain(self, d: CalendarDate) -> Dict[str, Any]:
        rule = authoritative_rule(self.rules, d)
        kinds = list(triggered_kinds(self.effective(d), d))
        return {
            "date": d.to_iso(),
            "weekday": d.weekday(),
            "rule": None if rule is None else {"index": rule.index, "priority": rule.priority},
            "disabled": bool(kinds),
            "kinds": kinds,
            "reasons": [self.messages[k] for k in kinds],
        }

    def info(self) -> Dict[str, Any]:
        return {
            "base": list(self.base.defined()),
            "rules": [
                {"index": r.index, "priority": r.priority, "scope": type(r.scope).__name__}
                for r in self.rules
            ],
        }
