"""
Predefined range shortcuts ("Today", "Last 7 Days", ...).

Each preset resolves "today" when its ``value()`` is called, not when the
preset is created, so a long-lived preset list stays current.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .core.date import CalendarDate

DateSpan = Tuple[CalendarDate, CalendarDate]


@dataclass(frozen=True)
class RangePreset:
    label: str
    value: Callable[[], DateSpan]


def _week_start(today: CalendarDate, first_day: int) -> CalendarDate:
    return today.add_days(-((today.weekday() - first_day) % 7))


def preset_today(label: str = "Today", timezone: Optional[str] = None) -> RangePreset:
    def value() -> DateSpan:
        today = CalendarDate.today(timezone)
        return today, today
    return RangePreset(label, value)

def preset_yesterday(label: str = "Yesterday", timezone: Optional[str] = None) -> RangePreset:
    def value() -> DateSpan:
        y = CalendarDate.today(timezone).add_days(-1)
        return y, y
    return RangePreset(label, value)

def preset_last_n_days(days: int, label: Optional[str] = None, timezone: Optional[str] = None) -> RangePreset:
    """From (today - days + 1) to today, inclusive."""
    def value() -> DateSpan:
        today = CalendarDate.today(timezone)
        return today.add_days(-(days - 1)), today
    return RangePreset(label if label is not None else f"Last {days} Days", value)

def preset_this_week(label: str = "This Week", first_day: int = 1, timezone: Optional[str] = None) -> RangePreset:
    """Start of the current week (``first_day``: 0=Sun, 1=Mon) to today."""
    def value() -> DateSpan:
        today = CalendarDate.today(timezone)
        return _week_start(today, first_day), today
    return RangePreset(label, value)

def preset_last_week(label: str = "Last Week", first_day: int = 1, timezone: Optional[str] = None) -> RangePreset:
    """The full seven-day week before the current one."""
    def value() -> DateSpan:
        start = _week_start(CalendarDate.today(timezone), first_day)
        return start.add_days(-7), start.add_days(-1)
    return RangePreset(label, value)

def preset_this_month(label: str = "This Month", timezone: Optional[str] = None) -> RangePreset:
    def value() -> DateSpan:
        today = CalendarDate.today(timezone)
        return today.start_of_month(), today
    return RangePreset(label, value)

def preset_last_month(label: str = "Last Month", timezone: Optional[str] = None) -> RangePreset:
    def value() -> DateSpan:
        prev = CalendarDate.today(timezone).add_months(-1)
        return prev.start_of_month(), prev.end_of_month()
    return RangePreset(label, value)

def preset_this_year(label: str = "This Year", timezone: Optional[str] = None) -> RangePreset:
    def value() -> DateSpan:
        today = CalendarDate.today(timezone)
        return CalendarDate(today.year, 1, 1), today
    return RangePreset(label, value)

def preset_last_year(label: str = "Last Year", timezone: Optional[str] = None) -> RangePreset:
    def value() -> DateSpan:
        y = CalendarDate.today(timezone).year - 1
        return CalendarDate(y, 1, 1), CalendarDate(y, 12, 31)
    return RangePreset(label, value)
