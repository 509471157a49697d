from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import FrozenSet, Optional, Tuple, Union

from .date import CalendarDate

@dataclass(frozen=True)
class ConstraintProperties:
    """One scope's constraint dimensions. ``None`` means "not defined here".

    Weekdays are 0=Sunday..6=Saturday, months 1..12. Bounds are inclusive.
    """
    min_date: Optional[CalendarDate] = None
    max_date: Optional[CalendarDate] = None
    disabled_dates: Optional[FrozenSet[CalendarDate]] = None
    disabled_days_of_week: Optional[FrozenSet[int]] = None
    enabled_dates: Optional[FrozenSet[CalendarDate]] = None
    enabled_days_of_week: Optional[FrozenSet[int]] = None
    disabled_months: Optional[FrozenSet[int]] = None
    enabled_months: Optional[FrozenSet[int]] = None
    disabled_years: Optional[FrozenSet[int]] = None
    enabled_years: Optional[FrozenSet[int]] = None
    min_range: Optional[int] = None
    max_range: Optional[int] = None

    def over(self, base: ConstraintProperties) -> ConstraintProperties:
        """Field-wise choice of source: self where defined, else base. Never a union."""
        return ConstraintProperties(**{
            f.name: getattr(self, f.name) if getattr(self, f.name) is not None else getattr(base, f.name)
            for f in fields(self)
        })

    def defined(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)

@dataclass(frozen=True)
class DateRange:
    """Rule scope: a closed date interval. Reversed bounds denote the same interval."""
    start: CalendarDate
    end: CalendarDate

@dataclass(frozen=True)
class RecurringMonths:
    """Rule scope: a set of calendar months, matched in every year."""
    months: FrozenSet[int]

RuleScope = Union[DateRange, RecurringMonths]

@dataclass(frozen=True)
class PeriodRule:
    scope: RuleScope
    priority: int = 0
    overrides: ConstraintProperties = field(default_factory=ConstraintProperties)

@dataclass(frozen=True)
class ConstraintOptions:
    """Pure data payload compiled into a ConstraintEngine."""
    base: ConstraintProperties = field(default_factory=ConstraintProperties)
    rules: Tuple[PeriodRule, ...] = ()
