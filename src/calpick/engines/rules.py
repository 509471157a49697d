"""
calpick.engines.rules
---------------------
Period-rule matching and authoritative-rule selection.

For a date, every rule whose scope contains it is a candidate; the
authoritative rule is the one with the highest priority, ties going to the
rule listed first. Its defined fields replace the global ones field by field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from calpick.core.date import CalendarDate
from calpick.core.types import (
    ConstraintOptions,
    ConstraintProperties,
    DateRange,
    RecurringMonths,
    RuleScope,
)


@dataclass(frozen=True)
class CompiledRule:
    index: int
    priority: int
    scope: RuleScope
    effective: ConstraintProperties  # rule overrides already laid over the globals


def check_scope(scope: RuleScope) -> None:
    if not isinstance(scope, (DateRange, RecurringMonths)):
        raise TypeError(f"Unknown rule scope type: {type(scope)}")


def scope_contains(scope: RuleScope, d: CalendarDate) -> bool:
    if isinstance(scope, DateRange):
        return d.is_between(scope.start, scope.end)
    if isinstance(scope, RecurringMonths):
        return d.month in scope.months
    raise TypeError(f"Unknown rule scope type: {type(scope)}")


def compile_rules(options: ConstraintOptions) -> Tuple[CompiledRule, ...]:
    out = []
    for i, rule in enumerate(options.rules):
        check_scope(rule.scope)
        out.append(CompiledRule(
            index=i,
            priority=rule.priority,
            scope=rule.scope,
            effective=rule.overrides.over(options.base),
        ))
    return tuple(out)


def authoritative_rule(rules: Sequence[CompiledRule], d: CalendarDate) -> Optional[CompiledRule]:
    best: Optional[CompiledRule] = None
    for r in rules:
        # strict '>' keeps the earliest rule on a priority tie
        if scope_contains(r.scope, d) and (best is None or r.priority > best.priority):
            best = r
    return best


def effective_for(
    base: ConstraintProperties, rules: Sequence[CompiledRule], d: CalendarDate
) -> ConstraintProperties:
    rule = authoritative_rule(rules, d)
    return base if rule is None else rule.effective
