"""
calpick.config
--------------
Plain-data configuration boundary.

Widget configuration arrives as dicts (or JSON) holding ISO date strings, in
either the camelCase keys of the browser widget (``minDate``,
``disabledDaysOfWeek``, ``rules[].from``) or snake_case. This module turns it
into ``ConstraintOptions``, reports misconfiguration as warnings, and builds
engines. Invalid ISO strings are dropped here and never reach the engine.

There is no global defaults object: integrations that want shared defaults
call ``merge_config(defaults, cfg)`` explicitly.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

from .core.date import CalendarDate, resolve_timezone
from .core.errors import ConfigError, InvalidTimezoneError
from .core.types import (
    ConstraintOptions,
    ConstraintProperties,
    DateRange,
    PeriodRule,
    RecurringMonths,
)
from .engines.constraints import ConstraintEngine
from .engines.factory import make_engine
from .engines.messages import REASON_KINDS

logger = logging.getLogger(__name__)

# camelCase config key -> ConstraintProperties field
FIELD_KEYS: Dict[str, str] = {
    "minDate": "min_date",
    "maxDate": "max_date",
    "disabledDates": "disabled_dates",
    "disabledDaysOfWeek": "disabled_days_of_week",
    "enabledDates": "enabled_dates",
    "enabledDaysOfWeek": "enabled_days_of_week",
    "disabledMonths": "disabled_months",
    "enabledMonths": "enabled_months",
    "disabledYears": "disabled_years",
    "enabledYears": "enabled_years",
    "minRange": "min_range",
    "maxRange": "max_range",
}

CONSTRAINT_KEYS = tuple(FIELD_KEYS) + ("rules",)

MESSAGE_KEYS: Dict[str, str] = {
    "beforeMinDate": "before_min_date",
    "afterMaxDate": "after_max_date",
    "disabledDate": "disabled_date",
    "disabledDayOfWeek": "disabled_day_of_week",
    "disabledMonth": "disabled_month",
    "disabledYear": "disabled_year",
}

_DATE_FIELDS = ("min_date", "max_date")
_DATE_SET_FIELDS = ("disabled_dates", "enabled_dates")
_INT_FIELDS = ("min_range", "max_range")
_SET_KEYS = tuple(c for c, n in FIELD_KEYS.items() if n not in _DATE_FIELDS + _INT_FIELDS)

# Strings are iterable too; they are never a list of values.
_LIST_TYPES = (list, tuple, set, frozenset)


def _lookup(cfg: Mapping[str, Any], camel: str, snake: str) -> Any:
    if camel in cfg:
        return cfg[camel]
    return cfg.get(snake)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _is_list(v: Any) -> bool:
    return isinstance(v, _LIST_TYPES)


def _parse_date(value: Any) -> Optional[CalendarDate]:
    if isinstance(value, CalendarDate):
        return value
    d = CalendarDate.from_iso(value) if isinstance(value, str) else None
    if d is None:
        logger.debug("dropping invalid ISO date %r", value)
    return d


def _date_set(values: Iterable[Any]) -> FrozenSet[CalendarDate]:
    out = (_parse_date(v) for v in values)
    return frozenset(d for d in out if d is not None)


def _int_set(values: Iterable[Any]) -> FrozenSet[int]:
    out = set()
    for v in values:
        if _is_int(v):
            out.add(v)
        else:
            logger.debug("dropping non-integer value %r", v)
    return frozenset(out)


def extract_constraint_config(cfg: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only the constraint-related keys of a larger widget config."""
    keep = set(CONSTRAINT_KEYS) | set(FIELD_KEYS.values())
    return {k: v for k, v in cfg.items() if k in keep and v is not None}


def merge_config(defaults: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Key-wise merge: a key in ``overrides`` (not None) replaces the default."""
    out = dict(defaults)
    out.update({k: v for k, v in overrides.items() if v is not None})
    return out


# ============================================================
# Parsing
# ============================================================

def parse_properties(cfg: Mapping[str, Any]) -> ConstraintProperties:
    kw: Dict[str, Any] = {}
    for camel, name in FIELD_KEYS.items():
        raw = _lookup(cfg, camel, name)
        if raw is None:
            continue
        if name in _DATE_FIELDS:
            d = _parse_date(raw)
            if d is not None:
                kw[name] = d
        elif name not in _INT_FIELDS and not _is_list(raw):
            logger.warning("dropping %s: expected a list, got %r", camel, raw)
        elif name in _DATE_SET_FIELDS:
            kw[name] = _date_set(raw)
        elif name in _INT_FIELDS:
            if _is_int(raw):
                kw[name] = raw
            else:
                logger.debug("dropping non-integer %s=%r", camel, raw)
        else:
            kw[name] = _int_set(raw)
    return ConstraintProperties(**kw)


def parse_rule(raw: Mapping[str, Any]) -> Optional[PeriodRule]:
    """A rule needs a valid from/to pair or a non-empty ``months`` list; else None."""
    start = _lookup(raw, "from", "start")
    end = _lookup(raw, "to", "end")
    start_d = _parse_date(start) if start is not None else None
    end_d = _parse_date(end) if end is not None else None
    raw_months = raw.get("months")
    if raw_months is not None and not _is_list(raw_months):
        logger.warning("ignoring rule months: expected a list, got %r", raw_months)
        raw_months = None
    months = _int_set(raw_months or ())

    if start_d is not None and end_d is not None:
        scope = DateRange(start_d, end_d)
        if months:
            logger.warning("rule has both from/to and months; months %s ignored", sorted(months))
    elif months:
        scope = RecurringMonths(months)
    else:
        logger.warning("dropping rule without a valid from/to pair or months: %r", dict(raw))
        return None

    priority = raw.get("priority", 0)
    if not _is_int(priority):
        logger.warning("rule priority %r is not an integer; using 0", priority)
        priority = 0
    return PeriodRule(scope=scope, priority=priority, overrides=parse_properties(raw))


def parse_options(cfg: Mapping[str, Any]) -> ConstraintOptions:
    raw_rules = cfg.get("rules") or ()
    if not _is_list(raw_rules):
        logger.warning("ignoring rules: expected a list, got %r", raw_rules)
        raw_rules = ()
    rules = []
    for raw in raw_rules:
        if not isinstance(raw, Mapping):
            logger.warning("dropping rule that is not an object: %r", raw)
            continue
        rule = parse_rule(raw)
        if rule is not None:
            rules.append(rule)
    return ConstraintOptions(base=parse_properties(cfg), rules=tuple(rules))


def parse_messages(raw: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Normalize message-override keys to reason kinds; unknown keys are dropped."""
    out: Dict[str, str] = {}
    if raw is not None and not isinstance(raw, Mapping):
        logger.warning("ignoring constraint messages: expected an object, got %r", raw)
        return out
    for key, text in (raw or {}).items():
        kind = MESSAGE_KEYS.get(key, key)
        if kind not in REASON_KINDS:
            logger.debug("ignoring unknown message key %r", key)
        elif not isinstance(text, str):
            logger.debug("ignoring non-string message for %r", key)
        else:
            out[kind] = text
    return out


# ============================================================
# Validation
# ============================================================

def _check_members(where: str, cfg: Mapping[str, Any], camel: str, lo: int, hi: int, problems: List[str]) -> None:
    values = _lookup(cfg, camel, FIELD_KEYS[camel])
    if not values or not _is_list(values):
        return
    bad = [v for v in values if not _is_int(v) or not lo <= v <= hi]
    if bad:
        problems.append(f"{where}{camel} values must be integers {lo}-{hi}, got: {bad}")


def _check_scope(where: str, cfg: Mapping[str, Any], problems: List[str]) -> None:
    bounds = {}
    for camel in ("minDate", "maxDate"):
        raw = _lookup(cfg, camel, FIELD_KEYS[camel])
        if raw is None:
            continue
        d = _parse_date(raw)
        if d is None:
            problems.append(f'{where}invalid {camel}: "{raw}"')
        bounds[camel] = d
    lo, hi = bounds.get("minDate"), bounds.get("maxDate")
    if lo is not None and hi is not None and lo > hi:
        problems.append(f'{where}minDate "{lo}" is after maxDate "{hi}"')

    rng = {c: _lookup(cfg, c, FIELD_KEYS[c]) for c in ("minRange", "maxRange")}
    for camel, v in rng.items():
        if v is not None and (not _is_int(v) or v < 0):
            problems.append(f"{where}{camel} must be a non-negative integer, got: {v!r}")
    if _is_int(rng["minRange"]) and _is_int(rng["maxRange"]) and rng["minRange"] > rng["maxRange"]:
        problems.append(f"{where}minRange ({rng['minRange']}) exceeds maxRange ({rng['maxRange']})")

    for camel in _SET_KEYS:
        v = _lookup(cfg, camel, FIELD_KEYS[camel])
        if v is not None and not _is_list(v):
            problems.append(f"{where}{camel} must be a list, got: {v!r}")

    for camel in ("disabledDaysOfWeek", "enabledDaysOfWeek"):
        _check_members(where, cfg, camel, 0, 6, problems)
    for camel in ("disabledMonths", "enabledMonths"):
        _check_members(where, cfg, camel, 1, 12, problems)


def validate_config(cfg: Mapping[str, Any]) -> List[str]:
    """Return (and log) warnings about invalid combinations. Never raises."""
    problems: List[str] = []
    _check_scope("", cfg, problems)

    rules = cfg.get("rules") or ()
    if not _is_list(rules):
        problems.append(f"rules must be a list, got: {rules!r}")
        rules = ()
    for i, rule in enumerate(rules):
        where = f"rules[{i}]: "
        if not isinstance(rule, Mapping):
            problems.append(f"{where}rule must be an object, got: {rule!r}")
            continue
        _check_scope(where, rule, problems)
        months = rule.get("months")
        if months is not None and not _is_list(months):
            problems.append(f"{where}months must be a list, got: {months!r}")
        elif months:
            bad = [m for m in months if not _is_int(m) or not 1 <= m <= 12]
            if bad:
                problems.append(f"{where}months values must be integers 1-12, got: {bad}")
        start, end = _lookup(rule, "from", "start"), _lookup(rule, "to", "end")
        start_d = _parse_date(start) if start is not None else None
        end_d = _parse_date(end) if end is not None else None
        if start_d is not None and end_d is not None and start_d > end_d:
            problems.append(f'{where}from "{start}" is after to "{end}"')

    tz = cfg.get("timezone")
    if tz:
        try:
            resolve_timezone(tz)
        except InvalidTimezoneError:
            problems.append(f'invalid timezone: "{tz}"')

    raw_msgs = _lookup(cfg, "constraintMessages", "constraint_messages") or {}
    if not isinstance(raw_msgs, Mapping):
        problems.append(f"constraintMessages must be an object, got: {raw_msgs!r}")
        raw_msgs = {}
    for key in raw_msgs:
        if MESSAGE_KEYS.get(key, key) not in REASON_KINDS:
            problems.append(f"unknown constraint message key: {key!r}")

    for msg in problems:
        logger.warning(msg)
    return problems


# ============================================================
# Engine construction
# ============================================================

def build_engine(cfg: Mapping[str, Any], messages: Optional[Mapping[str, str]] = None) -> ConstraintEngine:
    """Validate, parse, and compile a plain-data config.

    ``messages`` takes precedence over a ``constraintMessages`` entry in ``cfg``.
    To update constraints, build again: ``build_engine(merge_config(old, updates))``.
    """
    validate_config(cfg)
    if messages is None:
        messages = _lookup(cfg, "constraintMessages", "constraint_messages")
    return make_engine(parse_options(cfg), parse_messages(messages))


def load_config(path: str | Path) -> Dict[str, Any]:
    """Read a JSON config file; the top level must be an object."""
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as ex:
        raise ConfigError(f"{p}: invalid JSON ({ex})") from ex
    if not isinstance(data, dict):
        raise ConfigError(f"{p}: top-level JSON value must be an object")
    return data
