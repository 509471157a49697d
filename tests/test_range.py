# tests/test_range.py

from calpick import (
    CalendarDate,
    ConstraintOptions,
    ConstraintProperties,
    DateRange,
    PeriodRule,
    RecurringMonths,
    is_range_valid,
    make_engine,
)

D = CalendarDate
P = ConstraintProperties

def engine(**props):
    return make_engine(ConstraintOptions(base=P(**props)))

def test_min_range_counts_both_endpoints():
    eng = engine(min_range=5)
    start = D(2025, 6, 2)
    assert eng.is_range_valid(start, start.add_days(4))      # 5 days
    assert not eng.is_range_valid(start, start.add_days(3))  # 4 days

def test_max_range_counts_both_endpoints():
    eng = engine(max_range=7)
    start = D(2025, 6, 2)
    assert eng.is_range_valid(start, start.add_days(6))      # 7 days
    assert not eng.is_range_valid(start, start.add_days(7))  # 8 days

def test_single_day_range():
    assert engine(max_range=1).is_range_valid(D(2025, 6, 2), D(2025, 6, 2))
    assert not engine(min_range=2).is_range_valid(D(2025, 6, 2), D(2025, 6, 2))

def test_order_of_endpoints_does_not_matter():
    eng = engine(min_range=3, max_range=5)
    a, b = D(2025, 6, 2), D(2025, 6, 5)
    assert eng.is_range_valid(a, b)
    assert eng.is_range_valid(b, a)
    assert not eng.is_range_valid(a.add_days(10), a)

def test_range_length_across_month_and_leap_day():
    eng = engine(max_range=3)
    assert eng.is_range_valid(D(2024, 2, 28), D(2024, 3, 1))     # 28, 29, 1
    assert not eng.is_range_valid(D(2024, 2, 27), D(2024, 3, 1))

def test_disabled_endpoint_invalidates_range():
    eng = engine(disabled_days_of_week=frozenset({0, 6}))
    assert eng.is_range_valid(D(2025, 6, 2), D(2025, 6, 6))
    assert not eng.is_range_valid(D(2025, 6, 2), D(2025, 6, 7))
    assert not eng.is_range_valid(D(2025, 5, 31), D(2025, 6, 6))

def test_disabled_interior_day_is_allowed():
    eng = engine(disabled_days_of_week=frozenset({0, 6}))
    assert eng.is_range_valid(D(2025, 6, 6), D(2025, 6, 9))

def test_range_bounds_resolved_from_start_date_scope():
    # December allows long stays; the rest of the year caps at 3 days
    opts = ConstraintOptions(
        base=P(max_range=3),
        rules=(PeriodRule(RecurringMonths(frozenset({12})), overrides=P(max_range=14)),),
    )
    eng = make_engine(opts)
    assert eng.is_range_valid(D(2025, 12, 28), D(2026, 1, 8))
    assert not eng.is_range_valid(D(2025, 11, 28), D(2025, 12, 8))
    # reversed input: the earlier date is the start
    assert eng.is_range_valid(D(2026, 1, 8), D(2025, 12, 28))

def test_range_with_date_range_rule():
    opts = ConstraintOptions(
        base=P(min_range=2),
        rules=(PeriodRule(DateRange(D(2025, 7, 1), D(2025, 7, 31)), priority=1, overrides=P(min_range=7)),),
    )
    eng = make_engine(opts)
    assert eng.is_range_valid(D(2025, 6, 29), D(2025, 7, 1))
    assert not eng.is_range_valid(D(2025, 7, 1), D(2025, 7, 3))
    assert eng.is_range_valid(D(2025, 7, 1), D(2025, 7, 7))

def test_contradictory_range_bounds_reject_everything():
    eng = engine(min_range=10, max_range=3)
    start = D(2025, 6, 2)
    assert not any(eng.is_range_valid(start, start.add_days(n)) for n in range(30))

def test_one_off_helper_with_plain_config():
    cfg = {"minRange": 5}
    assert is_range_valid(D(2025, 6, 2), D(2025, 6, 6), cfg)
    assert not is_range_valid(D(2025, 6, 2), D(2025, 6, 5), cfg)
