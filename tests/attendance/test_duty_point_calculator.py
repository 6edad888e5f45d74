from datetime import date, datetime, time, timedelta, timezone

import pytest

from wage_ledger.attendance.calculator.base import TimeWindow
from wage_ledger.attendance.calculator.windowed_calculator import WindowedDutyPointCalculator, score

DAY = date(2026, 3, 2)


def at(hh: int, mm: int = 0, ss: int = 0, *, day: date = DAY) -> datetime:
    return datetime.combine(day, time(hh, mm, ss))


def test_full_morning_window_scores_half_point():
    assert score(at(9), at(13)) == 0.5


def test_full_day_scores_all_three_windows():
    assert score(at(6), at(18)) == 1.5


def test_partial_morning_below_threshold_scores_zero():
    # 2.5 of 4 hours = 62.5%
    assert score(at(9, 30), at(12)) == 0


def test_reversed_or_empty_interval_scores_zero():
    assert score(at(13), at(9)) == 0
    assert score(at(9), at(9)) == 0
    assert score(at(18), at(6)) == 0


def test_threshold_is_inclusive_at_eighty_percent():
    # Morning: 80% of 240 min = 192 min
    assert score(at(9), at(12, 12)) == 0.5
    assert score(at(9), at(12, 11)) == 0


def test_coverage_counts_whole_minutes_only():
    # 191 min 59 s truncates to 191 min, below 192
    assert score(at(9), at(12, 11, 59)) == 0


def test_early_morning_threshold():
    # 80% of 180 min = 144 min
    assert score(at(6), at(8, 24)) == 0.5
    assert score(at(6, 1), at(8, 24)) == 0


def test_lunch_and_out_of_window_minutes_never_count():
    assert score(at(13), at(14)) == 0
    assert score(at(4), at(6)) == 0
    assert score(at(18), at(23, 59)) == 0


def test_long_day_is_capped_by_windows():
    assert score(at(5), at(23)) == 1.5


def test_typical_site_day_with_late_start():
    # Morning fully covered, afternoon fully covered, early morning missed
    assert score(at(8, 45), at(18)) == 1.0


def test_cross_midnight_is_measured_on_check_in_day_only():
    check_in = at(20)
    check_out = at(18, day=DAY + timedelta(days=1))
    assert score(check_in, check_out) == 0


@pytest.mark.parametrize(
    "check_in,check_out",
    [
        (at(6), at(9)),
        (at(7), at(13)),
        (at(9, 10), at(17, 50)),
        (at(10), at(15)),
        (at(5, 30), at(19)),
        (at(12), at(11)),
    ],
)
def test_score_only_takes_half_point_steps(check_in, check_out):
    assert score(check_in, check_out) in {0, 0.5, 1.0, 1.5}


def test_window_breakdown_reports_coverage():
    calc = WindowedDutyPointCalculator()
    parts = calc.score_windows(at(9), at(11))

    assert [p.name for p in parts] == ["Early Morning", "Morning", "Afternoon"]
    assert parts[0].coverage == 0
    assert parts[1].coverage == pytest.approx(0.5)
    assert [p.points for p in parts] == [0, 0, 0]


def test_custom_threshold_and_windows():
    calc = WindowedDutyPointCalculator(
        windows=[TimeWindow("Day", time(8, 0), time(16, 0), 1.0)],
        threshold=0.5,
    )
    assert calc.score(at(8), at(12)) == 1.0
    assert calc.score(at(8), at(11, 59)) == 0


def test_timezone_aware_punches_use_their_own_zone():
    ist = timezone(timedelta(hours=5, minutes=30))
    check_in = datetime(2026, 3, 2, 9, 0, tzinfo=ist)
    check_out = datetime(2026, 3, 2, 13, 0, tzinfo=ist)
    assert score(check_in, check_out) == 0.5
