from __future__ import annotations

import pytest

from attendly.analytics import (
    AggregateStatistics,
    AttendanceRecord,
    RiskStatus,
    aggregate_statistics,
    classify_risk,
    histogram_buckets,
    overall_percentage,
    percentage,
    recovery_target,
    round_half_up,
    subject_table,
)
from attendly.fixtures import SUBJECTS


def test_percentage_examples():
    assert percentage(0, 0) == 0
    assert percentage(20, 24) == 83
    assert percentage(15, 30) == 50
    assert percentage(12, 12) == 100


def test_percentage_rounds_halves_up():
    # 1/8 = 12.5%
    assert percentage(1, 8) == 13
    assert round_half_up(2.5) == 3
    assert round_half_up(71.666) == 72


def test_percentage_stays_in_range():
    for total in range(0, 40):
        for attended in range(0, total + 1):
            assert 0 <= percentage(attended, total) <= 100


@pytest.mark.parametrize("attended,total", [(-1, 5), (3, -1), (6, 5)])
def test_bad_counts_are_rejected(attended, total):
    with pytest.raises(ValueError):
        percentage(attended, total)
    with pytest.raises(ValueError):
        AttendanceRecord(attended=attended, total=total)


def test_risk_threshold():
    assert classify_risk(74) is RiskStatus.AT_RISK
    assert classify_risk(75) is RiskStatus.ON_TRACK
    assert classify_risk(100) is RiskStatus.ON_TRACK


def test_recovery_target_low_subject():
    # ceil((0.75 * 30 - 15) / 0.25) = 30, and (15 + 30) / (30 + 30) is exactly 0.75
    assert recovery_target(15, 30) == 30
    assert recovery_target(22, 28) == 0  # 78.6%


def test_recovery_target_is_smallest_n():
    for total in range(1, 30):
        for attended in range(0, total + 1):
            n = recovery_target(attended, total)
            assert (attended + n) / (total + n) >= 0.75
            if n > 0:
                assert (attended + n - 1) / (total + n - 1) < 0.75


def test_recovery_target_zero_cases():
    assert recovery_target(0, 0) == 0
    assert recovery_target(20, 24) == 0
    assert recovery_target(3, 4) == 0


def test_recovery_target_other_threshold():
    # 5/10 to 70%: (5 + n) / (10 + n) >= 0.7 -> n >= 6.67
    assert recovery_target(5, 10, threshold=0.7) == 7
    with pytest.raises(ValueError):
        recovery_target(5, 10, threshold=1.0)


def test_aggregate_statistics():
    assert aggregate_statistics([]) == AggregateStatistics(mean=0, median=0, at_risk_count=0)
    assert aggregate_statistics([50, 75, 90]) == AggregateStatistics(mean=72, median=75, at_risk_count=1)
    assert aggregate_statistics([90, 50]).median == 70
    assert aggregate_statistics([74, 75]).median == 75  # 74.5 rounds up


def test_aggregate_statistics_does_not_mutate_input():
    values = [90, 10, 50]
    first = aggregate_statistics(values)
    assert values == [90, 10, 50]
    assert aggregate_statistics(values) == first


def test_histogram_buckets():
    buckets = histogram_buckets([40, 60, 80, 95])
    assert [b.name for b in buckets] == ["<50%", "50-75%", "75-90%", "90%+"]
    assert [b.count for b in buckets] == [1, 1, 1, 1]


def test_histogram_bucket_edges():
    counts = [b.count for b in histogram_buckets([0, 49, 50, 74, 75, 89, 90, 100])]
    assert counts == [2, 2, 2, 2]
    assert [b.count for b in histogram_buckets([])] == [0, 0, 0, 0]


def test_fixture_subjects_end_to_end():
    pcts = [percentage(s.attended_classes, s.total_classes) for s in SUBJECTS]
    assert pcts == [83, 50, 100, 79]
    assert aggregate_statistics(pcts) == AggregateStatistics(mean=78, median=81, at_risk_count=1)


def test_overall_percentage_uses_sums():
    records = [AttendanceRecord(20, 24), AttendanceRecord(15, 30), AttendanceRecord(12, 12), AttendanceRecord(22, 28)]
    # 69 / 94
    assert overall_percentage(records) == 73
    assert overall_percentage([]) == 0


def test_subject_table():
    df = subject_table(SUBJECTS)
    assert list(df["code"]) == ["PHY-404", "CS-302", "ETH-101", "MAT-201"]
    assert list(df["percentage"]) == [83, 50, 100, 79]
    assert list(df["missed"]) == [4, 15, 0, 6]
    assert list(df["recovery"]) == [0, 30, 0, 0]
    assert list(df["risk"]) == ["On Track", "At Risk", "On Track", "On Track"]


def test_subject_table_empty():
    df = subject_table([])
    assert df.empty
    assert "percentage" in df.columns
