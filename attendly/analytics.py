"""
attendly/analytics.py

Purpose
-------
Turns raw attendance counts into the numbers both dashboards display:
  - per-subject percentage, risk status and recovery target
  - cohort statistics (mean, median, at-risk count)
  - the fixed four-bucket distribution used by the teacher chart

Everything here is a pure function of its arguments. Nothing is cached and
inputs are never mutated, so the UI simply recomputes on every rerun.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Iterable, List, Sequence

import pandas as pd


RISK_THRESHOLD = 75
RECOVERY_THRESHOLD = 0.75

# (label, exclusive upper bound); the last bucket has no upper bound.
BUCKETS = [
    ("<50%", 50),
    ("50-75%", 75),
    ("75-90%", 90),
    ("90%+", None),
]


class RiskStatus(str, Enum):
    ON_TRACK = "On Track"
    AT_RISK = "At Risk"


@dataclass(frozen=True)
class AttendanceRecord:
    """
    Cumulative class count for one subject and one learner.

    Raises
    ------
    ValueError
        If either count is negative or attended exceeds total.
    """
    attended: int
    total: int

    def __post_init__(self) -> None:
        _check_counts(self.attended, self.total)


@dataclass(frozen=True)
class AggregateStatistics:
    mean: int
    median: int
    at_risk_count: int


@dataclass(frozen=True)
class BucketCount:
    name: str
    count: int


def _check_counts(attended: int, total: int) -> None:
    if attended < 0 or total < 0:
        raise ValueError(f"Counts must be non-negative (attended={attended}, total={total}).")
    if attended > total:
        raise ValueError(f"attended ({attended}) cannot exceed total ({total}).")


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(x + 0.5))


def percentage(attended: int, total: int) -> int:
    """
    Attendance percentage in 0..100.

    A subject with no classes yet reports 0 rather than failing.
    """
    _check_counts(attended, total)
    if total == 0:
        return 0
    return round_half_up(100 * attended / total)


def classify_risk(pct: int) -> RiskStatus:
    return RiskStatus.AT_RISK if pct < RISK_THRESHOLD else RiskStatus.ON_TRACK


def recovery_target(attended: int, total: int, threshold: float = RECOVERY_THRESHOLD) -> int:
    """
    Number of consecutive classes to attend to reach ``threshold``.

    Each recovered class counts toward both attended and total, so this is the
    smallest n with (attended + n) / (total + n) >= threshold.

    Notes
    -----
    The threshold is read through its decimal string so that 0.7 means 7/10
    exactly; with floats the ceiling can land one class too high.
    """
    _check_counts(attended, total)
    if not 0 < threshold < 1:
        raise ValueError(f"threshold must be between 0 and 1, got {threshold}.")
    if total == 0:
        return 0

    t = Fraction(str(threshold))
    if Fraction(attended, total) >= t:
        return 0

    needed = math.ceil((t * total - attended) / (1 - t))
    return max(0, needed)


def aggregate_statistics(values: Sequence[int]) -> AggregateStatistics:
    """Mean, median and at-risk count of a cohort's percentages."""
    values = list(values)
    if not values:
        return AggregateStatistics(mean=0, median=0, at_risk_count=0)

    mean = round_half_up(sum(values) / len(values))

    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        median = ordered[mid]
    else:
        median = round_half_up((ordered[mid - 1] + ordered[mid]) / 2)

    at_risk = sum(1 for v in values if v < RISK_THRESHOLD)
    return AggregateStatistics(mean=mean, median=median, at_risk_count=at_risk)


def histogram_buckets(values: Iterable[int]) -> List[BucketCount]:
    """
    Count values into the fixed distribution buckets.

    Output order always matches BUCKETS so the chart bars never move around,
    empty buckets included.
    """
    counts = [0] * len(BUCKETS)
    for v in values:
        for i, (_, upper) in enumerate(BUCKETS):
            if upper is None or v < upper:
                counts[i] += 1
                break
    return [BucketCount(name=name, count=c) for (name, _), c in zip(BUCKETS, counts)]


def overall_percentage(records: Iterable[AttendanceRecord]) -> int:
    """Percentage over all subjects combined (sums, not an average of percentages)."""
    attended = 0
    total = 0
    for r in records:
        attended += r.attended
        total += r.total
    return percentage(attended, total)


def subject_table(subjects: Sequence) -> pd.DataFrame:
    """
    One row per subject with every derived column the student view shows.

    ``subjects`` are objects exposing ``code``, ``name`` and ``record``
    (see attendly.models.Subject).
    """
    rows = []
    for s in subjects:
        r = s.record
        pct = percentage(r.attended, r.total)
        rows.append(
            {
                "code": s.code,
                "name": s.name,
                "attended": r.attended,
                "total": r.total,
                "missed": r.total - r.attended,
                "percentage": pct,
                "risk": classify_risk(pct).value,
                "recovery": recovery_target(r.attended, r.total),
            }
        )

    columns = ["code", "name", "attended", "total", "missed", "percentage", "risk", "recovery"]
    return pd.DataFrame(rows, columns=columns)
