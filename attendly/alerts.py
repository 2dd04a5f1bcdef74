"""Low-attendance alerts shown in the student inbox and sent by teachers."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from attendly.analytics import RISK_THRESHOLD
from attendly.models import Notification, Subject


def is_low(subject: Subject) -> bool:
    # Subjects with no classes yet never raise an alert.
    r = subject.record
    return r.total > 0 and r.attended * 100 < RISK_THRESHOLD * r.total


def low_attendance_alerts(subjects: Iterable[Subject], today: Optional[date] = None) -> List[Notification]:
    day = (today or date.today()).isoformat()
    return [
        Notification(
            id=f"sys-{s.id}",
            title="Low Attendance Warning",
            message=f"Your attendance in {s.name} is below {RISK_THRESHOLD}%. Please attend upcoming classes.",
            date=day,
            type="system",
        )
        for s in subjects
        if is_low(s)
    ]


def at_risk_message(subject: Subject) -> str:
    return (
        f"Warning: Your attendance in {subject.name} ({subject.code}) is below {RISK_THRESHOLD}%. "
        "Please attend upcoming classes to improve your standing."
    )
