from __future__ import annotations

from datetime import date

from attendly.alerts import at_risk_message, is_low, low_attendance_alerts
from attendly.fixtures import SUBJECTS
from attendly.models import Subject


def test_only_low_subjects_alert():
    alerts = low_attendance_alerts(SUBJECTS, today=date(2023, 10, 10))
    assert [a.id for a in alerts] == ["sys-sub2"]
    assert alerts[0].type == "system"
    assert alerts[0].date == "2023-10-10"
    assert "Neural Networks" in alerts[0].message


def test_new_subject_does_not_alert():
    empty = Subject(id="x", name="New", code="NEW-1", total_classes=0, attended_classes=0)
    assert not is_low(empty)
    assert low_attendance_alerts([empty]) == []


def test_at_risk_message_names_subject():
    msg = at_risk_message(SUBJECTS[1])
    assert msg.startswith("Warning: Your attendance in Neural Networks (CS-302) is below 75%.")


def test_alert_cutoff_is_strictly_below_75():
    at_line = Subject(id="a", name="A", code="A-1", total_classes=4, attended_classes=3)
    below = Subject(id="b", name="B", code="B-1", total_classes=100, attended_classes=74)
    assert not is_low(at_line)
    assert is_low(below)
