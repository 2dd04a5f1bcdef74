from __future__ import annotations

from datetime import date

import pytest

from attendly import fixtures
from attendly.state import DashboardState, RollCall


def test_state_starts_from_fixture_copies():
    state = DashboardState()
    state.students.append(state.students[0])
    assert len(fixtures.STUDENTS) == 2
    assert len(DashboardState().students) == 2


def test_send_message_prepends_teacher_notification():
    state = DashboardState()
    note = state.send_message("Exam moved", "Now on Friday", today=date(2024, 3, 1))
    assert state.notifications[0] == note
    assert note.type == "teacher"
    assert note.date == "2024-03-01"
    assert not note.read
    assert len(state.notifications) == 2


def test_send_message_requires_title_and_body():
    state = DashboardState()
    with pytest.raises(ValueError):
        state.send_message("", "body")
    with pytest.raises(ValueError):
        state.send_message("title", "   ")
    assert len(state.notifications) == 1


def test_add_student_defaults():
    state = DashboardState()
    s = state.add_student("Sam Lee", "sam@attendly.com", "2024-CS-050", "Computer Science")
    assert state.students[-1] == s
    assert s.year == "1st Year"
    assert s.avatar == "https://ui-avatars.com/api/?name=Sam Lee&background=random"


def test_add_student_requires_name_and_roll_number():
    state = DashboardState()
    with pytest.raises(ValueError):
        state.add_student("Sam", "", "", "")
    assert len(state.students) == 2


def test_add_subject_starts_with_no_attendance():
    state = DashboardState()
    subject = state.add_subject("Compilers", "CS-401")
    assert subject.total_classes == 20
    assert subject.attended_classes == 0
    assert subject in state.subjects


def test_add_subject_rejects_bad_input():
    state = DashboardState()
    with pytest.raises(ValueError):
        state.add_subject("", "CS-401")
    with pytest.raises(ValueError):
        state.add_subject("Compilers", "CS-401", total_classes=-3)
    assert len(state.subjects) == 4


def test_task_lifecycle():
    state = DashboardState()
    task = state.add_task("Revise backprop", due_date="2023-10-30")
    assert not task.completed

    state.toggle_task(task.id)
    assert state.tasks[-1].completed
    state.toggle_task(task.id)
    assert not state.tasks[-1].completed

    state.delete_task(task.id)
    assert task.id not in [t.id for t in state.tasks]


def test_completed_tasks_count():
    state = DashboardState()
    assert state.completed_tasks == 1
    state.toggle_task("t1")
    assert state.completed_tasks == 2


def test_add_task_requires_title():
    with pytest.raises(ValueError):
        DashboardState().add_task("")


def test_sessions_for_newest_first():
    sessions = DashboardState().sessions_for("sub2")
    assert [s.id for s in sessions] == ["n4", "n3", "n2", "n1"]
    assert DashboardState().sessions_for("missing") == []


def test_roll_call_toggle():
    rc = RollCall()
    assert rc.status("s1") == "present"
    assert rc.toggle("s1") == "absent"
    assert rc.toggle("s1") == "present"
    rc.toggle("s2")
    assert rc.absentees() == ["s2"]
    rc.reset()
    assert rc.absentees() == []


def test_add_subject_with_no_classes_yet():
    state = DashboardState()
    subject = state.add_subject("Seminar", "SEM-1", total_classes=0)
    assert subject.record.total == 0
