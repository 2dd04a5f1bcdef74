"""
attendly/state.py

In-memory state for one dashboard session.

The UI keeps a single DashboardState in st.session_state and replaces list
entries rather than editing records in place (records are frozen dataclasses).
Nothing is persisted; a new session starts again from the fixtures.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Dict, List, Literal, Optional

from attendly import fixtures
from attendly.models import ClassSession, Notification, Student, Subject, Task


logger = logging.getLogger(__name__)

Mark = Literal["present", "absent"]


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


def _require(**fields: Optional[str]) -> None:
    missing = [name for name, value in fields.items() if not (value and value.strip())]
    if missing:
        raise ValueError(f"Missing required fields: {missing}")


@dataclass
class DashboardState:
    students: List[Student] = field(default_factory=lambda: list(fixtures.STUDENTS))
    subjects: List[Subject] = field(default_factory=lambda: list(fixtures.SUBJECTS))
    tasks: List[Task] = field(default_factory=lambda: list(fixtures.TASKS))
    notifications: List[Notification] = field(default_factory=lambda: list(fixtures.NOTIFICATIONS))
    sessions: List[ClassSession] = field(default_factory=lambda: list(fixtures.SESSIONS))

    # --- Notifications

    def send_message(self, title: str, message: str, today: Optional[date] = None) -> Notification:
        """Prepend a teacher message so the newest shows first in the inbox."""
        _require(title=title, message=message)
        note = Notification(
            id=_new_id(),
            title=title,
            message=message,
            date=(today or date.today()).isoformat(),
            type="teacher",
        )
        self.notifications.insert(0, note)
        logger.info("Sent notification %r", title)
        return note

    # --- Roster and subjects

    def add_student(self, name: str, email: str, roll_number: str, department: str) -> Student:
        _require(name=name, roll_number=roll_number)
        student = Student(
            id=_new_id(),
            name=name,
            email=email,
            avatar=f"https://ui-avatars.com/api/?name={name}&background=random",
            roll_number=roll_number,
            department=department,
            year="1st Year",
        )
        self.students.append(student)
        logger.info("Added student %s (%s)", name, roll_number)
        return student

    def add_subject(self, name: str, code: str, total_classes: int = 20) -> Subject:
        _require(name=name, code=code)
        subject = Subject(id=_new_id(), name=name, code=code, total_classes=total_classes, attended_classes=0)
        subject.record  # raises ValueError for a negative total
        self.subjects.append(subject)
        logger.info("Added subject %s (%s)", name, code)
        return subject

    def sessions_for(self, subject_id: str) -> List[ClassSession]:
        """Sessions of one subject, newest first."""
        matching = [s for s in self.sessions if s.subject_id == subject_id]
        return sorted(matching, key=lambda s: s.date, reverse=True)

    # --- Tasks

    def add_task(self, title: str, due_date: Optional[str] = None, subject_id: Optional[str] = None) -> Task:
        _require(title=title)
        task = Task(id=_new_id(), title=title, due_date=due_date or None, subject_id=subject_id)
        self.tasks.append(task)
        return task

    def toggle_task(self, task_id: str) -> None:
        self.tasks = [replace(t, completed=not t.completed) if t.id == task_id else t for t in self.tasks]

    def delete_task(self, task_id: str) -> None:
        self.tasks = [t for t in self.tasks if t.id != task_id]

    @property
    def completed_tasks(self) -> int:
        return sum(1 for t in self.tasks if t.completed)


@dataclass
class RollCall:
    """
    Present/absent marks for the class currently being taken.

    Unmarked students count as present.
    """
    marks: Dict[str, Mark] = field(default_factory=dict)

    def toggle(self, student_id: str) -> Mark:
        new: Mark = "present" if self.marks.get(student_id) == "absent" else "absent"
        self.marks[student_id] = new
        return new

    def status(self, student_id: str) -> Mark:
        return self.marks.get(student_id, "present")

    def absentees(self) -> List[str]:
        return [sid for sid, m in self.marks.items() if m == "absent"]

    def reset(self) -> None:
        self.marks.clear()
