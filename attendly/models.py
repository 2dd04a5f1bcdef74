"""
attendly/models.py

Plain records shared by the fixtures, the session state and the UI.
Only Subject carries counts the analytics engine cares about; it exposes them
as an AttendanceRecord so bad counts are rejected the moment they are read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from attendly.analytics import AttendanceRecord


SessionStatus = Literal["present", "absent", "excused"]
NotificationType = Literal["system", "teacher"]


@dataclass(frozen=True)
class Student:
    id: str
    name: str
    email: str
    avatar: str
    roll_number: str
    department: str
    year: str


@dataclass(frozen=True)
class Teacher:
    id: str
    name: str
    email: str
    avatar: str
    faculty_id: str
    department: str
    specialization: str


@dataclass(frozen=True)
class Subject:
    id: str
    name: str
    code: str
    total_classes: int
    attended_classes: int

    @property
    def record(self) -> AttendanceRecord:
        return AttendanceRecord(attended=self.attended_classes, total=self.total_classes)


@dataclass(frozen=True)
class ClassSession:
    id: str
    subject_id: str
    date: str  # ISO yyyy-mm-dd
    topic: str
    status: SessionStatus
    smart_notes: str


@dataclass(frozen=True)
class Notification:
    id: str
    title: str
    message: str
    date: str
    type: NotificationType
    read: bool = False


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    completed: bool = False
    due_date: Optional[str] = None
    subject_id: Optional[str] = None
