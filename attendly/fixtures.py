"""
attendly/fixtures.py

Seed data for the dashboard plus the deterministic per-student attendance
generator used by the teacher roster.

There is no real data source: every session starts from these fixtures.
Running the module exports them to CSV so they can be inspected or edited:

    python -m attendly.fixtures --out data
"""

from __future__ import annotations

import argparse
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Iterable, List

import numpy as np
import pandas as pd

from attendly.config import load_settings
from attendly.models import ClassSession, Notification, Student, Subject, Task, Teacher


STUDENTS: List[Student] = [
    Student(
        id="s1",
        name="Alex Chen",
        email="alex@attendly.com",
        avatar="https://picsum.photos/seed/alex/100/100",
        roll_number="2024-CS-042",
        department="Computer Science",
        year="3rd Year",
    ),
    Student(
        id="s2",
        name="Jordan Smith",
        email="jordan@attendly.com",
        avatar="https://picsum.photos/seed/jordan/100/100",
        roll_number="2024-CS-043",
        department="Computer Science",
        year="3rd Year",
    ),
]

TEACHER = Teacher(
    id="t1",
    name="Dr. Sarah Connor",
    email="sarah.connor@attendly.com",
    avatar="https://picsum.photos/seed/sarah/100/100",
    faculty_id="FAC-099",
    department="Computer Science",
    specialization="Artificial Intelligence",
)

SUBJECTS: List[Subject] = [
    Subject(id="sub1", name="Quantum Physics", code="PHY-404", total_classes=24, attended_classes=20),
    Subject(id="sub2", name="Neural Networks", code="CS-302", total_classes=30, attended_classes=15),  # low attendance
    Subject(id="sub3", name="Cyber Ethics", code="ETH-101", total_classes=12, attended_classes=12),
    Subject(id="sub4", name="Advanced Calculus", code="MAT-201", total_classes=28, attended_classes=22),
]

SESSIONS: List[ClassSession] = [
    # Physics
    ClassSession("p1", "sub1", "2023-10-01", "Wave Particle Duality", "present",
                 "Key concept: Light behaves as both a particle and a wave. Remember De Broglie wavelength equation."),
    ClassSession("p2", "sub1", "2023-10-03", "Schrodinger Equation", "present",
                 "Time-dependent vs Time-independent equations. Psi represents the wave function."),
    ClassSession("p3", "sub1", "2023-10-05", "Heisenberg Uncertainty", "absent",
                 "Missed class. Peer notes: Delta x * Delta p >= h-bar / 2. Cannot know position and momentum simultaneously."),
    ClassSession("p4", "sub1", "2023-10-08", "Quantum Tunneling", "present",
                 "Particles can pass through potential barriers higher than their energy level."),
    # Neural Networks
    ClassSession("n1", "sub2", "2023-10-02", "Perceptrons", "present",
                 "Single layer neural network. Linear classifier."),
    ClassSession("n2", "sub2", "2023-10-04", "Backpropagation", "absent",
                 "Missed. Critical topic: Chain rule used to calculate gradients for weight updates."),
    ClassSession("n3", "sub2", "2023-10-06", "Activation Functions", "absent",
                 "ReLU is standard. Sigmoid vanishes gradients. Tanh is zero-centered."),
    ClassSession("n4", "sub2", "2023-10-09", "Convolutional Layers", "present",
                 "Filters extract features. Pooling reduces dimensionality."),
    # Ethics
    ClassSession("e1", "sub3", "2023-10-01", "Utilitarianism in AI", "present",
                 "Greatest good for greatest number. Trolley problem variations."),
    ClassSession("e2", "sub3", "2023-10-08", "Data Privacy Laws", "present",
                 "GDPR and CCPA implications for software engineering."),
    # Calculus
    ClassSession("m1", "sub4", "2023-10-02", "Multiple Integrals", "present",
                 "Integrating over regions in 2D and 3D space."),
    ClassSession("m2", "sub4", "2023-10-05", "Vector Fields", "present",
                 "Visualizing flow. Gradient, Divergence, and Curl operators."),
]

NOTIFICATIONS: List[Notification] = [
    Notification(
        id="n1",
        title="Welcome to Attendly",
        message="Your student profile has been successfully set up. "
                "Check your dashboard for real-time attendance tracking.",
        date="2023-10-01",
        type="system",
    ),
]

TASKS: List[Task] = [
    Task(id="t1", title="Submit Quantum Physics Assignment", due_date="2023-10-15", subject_id="sub1"),
    Task(id="t2", title="Read Chapter 4 for Ethics", completed=True, due_date="2023-10-10", subject_id="sub3"),
    Task(id="t3", title="Prepare for Calculus Midterm", due_date="2023-10-20", subject_id="sub4"),
]


def mock_attendance(student_id: str, subject_code: str) -> int:
    """
    Stable fake attendance percentage in 50..100 for a student in a subject.

    Derived from the character codes of the ids so the roster looks the same
    on every rerun without storing anything.
    """
    h = sum(ord(ch) for ch in student_id + subject_code)
    return 50 + (h % 51)


def roster_attendance(students: Iterable[Student], subject_code: str) -> Dict[str, int]:
    return {s.id: mock_attendance(s.id, subject_code) for s in students}


_FIRST_NAMES = ["Priya", "Mateo", "Amara", "Lukas", "Sofia", "Kenji", "Nadia", "Omar", "Elena", "Ravi"]
_LAST_NAMES = ["Patel", "Garcia", "Okafor", "Muller", "Rossi", "Tanaka", "Haddad", "Khan", "Novak", "Iyer"]


def generate_roster(n_students: int = 30, random_state: int = 42) -> List[Student]:
    """Synthetic students for trying the teacher view on a bigger class."""
    rng = np.random.default_rng(random_state)
    first = rng.choice(_FIRST_NAMES, size=n_students)
    last = rng.choice(_LAST_NAMES, size=n_students)
    year = rng.integers(1, 5, size=n_students)
    suffix = {1: "st", 2: "nd", 3: "rd", 4: "th"}

    roster = []
    for i in range(n_students):
        name = f"{first[i]} {last[i]}"
        roster.append(
            Student(
                id=f"S{100000 + i}",
                name=name,
                email=f"{first[i].lower()}.{last[i].lower()}{i}@attendly.com",
                avatar=f"https://ui-avatars.com/api/?name={name.replace(' ', '+')}&background=random",
                roll_number=f"2024-CS-{100 + i:03d}",
                department="Computer Science",
                year=f"{year[i]}{suffix[int(year[i])]} Year",
            )
        )
    return roster


def to_frame(items: Iterable) -> pd.DataFrame:
    return pd.DataFrame([asdict(x) for x in items])


def parse_args(default_out: Path = Path("data")) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export dashboard fixtures to CSV.")
    parser.add_argument(
        "--out",
        type=str,
        default=str(default_out),
        help="Directory to write the CSV files into (default: ATTENDLY_DATA_DIR or data).",
    )
    parser.add_argument(
        "--roster-size",
        type=int,
        default=0,
        help="Also write a synthetic roster of this many students (0 = skip).",
    )
    parser.add_argument(
        "--random-state",
        type=int,
        default=42,
        help="Random seed for the synthetic roster.",
    )
    return parser.parse_args()


def main() -> None:
    settings = load_settings()
    args = parse_args(settings.data_dir)
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    tables = {
        "students": to_frame(STUDENTS),
        "subjects": to_frame(SUBJECTS),
        "sessions": to_frame(SESSIONS),
        "tasks": to_frame(TASKS),
    }
    if args.roster_size > 0:
        tables["roster"] = to_frame(generate_roster(args.roster_size, args.random_state))

    for name, df in tables.items():
        path = out_dir / f"{name}.csv"
        df.to_csv(path, index=False)
        print(f"Wrote {len(df)} rows to {path}")


if __name__ == "__main__":
    main()
