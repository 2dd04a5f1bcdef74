"""
app/streamlit_app.py

Purpose
-------
The Attendly dashboard. One script, two role-based views:
  - Student: overall standing, per-subject attendance with recovery targets,
    class notes, alerts inbox, tasks, and an AI attendance summary
  - Teacher: per-subject roster statistics and distribution, roll call,
    roster/subject management, parent emails and broadcasts

All state lives in st.session_state for the browser session and is seeded from
attendly.fixtures. Every number on screen comes from attendly.analytics and is
recomputed on each rerun.

Run
---
streamlit run app/streamlit_app.py
"""

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from attendly.alerts import at_risk_message, low_attendance_alerts
from attendly.analytics import (
    aggregate_statistics,
    classify_risk,
    histogram_buckets,
    overall_percentage,
    RiskStatus,
    subject_table,
)
from attendly.config import load_settings
from attendly.data_dictionary import DATA_DICTIONARY
from attendly.fixtures import TEACHER, roster_attendance
from attendly.insights import attendance_insights, build_generator, parent_email
from attendly.logs import configure_logging
from attendly.state import DashboardState, RollCall


# ---------------------------------------------------------------------
# Streamlit page configuration
# ---------------------------------------------------------------------
st.set_page_config(
    page_title="Attendly",
    layout="wide",
)

settings = load_settings()
configure_logging(settings.log_level)


# ---------------------------------------------------------------------
# Session + cached resources
# ---------------------------------------------------------------------
# Streamlit reruns the script top-to-bottom on every interaction, so the
# mutable dashboard state has to live in session_state.

@st.cache_resource
def get_generator():
    """One summary client per process."""
    return build_generator(settings)


if "state" not in st.session_state:
    st.session_state.state = DashboardState()
    st.session_state.roll_call = RollCall()
    st.session_state.roll_subject = None

state: DashboardState = st.session_state.state
roll_call: RollCall = st.session_state.roll_call


def describe_columns(columns):
    st.caption(" | ".join(f"**{c}**: {DATA_DICTIONARY[c]}" for c in columns if c in DATA_DICTIONARY))


# ---------------------------------------------------------------------
# Sidebar: role selection stands in for login (there is no auth)
# ---------------------------------------------------------------------
st.sidebar.header("Attendly")
role = st.sidebar.radio("Sign in as", ["Student", "Teacher"])


def student_view():
    user = state.students[0]  # demo: always the first student
    st.title(f"👋 {user.name}")
    st.caption(f"{user.roll_number} · {user.department} · {user.year}")

    overview, tasks_tab = st.tabs(["Overview", "Tasks"])

    with overview:
        overall = overall_percentage(s.record for s in state.subjects)
        standing = "Attention Needed" if classify_risk(overall) is RiskStatus.AT_RISK else "Good Standing"

        c1, c2, c3 = st.columns(3)
        c1.metric("Overall attendance", f"{overall}%")
        c2.metric("Standing", standing)
        c3.metric("Tasks", f"{state.completed_tasks} / {len(state.tasks)} completed")

        table = subject_table(state.subjects)

        col1, col2 = st.columns([2, 1])
        with col1:
            st.subheader("Subjects")
            st.dataframe(table, use_container_width=True, hide_index=True)
            describe_columns(table.columns)

        with col2:
            st.subheader("Attendance by subject")
            fig = plt.figure()
            plt.bar(table["code"], table["percentage"])
            plt.axhline(75, linestyle="--", color="grey")
            plt.ylim(0, 100)
            plt.ylabel("attendance %")
            st.pyplot(fig)
            plt.close(fig)

        st.subheader("Class notes")
        for subject, row in zip(state.subjects, table.itertuples()):
            label = f"{subject.name} ({subject.code}) · {row.percentage}%"
            with st.expander(label):
                if row.recovery > 0:
                    st.warning(f"Attend the next {row.recovery} classes in a row to get back to 75%.")
                for session in state.sessions_for(subject.id):
                    st.markdown(f"**{session.date} · {session.topic}** ({session.status})")
                    st.write(session.smart_notes)

        st.subheader("Alerts")
        for note in state.notifications + low_attendance_alerts(state.subjects):
            st.info(f"**{note.title}** ({note.date})\n\n{note.message}")

        st.subheader("AI attendance summary")
        if st.button("Generate insight"):
            with st.spinner("Thinking..."):
                st.session_state.insight = attendance_insights(get_generator(), state.subjects, user.name)
        if st.session_state.get("insight"):
            st.write(st.session_state.insight)

    with tasks_tab:
        with st.form("new_task", clear_on_submit=True):
            title = st.text_input("Task")
            due = st.date_input("Due date", value=None)
            if st.form_submit_button("Add task"):
                try:
                    state.add_task(title, due.isoformat() if due else None)
                except ValueError as e:
                    st.error(str(e))

        for task in list(state.tasks):
            c1, c2 = st.columns([6, 1])
            checked = c1.checkbox(
                f"{task.title}" + (f" (due {task.due_date})" if task.due_date else ""),
                value=task.completed,
                key=f"task-{task.id}",
            )
            if checked != task.completed:
                state.toggle_task(task.id)
                st.rerun()
            if c2.button("Delete", key=f"del-{task.id}"):
                state.delete_task(task.id)
                st.rerun()


def teacher_view():
    st.title(f"🎓 {TEACHER.name}")
    st.caption(f"{TEACHER.faculty_id} · {TEACHER.department} · {TEACHER.specialization}")

    if not state.subjects:
        st.warning("No subjects yet. Add one below.")

    subject = None
    if state.subjects:
        subject = st.sidebar.selectbox("Subject", state.subjects, format_func=lambda s: f"{s.code} · {s.name}")
        # Changing subject starts a fresh roll call.
        if st.session_state.roll_subject != subject.id:
            roll_call.reset()
            st.session_state.roll_subject = subject.id

    overview, attendance, communication = st.tabs(["Overview", "Attendance", "Communication"])

    rates = roster_attendance(state.students, subject.code) if subject else {}
    stats = aggregate_statistics(list(rates.values()))

    with overview:
        c1, c2, c3 = st.columns(3)
        c1.metric("Average attendance", f"{stats.mean}%")
        c2.metric("Median attendance", f"{stats.median}%")
        c3.metric("Students at risk", stats.at_risk_count, help="below 75%")

        col1, col2 = st.columns([2, 1])
        with col1:
            st.subheader("Roster")
            roster = pd.DataFrame(
                [
                    {
                        "student_id": s.id,
                        "name": s.name,
                        "roll_number": s.roll_number,
                        "rate": rates.get(s.id, 0),
                        "risk": classify_risk(rates.get(s.id, 0)).value,
                    }
                    for s in state.students
                ]
            )
            st.dataframe(roster, use_container_width=True, hide_index=True)
            describe_columns(roster.columns)

        with col2:
            st.subheader("Distribution")
            buckets = histogram_buckets(rates.values())
            fig = plt.figure()
            plt.bar([b.name for b in buckets], [b.count for b in buckets])
            plt.ylabel("students")
            st.pyplot(fig)
            plt.close(fig)

        st.subheader("Manage")
        c1, c2 = st.columns(2)
        with c1.form("new_student", clear_on_submit=True):
            st.markdown("**Add student**")
            name = st.text_input("Name")
            email = st.text_input("Email")
            roll_number = st.text_input("Roll number")
            department = st.text_input("Department")
            if st.form_submit_button("Save student"):
                try:
                    state.add_student(name, email, roll_number, department)
                    st.rerun()
                except ValueError as e:
                    st.error(str(e))

        with c2.form("new_subject", clear_on_submit=True):
            st.markdown("**Add subject**")
            name = st.text_input("Subject name")
            code = st.text_input("Code")
            total = st.number_input("Total classes", min_value=0, value=20, step=1)
            if st.form_submit_button("Save subject"):
                try:
                    state.add_subject(name, code, int(total))
                    st.rerun()
                except ValueError as e:
                    st.error(str(e))

    with attendance:
        if subject is None:
            st.info("Select a subject to take attendance.")
        for s in state.students if subject else []:
            c1, c2, c3 = st.columns([4, 2, 1])
            c1.write(f"{s.name} ({s.roll_number})")
            c2.write(roll_call.status(s.id))
            if c3.button("Toggle", key=f"mark-{s.id}"):
                roll_call.toggle(s.id)
                st.rerun()
        if roll_call.absentees():
            st.caption(f"{len(roll_call.absentees())} marked absent")

    with communication:
        if subject is not None:
            st.subheader("At-risk alert")
            st.caption(f"Targeted notification for {stats.at_risk_count} students falling behind.")
            message = st.text_area("Message", value=at_risk_message(subject), key=f"risk-msg-{subject.id}")
            if st.button(f"Notify {stats.at_risk_count} students", disabled=stats.at_risk_count == 0):
                state.send_message(f"Attendance Alert: {subject.name}", message)
                st.success(f"Sent to {stats.at_risk_count} students.")

        st.subheader("Parent email")
        student = st.selectbox("Student", state.students, format_func=lambda s: s.name)
        if st.button("Draft email"):
            with st.spinner("Drafting..."):
                st.session_state.email = parent_email(get_generator(), student, state.subjects)
        if st.session_state.get("email"):
            st.text_area("Draft", value=st.session_state.email, height=240)

        st.subheader("Broadcast")
        with st.form("broadcast", clear_on_submit=True):
            title = st.text_input("Title")
            body = st.text_area("Message")
            if st.form_submit_button("Send to all students"):
                try:
                    state.send_message(title, body)
                    st.success("Message broadcasted to all students.")
                except ValueError as e:
                    st.error(str(e))


if role == "Student":
    student_view()
else:
    teacher_view()
