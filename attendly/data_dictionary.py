"""
attendly/data_dictionary.py

Column -> description mapping shown under the tables in the Streamlit UI.
"""

DATA_DICTIONARY = {
    "code": "Subject code (e.g., CS-302).",
    "name": "Subject name.",
    "attended": "Classes attended so far.",
    "total": "Classes held so far.",
    "missed": "Classes held but not attended (total - attended).",
    "percentage": "Attendance percentage, rounded to the nearest whole number (0 when no classes yet).",
    "risk": "At Risk below 75%, otherwise On Track.",
    "recovery": "Consecutive classes to attend to get back to 75% (each one also adds to the total).",
    "student_id": "Unique identifier for the student.",
    "roll_number": "Institution roll number.",
    "rate": "Student's attendance percentage in the selected subject.",
    "mark": "Today's roll call (unmarked students count as present).",
}
