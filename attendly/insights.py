"""
attendly/insights.py

Purpose
-------
Free-text summaries from a generative-language service:
  - a short counsellor-style analysis of a student's attendance
  - a draft email to the parents of a student with low attendance

The dashboards only ever see a string. A SummaryGenerator makes a single
attempt and never raises: network errors, quota errors and malformed responses
all come back as a fixed fallback message, so the UI needs no error branches
for these panels.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol

from openai import OpenAI

from attendly.alerts import is_low
from attendly.analytics import RISK_THRESHOLD
from attendly.config import Settings
from attendly.models import Student, Subject


logger = logging.getLogger(__name__)

UNAVAILABLE = "Service temporarily unavailable."
NO_INSIGHTS = "Unable to retrieve insights at this time."
NO_EMAIL = "Error generating email draft."
GOOD_STANDING = "No alerts necessary. Student is in good standing."


class SummaryGenerator(Protocol):
    def summarize(self, prompt: str) -> str:
        """Return generated text ("" if the service returned nothing). Must not raise."""
        ...


class OfflineSummaryGenerator:
    """Used when no API key is configured."""

    def summarize(self, prompt: str) -> str:
        return UNAVAILABLE


class OpenAISummaryGenerator:
    """
    SummaryGenerator backed by the OpenAI chat completions API.

    Parameters
    ----------
    api_key : str
        OpenAI API key.
    model : str
        Chat model name.
    client : OpenAI, optional
        Pre-built client (tests pass a fake here).
    """

    def __init__(self, api_key: str, model: str, client: Optional[OpenAI] = None):
        self.client = client or OpenAI(api_key=api_key)
        self.model = model

    def summarize(self, prompt: str) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.4,
            )
            return (response.choices[0].message.content or "").strip()
        except Exception:
            logger.exception("Summary generation failed")
            return UNAVAILABLE


def build_generator(settings: Settings) -> SummaryGenerator:
    if not settings.openai_api_key:
        logger.info("OPENAI_API_KEY not set; AI summaries disabled.")
        return OfflineSummaryGenerator()
    return OpenAISummaryGenerator(settings.openai_api_key, settings.model)


def attendance_prompt(subjects: Iterable[Subject], student_name: str) -> str:
    data = "\n".join(f"{s.name}: {s.attended_classes}/{s.total_classes} attended" for s in subjects)
    return (
        "You are a helpful academic counselor at a university.\n"
        f"Student Name: {student_name}\n"
        "Attendance Data:\n"
        f"{data}\n\n"
        "Provide a concise, professional analysis of this attendance.\n"
        f"If attendance is low (<{RISK_THRESHOLD}%) in any subject, suggest specific improvement steps politely.\n"
        "If attendance is high, encourage them to keep it up.\n"
        "Keep the tone supportive and realistic. Max 50 words."
    )


def parent_email_prompt(student: Student, low_subjects: Iterable[Subject]) -> str:
    names = ", ".join(s.name for s in low_subjects)
    return (
        f"Draft a polite, professional email to the parents of {student.name}.\n"
        f"The student has low attendance in: {names}.\n"
        "The tone should be concerned but helpful, inviting the parents to discuss "
        "how we can support the student.\n"
        'Sign off as "Academic Affairs Office".\n'
        "Keep it plain text."
    )


def attendance_insights(generator: SummaryGenerator, subjects: Iterable[Subject], student_name: str) -> str:
    text = generator.summarize(attendance_prompt(subjects, student_name))
    return text or NO_INSIGHTS


def parent_email(generator: SummaryGenerator, student: Student, subjects: Iterable[Subject]) -> str:
    low = [s for s in subjects if is_low(s)]
    if not low:
        return GOOD_STANDING
    text = generator.summarize(parent_email_prompt(student, low))
    return text or NO_EMAIL
