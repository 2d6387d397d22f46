"""Rendering of form submissions into notification emails."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from form_mailer.core.config import Settings
from form_mailer.models import CareerSubmission, ContactSubmission, EmailContent


class NotificationRenderer:
    """Turn validated submissions into ready-to-send ``EmailContent``."""

    def __init__(self, config: Settings, *, templates_path: Optional[Path] = None):
        self._settings = config
        self._templates_path = templates_path or Path(__file__).resolve().parent.parent / "templates"
        self._environment = Environment(
            loader=FileSystemLoader(self._templates_path),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    @property
    def inbox(self) -> str:
        return self._settings.HR_INBOX

    def _render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        try:
            template = self._environment.get_template(template_name)
        except TemplateNotFound as exc:  # pragma: no cover - configuration error
            raise RuntimeError(f"Email template '{template_name}' not found") from exc
        return template.render(**context)

    @staticmethod
    def _career_rows(submission: CareerSubmission) -> List[Tuple[str, str]]:
        return [
            ("Name", submission.name),
            ("Email", submission.email),
            ("Mobile", submission.mobile),
            ("Job Title", submission.job_title),
            ("Skills", submission.skills_display),
            ("Experience", submission.experience),
            ("Current CTC", submission.current_ctc),
            ("Expected CTC", submission.expected_ctc),
        ]

    def render_career(self, submission: CareerSubmission) -> EmailContent:
        context = {"submission": submission, "rows": self._career_rows(submission)}
        return EmailContent(
            sender=self._settings.CAREER_FROM_EMAIL,
            recipients=(self._settings.HR_INBOX,),
            subject=f"New Job Application: {submission.job_title} — {submission.name}",
            html_body=self._render_template("career_application.html", context),
            text_body=self._render_template("career_application.txt", context),
            attachments=(submission.resume,),
        )

    def render_contact(self, submission: ContactSubmission) -> EmailContent:
        context = {"submission": submission}
        return EmailContent(
            sender=self._settings.CONTACT_FROM_EMAIL,
            recipients=(self._settings.HR_INBOX,),
            reply_to=submission.email,
            subject=f"New Inquiry from {submission.full_name}",
            html_body=self._render_template("contact_inquiry.html", context),
            text_body=self._render_template("contact_inquiry.txt", context),
        )


__all__ = ["NotificationRenderer"]
