from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from form_mailer.core.config import Settings
from form_mailer.main import create_app
from form_mailer.repository import EmailChannel


class StubChannel(EmailChannel):
    """Records every message and answers from a scripted list of outcomes."""

    def __init__(self, outcomes: Optional[List[object]] = None):
        self.sent = []
        self._outcomes = list(outcomes or [])

    def send_email(self, email):
        self.sent.append(email)
        outcome = self._outcomes.pop(0) if self._outcomes else "msg_stub"
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def make_settings(**overrides) -> Settings:
    values = {
        "HR_INBOX": "hr@test.example",
        "CAREER_FROM_EMAIL": "Careers <jobs@test.example>",
        "CONTACT_FROM_EMAIL": "Website <web@test.example>",
        "ALLOWED_ORIGINS": None,
        "MAX_FILE_SIZE_BYTES": 1024,
        "EMAIL_TRANSPORT": "resend",
        "RESEND_API_KEY": "re_test",
        "RESEND_API_URL": "https://resend.test",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def test_settings() -> Settings:
    return make_settings()


@pytest.fixture()
def channel() -> StubChannel:
    return StubChannel()


@pytest.fixture()
def client(test_settings, channel):
    app = create_app(test_settings, channel=channel)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def career_fields():
    return {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "mobile": "+91 98765 43210",
        "job_title": "Backend Engineer",
        "experience": "4 years",
        "current_ctc": "12 LPA",
        "expected_ctc": "16 LPA",
        "skills": "Python, FastAPI",
    }


@pytest.fixture()
def contact_fields():
    return {
        "firstName": "Lena",
        "lastName": "Ortiz",
        "email": "lena@example.com",
        "phone": "555-0100",
        "service": "Cloud Migration",
        "message": "Hello,\n  we need help moving to the cloud.",
    }


@pytest.fixture()
def pdf_resume():
    return {"resume": ("resume.pdf", b"%PDF-1.4\n%", "application/pdf")}
