import pytest
from fastapi.testclient import TestClient

from form_mailer.core.exceptions import DeliveryError
from form_mailer.core.limits import FORM_OVERHEAD_BYTES
from form_mailer.main import create_app
from form_mailer.models import EmailAttachment
from form_mailer.services import CareerSubmissionHandler, NotificationRenderer
from form_mailer.services.validation import CAREER_REQUIRED_FIELDS

from tests.conftest import StubChannel, make_settings


def test_valid_application_is_sent(client, channel, career_fields, pdf_resume):
    response = client.post("/api/career", data=career_fields, files=pdf_resume)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Application submitted successfully."}
    assert len(channel.sent) == 1
    email = channel.sent[0]
    assert email.subject == "New Job Application: Backend Engineer — Asha Rao"
    assert list(email.recipients) == ["hr@test.example"]
    attachment = email.attachments[0]
    assert attachment.filename == "resume.pdf"
    assert attachment.content_type == "application/pdf"
    assert attachment.data == b"%PDF-1.4\n%"


@pytest.mark.parametrize("field", [f for f in CAREER_REQUIRED_FIELDS if f != "resume"])
def test_single_missing_field_returns_400(client, channel, career_fields, pdf_resume, field):
    career_fields[field] = ""

    response = client.post("/api/career", data=career_fields, files=pdf_resume)

    assert response.status_code == 400
    assert response.json() == {"error": f"Missing required fields: {field}"}
    assert channel.sent == []


def test_missing_resume_returns_400(client, channel, career_fields):
    response = client.post("/api/career", data=career_fields)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: resume"}
    assert channel.sent == []


def test_empty_submission_lists_every_required_field(client, channel):
    response = client.post("/api/career", data={})

    assert response.status_code == 400
    assert response.json() == {
        "error": "Missing required fields: name, email, mobile, job_title, "
        "experience, current_ctc, expected_ctc, resume"
    }


def test_disallowed_mime_type_rejected_before_validation(client, channel):
    response = client.post(
        "/api/career",
        data={},
        files={"resume": ("photo.png", b"\x89PNG", "image/png")},
    )

    assert response.status_code == 415
    assert response.json() == {"error": "Only PDF and Word documents are allowed"}
    assert channel.sent == []


def test_oversized_upload_rejected(client, channel, career_fields):
    response = client.post(
        "/api/career",
        data=career_fields,
        files={"resume": ("big.pdf", b"a" * 1025, "application/pdf")},
    )

    assert response.status_code == 413
    assert "1024" in response.json()["error"]
    assert channel.sent == []


def test_upload_at_exact_limit_is_accepted(client, channel, career_fields):
    docx = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    response = client.post(
        "/api/career",
        data=career_fields,
        files={"resume": ("cv.docx", b"a" * 1024, docx)},
    )

    assert response.status_code == 200
    assert channel.sent[0].attachments[0].size_bytes == 1024


def test_missing_skills_uses_fallback(client, channel, career_fields, pdf_resume):
    del career_fields["skills"]

    response = client.post("/api/career", data=career_fields, files=pdf_resume)

    assert response.status_code == 200
    assert "Not provided" in channel.sent[0].html_body


def test_delivery_failure_returns_500(career_fields, pdf_resume):
    channel = StubChannel([DeliveryError("domain is not verified")])
    app = create_app(make_settings(), channel=channel)

    with TestClient(app) as client:
        response = client.post("/api/career", data=career_fields, files=pdf_resume)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to send email: domain is not verified"}


def test_declared_oversized_body_is_refused_before_parsing(client, channel):
    response = client.post(
        "/api/career",
        content=b"--x--\r\n",
        headers={
            "Content-Type": "multipart/form-data; boundary=x",
            "Content-Length": str(1024 * 1024 * 1024),
        },
    )

    assert response.status_code == 413
    assert response.json() == {"error": "File too large. Maximum size is 1024 bytes"}
    assert channel.sent == []


def test_streamed_oversized_body_is_refused(client, channel):
    def body():
        yield b"--x\r\nContent-Disposition: form-data; name=\"resume\"; filename=\"cv.pdf\"\r\n"
        yield b"Content-Type: application/pdf\r\n\r\n"
        yield b"a" * (1024 + FORM_OVERHEAD_BYTES + 1)
        yield b"\r\n--x--\r\n"

    response = client.post(
        "/api/career",
        content=body(),
        headers={"Content-Type": "multipart/form-data; boundary=x"},
    )

    assert response.status_code == 413
    assert channel.sent == []


def test_receipt_is_logged_before_rendering(career_fields, caplog):
    class BrokenRenderer(NotificationRenderer):
        def render_career(self, submission):
            raise RuntimeError("template exploded")

    handler = CareerSubmissionHandler(
        renderer=BrokenRenderer(make_settings()), channel=StubChannel()
    )
    resume = EmailAttachment(filename="cv.pdf", content_type="application/pdf", data=b"%PDF")
    caplog.set_level("INFO", logger="form_mailer.services.submission_service")

    with pytest.raises(RuntimeError):
        handler.handle(career_fields, resume)

    assert "Sending application from 'Asha Rao' → hr@test.example" in caplog.text
