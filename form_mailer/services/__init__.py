"""Service layer for the form mailer."""

from form_mailer.services.notification_service import NotificationRenderer
from form_mailer.services.submission_service import (
    CareerSubmissionHandler,
    ContactSubmissionHandler,
    SubmissionHandler,
)
from form_mailer.services.upload import read_resume

__all__ = [
    "NotificationRenderer",
    "SubmissionHandler",
    "CareerSubmissionHandler",
    "ContactSubmissionHandler",
    "read_resume",
]
