"""Domain models for the form mailer service."""

from form_mailer.models.email import EmailAttachment, EmailContent
from form_mailer.models.submission import (
    CareerSubmission,
    ContactSubmission,
    ValidationResult,
)

__all__ = [
    "EmailContent",
    "EmailAttachment",
    "CareerSubmission",
    "ContactSubmission",
    "ValidationResult",
]
