"""Pydantic schemas used by the form mailer."""

from form_mailer.schemas.submission import (
    ErrorResponse,
    HealthResponse,
    SubmissionResponse,
)

__all__ = ["SubmissionResponse", "HealthResponse", "ErrorResponse"]
