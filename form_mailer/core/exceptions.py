"""Exceptions raised while processing form submissions."""

from __future__ import annotations

from typing import Sequence


class FormMailerError(Exception):
    """Base class for errors that map onto a JSON error response."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFieldsError(FormMailerError):
    """One or more required fields were absent or blank."""

    status_code = 400

    def __init__(self, missing: Sequence[str]):
        self.missing = tuple(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


class InvalidPayloadError(FormMailerError):
    status_code = 400


class UploadRejectedError(FormMailerError):
    """The uploaded file was refused before the submission was validated."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class DeliveryError(FormMailerError):
    """The email channel could not deliver the notification."""

    status_code = 500

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to send email: {reason}")


__all__ = [
    "FormMailerError",
    "MissingFieldsError",
    "InvalidPayloadError",
    "UploadRejectedError",
    "DeliveryError",
]
