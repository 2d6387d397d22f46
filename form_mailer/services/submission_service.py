"""Validate, render and dispatch form submissions."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence

from form_mailer.core.exceptions import DeliveryError, MissingFieldsError
from form_mailer.models import EmailAttachment, EmailContent
from form_mailer.models.submission import CareerSubmission, ContactSubmission
from form_mailer.repository import EmailChannel
from form_mailer.schemas import SubmissionResponse
from form_mailer.services.notification_service import NotificationRenderer
from form_mailer.services.validation import (
    CAREER_OPTIONAL_FIELDS,
    CAREER_REQUIRED_FIELDS,
    CONTACT_OPTIONAL_FIELDS,
    CONTACT_REQUIRED_FIELDS,
    normalize_fields,
    validate_required,
)

logger = logging.getLogger(__name__)


class SubmissionHandler(ABC):
    """Pipeline shared by the forms: validate, render, send once, acknowledge.

    Subclasses declare their field lists and confirmation text and know how
    to turn the checked fields into an ``EmailContent``.
    """

    required_fields: Sequence[str] = ()
    optional_fields: Sequence[str] = ()
    success_message: str = ""
    event_prefix: str = ""

    def __init__(self, *, renderer: NotificationRenderer, channel: EmailChannel):
        self._renderer = renderer
        self._channel = channel

    @abstractmethod
    def _build_email(
        self, fields: Mapping[str, Optional[str]], attachment: Optional[EmailAttachment]
    ) -> EmailContent:
        """Build the typed submission and render its notification."""

    @abstractmethod
    def _log_receipt(self, fields: Mapping[str, Optional[str]]) -> None:
        ...

    def handle(
        self,
        raw_fields: Mapping[str, Any],
        attachment: Optional[EmailAttachment] = None,
    ) -> SubmissionResponse:
        """Process one submission.

        Raises ``MissingFieldsError`` before anything is sent and
        ``DeliveryError`` when the single delivery attempt fails.
        """
        fields = normalize_fields(raw_fields, [*self.required_fields, *self.optional_fields])
        present = {**fields, "resume": attachment}
        result = validate_required(self.required_fields, present)
        if not result.is_valid:
            raise MissingFieldsError(result.missing)

        self._log_receipt(fields)
        email = self._build_email(fields, attachment)

        try:
            delivery_id = self._channel.send_email(email)
        except DeliveryError as exc:
            logger.error(
                "Failed to send: %s",
                exc.reason,
                extra={"event": f"{self.event_prefix}_failed"},
            )
            raise
        except Exception as exc:
            reason = str(exc) or exc.__class__.__name__
            logger.error(
                "Failed to send: %s",
                reason,
                extra={"event": f"{self.event_prefix}_failed"},
            )
            raise DeliveryError(reason) from exc

        logger.info(
            "Email sent successfully, id: %s",
            delivery_id,
            extra={"event": f"{self.event_prefix}_sent", "delivery_id": delivery_id},
        )
        return SubmissionResponse(success=True, message=self.success_message)


class CareerSubmissionHandler(SubmissionHandler):
    required_fields = CAREER_REQUIRED_FIELDS
    optional_fields = CAREER_OPTIONAL_FIELDS
    success_message = "Application submitted successfully."
    event_prefix = "career_application"

    def _build_email(self, fields, attachment):
        submission = CareerSubmission.from_fields(fields, attachment)
        return self._renderer.render_career(submission)

    def _log_receipt(self, fields):
        logger.info(
            "Sending application from '%s' → %s",
            fields["name"],
            self._renderer.inbox,
            extra={"event": f"{self.event_prefix}_received"},
        )


class ContactSubmissionHandler(SubmissionHandler):
    required_fields = CONTACT_REQUIRED_FIELDS
    optional_fields = CONTACT_OPTIONAL_FIELDS
    success_message = "Message sent successfully."
    event_prefix = "contact_inquiry"

    def _build_email(self, fields, attachment):
        submission = ContactSubmission.from_fields(fields)
        return self._renderer.render_contact(submission)

    def _log_receipt(self, fields):
        logger.info(
            "Inquiry from '%s %s' <%s>",
            fields["firstName"],
            fields["lastName"],
            fields["email"],
            extra={"event": f"{self.event_prefix}_received"},
        )


__all__ = ["SubmissionHandler", "CareerSubmissionHandler", "ContactSubmissionHandler"]
