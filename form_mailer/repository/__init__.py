"""Email delivery channels."""

from __future__ import annotations

from form_mailer.core.config import Settings
from form_mailer.repository.base import EmailChannel
from form_mailer.repository.resend_repository import ResendEmailRepository
from form_mailer.repository.smtp_repository import SmtpEmailRepository

TRANSPORTS = {
    "resend": ResendEmailRepository,
    "smtp": SmtpEmailRepository,
}


def build_email_channel(config: Settings) -> EmailChannel:
    """Return the channel selected by ``EMAIL_TRANSPORT``."""
    try:
        transport = TRANSPORTS[config.EMAIL_TRANSPORT]
    except KeyError as exc:
        raise ValueError(
            f"Unsupported EMAIL_TRANSPORT '{config.EMAIL_TRANSPORT}'; "
            f"expected one of {', '.join(sorted(TRANSPORTS))}"
        ) from exc
    return transport(config)


__all__ = [
    "EmailChannel",
    "ResendEmailRepository",
    "SmtpEmailRepository",
    "build_email_channel",
]
