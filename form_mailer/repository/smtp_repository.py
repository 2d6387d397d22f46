"""Repository responsible for sending emails through SMTP."""

from __future__ import annotations

import smtplib
from email.message import EmailMessage
from email.utils import make_msgid, parseaddr

from form_mailer.core.config import Settings, settings
from form_mailer.core.exceptions import DeliveryError
from form_mailer.models import EmailContent
from form_mailer.repository.base import EmailChannel


class SmtpEmailRepository(EmailChannel):
    """Handles the low level communication with the SMTP server."""

    def __init__(self, config: Settings | None = None):
        self._settings = config or settings

    def _build_message(self, email: EmailContent) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = email.subject
        message["From"] = email.sender
        message["To"] = ", ".join(email.recipients)

        if email.reply_to:
            message["Reply-To"] = email.reply_to

        domain = parseaddr(email.sender)[1].rpartition("@")[2] or None
        message["Message-ID"] = make_msgid(domain=domain)

        text_body = email.text_body or "This message requires an HTML capable email client."
        message.set_content(text_body)
        message.add_alternative(email.html_body, subtype="html")

        for attachment in email.attachments:
            maintype, subtype = attachment.content_type.split("/", 1)
            message.add_attachment(
                attachment.data,
                maintype=maintype,
                subtype=subtype,
                filename=attachment.filename,
            )

        return message

    def _login(self, client: smtplib.SMTP) -> None:
        username = self._settings.SMTP_USERNAME
        password = self._settings.SMTP_PASSWORD
        if username and password:
            client.login(username, password)

    def send_email(self, email: EmailContent) -> str:
        if not self._settings.SMTP_HOST:
            raise DeliveryError("SMTP_HOST must be configured to send emails")

        message = self._build_message(email)

        try:
            if self._settings.SMTP_USE_SSL:
                with smtplib.SMTP_SSL(
                    self._settings.SMTP_HOST,
                    self._settings.SMTP_PORT,
                    timeout=self._settings.SMTP_TIMEOUT,
                ) as client:
                    self._login(client)
                    client.send_message(message)
            else:
                with smtplib.SMTP(
                    self._settings.SMTP_HOST,
                    self._settings.SMTP_PORT,
                    timeout=self._settings.SMTP_TIMEOUT,
                ) as client:
                    if self._settings.SMTP_USE_TLS:
                        client.starttls()
                    self._login(client)
                    client.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise DeliveryError(str(exc) or exc.__class__.__name__) from exc

        return message["Message-ID"]


__all__ = ["SmtpEmailRepository"]
