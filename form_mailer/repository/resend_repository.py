"""Repository delivering emails through the Resend HTTP API."""

from __future__ import annotations

import base64
import logging
from typing import Any, Dict, Optional

import httpx

from form_mailer.core.config import Settings, settings
from form_mailer.core.exceptions import DeliveryError
from form_mailer.models import EmailContent
from form_mailer.repository.base import EmailChannel

logger = logging.getLogger(__name__)


class ResendEmailRepository(EmailChannel):
    """Small wrapper around the ``POST /emails`` endpoint."""

    def __init__(
        self,
        config: Settings | None = None,
        *,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._settings = config or settings
        self._base_url = self._settings.RESEND_API_URL.rstrip("/")
        self._client = client

    @staticmethod
    def _build_payload(email: EmailContent) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "from": email.sender,
            "to": list(email.recipients),
            "subject": email.subject,
            "html": email.html_body,
        }
        if email.text_body:
            payload["text"] = email.text_body
        if email.reply_to:
            payload["reply_to"] = email.reply_to
        if email.attachments:
            payload["attachments"] = [
                {
                    "filename": attachment.filename,
                    "content": base64.b64encode(attachment.data).decode("ascii"),
                }
                for attachment in email.attachments
            ]
        return payload

    @staticmethod
    def _error_reason(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"HTTP {response.status_code}"

    def _post(self, url: str, **kwargs: Any) -> httpx.Response:
        if self._client is not None:
            return self._client.post(url, **kwargs)
        return httpx.post(url, timeout=self._settings.RESEND_TIMEOUT, **kwargs)

    def send_email(self, email: EmailContent) -> str:
        api_key = self._settings.RESEND_API_KEY
        if not api_key:
            raise DeliveryError("RESEND_API_KEY must be configured to send emails")

        url = f"{self._base_url}/emails"

        try:
            response = self._post(
                url,
                json=self._build_payload(email),
                headers={"Authorization": f"Bearer {api_key}"},
            )
        except httpx.RequestError as exc:
            raise DeliveryError(str(exc) or exc.__class__.__name__) from exc

        if response.is_error:
            reason = self._error_reason(response)
            logger.warning(
                "Resend returned HTTP %s: %s", response.status_code, reason
            )
            raise DeliveryError(reason)

        try:
            delivery_id = response.json()["id"]
        except (ValueError, KeyError, TypeError) as exc:
            raise DeliveryError("Unexpected response from Resend") from exc
        return str(delivery_id)


__all__ = ["ResendEmailRepository"]
