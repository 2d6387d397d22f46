"""Abstract interface shared by the email delivery channels."""

from __future__ import annotations

from abc import ABC, abstractmethod

from form_mailer.models import EmailContent


class EmailChannel(ABC):
    """Transport capable of delivering a rendered notification."""

    @abstractmethod
    def send_email(self, email: EmailContent) -> str:
        """Deliver ``email`` and return the provider's delivery id.

        Raises ``DeliveryError`` when the message could not be handed over.
        """


__all__ = ["EmailChannel"]
