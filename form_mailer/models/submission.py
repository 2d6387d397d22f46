"""Typed form submissions built from validated request fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from form_mailer.models.email import EmailAttachment

NOT_PROVIDED = "Not provided"
NOT_SPECIFIED = "Not specified"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a submission's required fields."""

    missing: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.missing


@dataclass(frozen=True)
class CareerSubmission:
    name: str
    email: str
    mobile: str
    job_title: str
    experience: str
    current_ctc: str
    expected_ctc: str
    resume: EmailAttachment
    skills: Optional[str] = None

    @classmethod
    def from_fields(
        cls, fields: Mapping[str, str], resume: EmailAttachment
    ) -> "CareerSubmission":
        return cls(
            name=fields["name"],
            email=fields["email"],
            mobile=fields["mobile"],
            job_title=fields["job_title"],
            experience=fields["experience"],
            current_ctc=fields["current_ctc"],
            expected_ctc=fields["expected_ctc"],
            skills=fields.get("skills") or None,
            resume=resume,
        )

    @property
    def skills_display(self) -> str:
        return self.skills or NOT_PROVIDED


@dataclass(frozen=True)
class ContactSubmission:
    first_name: str
    last_name: str
    email: str
    message: str
    phone: Optional[str] = None
    service: Optional[str] = None

    @classmethod
    def from_fields(cls, fields: Mapping[str, str]) -> "ContactSubmission":
        return cls(
            first_name=fields["firstName"],
            last_name=fields["lastName"],
            email=fields["email"],
            message=fields["message"],
            phone=fields.get("phone") or None,
            service=fields.get("service") or None,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def phone_display(self) -> str:
        return self.phone or NOT_PROVIDED

    @property
    def service_display(self) -> str:
        return self.service or NOT_SPECIFIED


__all__ = [
    "CareerSubmission",
    "ContactSubmission",
    "ValidationResult",
    "NOT_PROVIDED",
    "NOT_SPECIFIED",
]
