"""Required-field checks shared by both forms."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from form_mailer.models import ValidationResult

CAREER_REQUIRED_FIELDS = (
    "name",
    "email",
    "mobile",
    "job_title",
    "experience",
    "current_ctc",
    "expected_ctc",
    "resume",
)
CAREER_OPTIONAL_FIELDS = ("skills",)

CONTACT_REQUIRED_FIELDS = ("firstName", "lastName", "email", "message")
CONTACT_OPTIONAL_FIELDS = ("phone", "service")


def normalize_fields(
    raw: Mapping[str, Any], names: Sequence[str]
) -> Dict[str, Optional[str]]:
    """Pick ``names`` out of ``raw`` as stripped strings, blanks becoming ``None``."""
    fields: Dict[str, Optional[str]] = {}
    for name in names:
        value = raw.get(name)
        # JSON false, 0 and empty containers are as absent as null.
        if value is None or (not isinstance(value, str) and not value):
            fields[name] = None
            continue
        text = value if isinstance(value, str) else str(value)
        fields[name] = text.strip() or None
    return fields


def validate_required(
    required: Sequence[str], present: Mapping[str, Any]
) -> ValidationResult:
    """Report every entry of ``required`` with no usable value in ``present``.

    Missing fields keep the order of ``required`` regardless of how the
    submitted fields were ordered.
    """
    missing = []
    for name in required:
        value = present.get(name)
        if isinstance(value, str):
            value = value.strip()
        if not value:
            missing.append(name)
    return ValidationResult(missing=tuple(missing))


__all__ = [
    "CAREER_REQUIRED_FIELDS",
    "CAREER_OPTIONAL_FIELDS",
    "CONTACT_REQUIRED_FIELDS",
    "CONTACT_OPTIONAL_FIELDS",
    "normalize_fields",
    "validate_required",
]
