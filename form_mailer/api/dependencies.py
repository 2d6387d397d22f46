"""FastAPI dependencies resolving per-application collaborators."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import Request

from form_mailer.core.config import Settings
from form_mailer.core.exceptions import InvalidPayloadError
from form_mailer.services import CareerSubmissionHandler, ContactSubmissionHandler

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_career_handler(request: Request) -> CareerSubmissionHandler:
    return request.app.state.career_handler


def get_contact_handler(request: Request) -> ContactSubmissionHandler:
    return request.app.state.contact_handler


async def read_submitted_fields(request: Request) -> Dict[str, Any]:
    """Return the request body as a flat mapping, accepting JSON or form encodings."""
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as exc:
            raise InvalidPayloadError("Invalid JSON body") from exc
        if not isinstance(body, dict):
            raise InvalidPayloadError("JSON body must be an object")
        return body

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    return {}


__all__ = [
    "get_app_settings",
    "get_career_handler",
    "get_contact_handler",
    "read_submitted_fields",
]
