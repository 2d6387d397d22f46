"""Configuration for the form mailer service."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CAREER_SENDER = "Careers <onboarding@resend.dev>"
DEFAULT_CONTACT_SENDER = "Website <onboarding@resend.dev>"


def _to_bool(value: str, *, default: bool = False) -> bool:
    lowered = value.strip().lower()
    if not lowered:
        return default
    return lowered in {"true", "1", "yes", "y", "on"}


def _to_origins(value: Optional[str]) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Form Mailer")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3001"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    HR_INBOX: str = os.getenv("HR_INBOX", "hr@example.com").strip()
    # A single FROM_EMAIL overrides the per-form defaults.
    CAREER_FROM_EMAIL: str = os.getenv("FROM_EMAIL") or DEFAULT_CAREER_SENDER
    CONTACT_FROM_EMAIL: str = os.getenv("FROM_EMAIL") or DEFAULT_CONTACT_SENDER

    # None means every origin is accepted.
    ALLOWED_ORIGINS: Optional[Tuple[str, ...]] = _to_origins(os.getenv("ALLOWED_ORIGINS"))
    MAX_FILE_SIZE_BYTES: int = int(os.getenv("MAX_FILE_SIZE_BYTES", "5242880"))

    EMAIL_TRANSPORT: str = os.getenv("EMAIL_TRANSPORT", "resend").strip().lower()

    RESEND_API_KEY: str = os.getenv("RESEND_API_KEY", "")
    RESEND_API_URL: str = os.getenv("RESEND_API_URL", "https://api.resend.com")
    RESEND_TIMEOUT: float = float(os.getenv("RESEND_TIMEOUT", "10"))

    SMTP_HOST: str = os.getenv("SMTP_HOST", "")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", "587"))
    SMTP_USERNAME: Optional[str] = os.getenv("SMTP_USERNAME")
    SMTP_PASSWORD: Optional[str] = os.getenv("SMTP_PASSWORD")
    SMTP_USE_TLS: bool = _to_bool(os.getenv("SMTP_USE_TLS", "true"), default=True)
    SMTP_USE_SSL: bool = _to_bool(os.getenv("SMTP_USE_SSL", "false"), default=False)
    SMTP_TIMEOUT: float = float(os.getenv("SMTP_TIMEOUT", "10"))


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

__all__ = ["settings", "get_settings", "Settings"]
