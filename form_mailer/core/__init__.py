"""Core utilities for the form mailer service."""

from form_mailer.core.config import Settings, get_settings, settings
from form_mailer.core.error_handlers import register_exception_handlers

__all__ = ["settings", "get_settings", "Settings", "register_exception_handlers"]
