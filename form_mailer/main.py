"""Entry point for the form mailer service."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from form_mailer.api import form_router, health_router
from form_mailer.core.config import Settings, get_settings
from form_mailer.core.cors import register_cors
from form_mailer.core.error_handlers import register_exception_handlers
from form_mailer.core.limits import register_body_limit
from form_mailer.repository import EmailChannel, build_email_channel
from form_mailer.services import (
    CareerSubmissionHandler,
    ContactSubmissionHandler,
    NotificationRenderer,
)


def create_app(
    config: Optional[Settings] = None,
    channel: Optional[EmailChannel] = None,
) -> FastAPI:
    """Build the application around ``config`` and an email ``channel``.

    When no channel is given, one is chosen from ``EMAIL_TRANSPORT``.
    """
    config = config or get_settings()
    channel = channel or build_email_channel(config)
    renderer = NotificationRenderer(config)

    app = FastAPI(title=config.PROJECT_NAME)
    app.state.settings = config
    app.state.career_handler = CareerSubmissionHandler(renderer=renderer, channel=channel)
    app.state.contact_handler = ContactSubmissionHandler(renderer=renderer, channel=channel)

    register_body_limit(app, config.MAX_FILE_SIZE_BYTES, paths=["/api/career"])
    register_cors(app, config.ALLOWED_ORIGINS)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(form_router, prefix="/api")
    return app


app = create_app()

__all__ = ["app", "create_app"]
