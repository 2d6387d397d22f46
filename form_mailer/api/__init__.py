"""HTTP routers exposed by the form mailer."""

from form_mailer.api.v1 import form_router, health_router

__all__ = ["form_router", "health_router"]
