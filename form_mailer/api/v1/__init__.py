from form_mailer.api.v1.form_routes import router as form_router
from form_mailer.api.v1.health_routes import router as health_router

__all__ = ["form_router", "health_router"]
