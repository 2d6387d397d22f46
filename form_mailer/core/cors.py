"""Origin allow-listing for browser callers."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from fastapi import FastAPI, status
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

from form_mailer.core.error_handlers import error_response

# Pages opened from file:// send the literal origin "null".
NULL_ORIGIN = "null"


def is_origin_allowed(origin: Optional[str], allowed_origins: Optional[Sequence[str]]) -> bool:
    if not origin or origin == NULL_ORIGIN:
        return True
    if allowed_origins is None:
        return True
    return origin in allowed_origins


class AllowListCORSMiddleware(CORSMiddleware):
    """``CORSMiddleware`` deciding origins with :func:`is_origin_allowed`.

    Requests from other origins are refused with 403 before reaching a route,
    simple requests included.
    """

    def __init__(
        self,
        app: ASGIApp,
        allowed_origins: Optional[Sequence[str]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(app, **kwargs)
        self.allowed_origins = tuple(allowed_origins) if allowed_origins is not None else None

    def is_allowed_origin(self, origin: str) -> bool:
        return is_origin_allowed(origin, self.allowed_origins)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            origin = Headers(scope=scope).get("origin")
            if origin is not None and not self.is_allowed_origin(origin=origin):
                response = error_response(
                    status.HTTP_403_FORBIDDEN, f"CORS: origin '{origin}' not allowed"
                )
                await response(scope, receive, send)
                return
        await super().__call__(scope, receive, send)


def cors_options(allowed_origins: Optional[Sequence[str]]) -> Dict[str, Any]:
    """Keyword arguments for :class:`AllowListCORSMiddleware`."""
    return {
        "allowed_origins": allowed_origins,
        "allow_origins": ["*"] if allowed_origins is None else list(allowed_origins),
        "allow_credentials": True,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["*"],
    }


def register_cors(app: FastAPI, allowed_origins: Optional[Sequence[str]]) -> None:
    app.add_middleware(AllowListCORSMiddleware, **cors_options(allowed_origins))


__all__ = [
    "AllowListCORSMiddleware",
    "is_origin_allowed",
    "cors_options",
    "register_cors",
    "NULL_ORIGIN",
]
