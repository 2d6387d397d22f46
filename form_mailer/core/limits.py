"""Request body ceiling for upload routes."""

from __future__ import annotations

from typing import Sequence

from fastapi import FastAPI, status
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from form_mailer.core.error_handlers import error_response
from form_mailer.core.exceptions import UploadRejectedError

# Room for the text fields and multipart framing around the file itself.
FORM_OVERHEAD_BYTES = 64 * 1024


class BodySizeLimitMiddleware:
    """Refuse bodies larger than ``max_file_bytes`` plus form overhead with 413.

    A declared ``Content-Length`` over the ceiling is refused before any body
    is read. Bodies without one are counted as they arrive and abandoned as
    soon as they cross the ceiling, before the multipart parser spools the
    rest.
    """

    def __init__(self, app: ASGIApp, max_file_bytes: int, paths: Sequence[str]) -> None:
        self.app = app
        self.max_file_bytes = max_file_bytes
        self.max_body_bytes = max_file_bytes + FORM_OVERHEAD_BYTES
        self.paths = frozenset(paths)

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = error_response(
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            f"File too large. Maximum size is {self.max_file_bytes} bytes",
        )
        await response(scope, receive, send)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"] not in self.paths:
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_bytes:
            await self._reject(scope, receive, send)
            return

        received = 0
        exceeded = False

        async def limited_receive() -> Message:
            nonlocal received, exceeded
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    exceeded = True
                    raise UploadRejectedError(
                        "Request body exceeds upload limit",
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    )
            return message

        async def guarded_send(message: Message) -> None:
            # Whatever the app answers after a truncated body is replaced by the 413.
            if not exceeded:
                await send(message)

        try:
            await self.app(scope, limited_receive, guarded_send)
        except UploadRejectedError:
            if not exceeded:
                raise

        if exceeded:
            await self._reject(scope, receive, send)


def register_body_limit(app: FastAPI, max_file_bytes: int, paths: Sequence[str]) -> None:
    app.add_middleware(BodySizeLimitMiddleware, max_file_bytes=max_file_bytes, paths=paths)


__all__ = ["BodySizeLimitMiddleware", "register_body_limit", "FORM_OVERHEAD_BYTES"]
