"""Decoding and screening of the resume upload."""

from __future__ import annotations

import logging

from fastapi import UploadFile, status

from form_mailer.core.exceptions import UploadRejectedError
from form_mailer.models import EmailAttachment

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}
CHUNK_SIZE = 64 * 1024


async def read_resume(upload: UploadFile, max_bytes: int) -> EmailAttachment:
    """Read ``upload`` into an attachment, refusing bad types and oversized files.

    The request body itself is capped by ``BodySizeLimitMiddleware``; this
    enforces the exact per-file limit on what the parser kept.
    """
    if upload.content_type not in ALLOWED_CONTENT_TYPES:
        logger.info(
            "Rejected upload %r with content type %s",
            upload.filename,
            upload.content_type,
        )
        raise UploadRejectedError(
            "Only PDF and Word documents are allowed",
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        )

    if not upload.filename:
        raise UploadRejectedError("Uploaded file must have a filename")

    buffer = bytearray()
    while True:
        chunk = await upload.read(CHUNK_SIZE)
        if not chunk:
            break
        buffer.extend(chunk)
        if len(buffer) > max_bytes:
            logger.info("Rejected upload %r exceeding %s bytes", upload.filename, max_bytes)
            raise UploadRejectedError(
                f"File too large. Maximum size is {max_bytes} bytes",
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            )

    return EmailAttachment(
        filename=upload.filename,
        content_type=upload.content_type,
        data=bytes(buffer),
    )


__all__ = ["read_resume", "ALLOWED_CONTENT_TYPES"]
