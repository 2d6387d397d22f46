"""Liveness probe."""

from datetime import datetime, timezone

from fastapi import APIRouter

from form_mailer.schemas import HealthResponse

router = APIRouter(tags=["health"])


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=_utc_timestamp())


__all__ = ["router"]
