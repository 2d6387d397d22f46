"""Response bodies returned by the API."""

from pydantic import BaseModel


class SubmissionResponse(BaseModel):
    success: bool = True
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ErrorResponse(BaseModel):
    error: str


__all__ = ["SubmissionResponse", "HealthResponse", "ErrorResponse"]
