"""Response envelope shared by every diary endpoint."""

from typing import Any
from datetime import datetime
from uuid import uuid4

from fastapi import Request
from pydantic import BaseModel, Field

from utils.timezone import now_utc


class APIError(BaseModel):
    """Error details in API response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message, shown to users verbatim")


class APIMeta(BaseModel):
    """Metadata included in every API response."""

    timestamp: datetime = Field(..., description="Response timestamp (UTC)")
    request_id: str = Field(..., description="Matches the X-Request-ID header")


class APIResponse(BaseModel):
    """
    Envelope for all API responses.

    Exactly one of data / error is meaningful, selected by success.
    """

    success: bool
    data: Any | None = None
    error: APIError | None = None
    meta: APIMeta


def _meta(request: Request | None) -> APIMeta:
    request_id = getattr(request.state, "request_id", None) if request is not None else None
    return APIMeta(timestamp=now_utc(), request_id=request_id or str(uuid4()))


def success_response(data: Any, request: Request | None = None) -> dict:
    """Build a JSON-ready success envelope."""
    return APIResponse(
        success=True,
        data=data,
        meta=_meta(request),
    ).model_dump(mode="json")


def error_response(code: str, message: str, request: Request | None = None) -> dict:
    """Build a JSON-ready error envelope."""
    return APIResponse(
        success=False,
        error=APIError(code=code, message=message),
        meta=_meta(request),
    ).model_dump(mode="json")


class ErrorCodes:
    """Machine-readable error codes."""

    # Resource Errors
    NOT_FOUND = "NOT_FOUND"

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Infrastructure
    STORE_ERROR = "STORE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
