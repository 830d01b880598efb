"""Request-scoped middleware for API requests."""

import logging
import time
from uuid import UUID, uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


def _caller_request_id(request: Request) -> str | None:
    """Incoming X-Request-ID if it is a well-formed UUID, else None."""
    value = request.headers.get("X-Request-ID", "")
    if not value or len(value) > 36:
        return None
    try:
        return str(UUID(value))
    except ValueError:
        return None


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags each request with an ID, echoes it back, and logs the outcome."""

    async def dispatch(self, request: Request, call_next):
        request_id = _caller_request_id(request) or str(uuid4())
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers["X-Request-ID"] = request_id
        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f} ms) [{request_id}]"
        )
        return response
