"""
HTTP middleware: per-client rate limiting and request logging.
"""
import logging
import time

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.core.exceptions import RateLimitExceededError
from app.core.rate_limit import RateLimiter

logger = logging.getLogger(__name__)


def get_client_id(request: Request) -> str:
    """Rate-limit key: the connection's source address."""
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests over the per-client limit with 429 before any handler runs."""

    def __init__(self, app, limiter: RateLimiter):
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        decision = self.limiter.admit(get_client_id(request))
        if not decision.allowed:
            error = RateLimitExceededError(decision.retry_after)
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"error": error.message, "retry_after": error.retry_after},
                headers={"Retry-After": str(error.retry_after)}
            )
        return await call_next(request)


def format_duration(seconds: float) -> str:
    if seconds < 0.001:
        return f"{seconds * 1_000_000:.2f}µs"
    if seconds < 1:
        return f"{seconds * 1000:.2f}ms"
    return f"{seconds:.2f}s"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its status and duration, at a level matching the status."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration = format_duration(time.perf_counter() - start)

        message = (
            f"{request.method} {request.url.path} from {get_client_id(request)} "
            f"-> {response.status_code} in {duration}"
        )
        if response.status_code >= 500:
            logger.error(f"Request ended with error: {message}")
        elif response.status_code >= 400:
            logger.warning(f"Request ended with warning: {message}")
        else:
            logger.info(f"Request ended successfully: {message}")
        return response
