"""
Rate Limiting Middleware for FastAPI.

Applies a fixed-window limit per client IP and adds rate limit headers
to responses.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from comptoir.di.container import get_container
from comptoir.infrastructure.monitoring import metrics
from comptoir.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

# Endpoints exempt from rate limiting
EXEMPT_PATHS = frozenset(
    {
        "/",
        "/api/health",
        "/api/health/live",
        "/api/health/ready",
        "/metrics",
        "/docs",
        "/redoc",
        "/openapi.json",
    }
)


def client_identifier(request: Request) -> str:
    """
    Client key for rate limiting.

    First hop of X-Forwarded-For when behind a proxy, else the peer IP.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        ip = forwarded_for.split(",")[0].strip()
    else:
        ip = request.client.host if request.client else "unknown"

    return f"ip:{ip}"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Rate limiting middleware.

    Returns 429 with Retry-After once a client exceeds its budget for
    the current window.
    """

    async def dispatch(self, request: Request, call_next):
        if request.url.path in EXEMPT_PATHS:
            return await call_next(request)

        identifier = client_identifier(request)
        decision = await get_container().rate_limiter.check(identifier)
        headers = decision.headers()

        if not decision.allowed:
            metrics.rate_limit_rejections_total.inc()
            logger.warning(f"Rate limit exceeded for {identifier}")

            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={
                    "error": "Too many requests, please try again later",
                    "code": "RATE_LIMIT_EXCEEDED",
                    "retryAfter": decision.retry_after,
                },
                headers=headers,
            )

        response = await call_next(request)

        for key, value in headers.items():
            response.headers[key] = value

        return response
