"""
HTTP middleware: security headers and access logging.
"""

import logging
import time

from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .logging_config import ACCESS_LOGGER


access_logger = logging.getLogger(ACCESS_LOGGER)
logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


def generic_error_response() -> PlainTextResponse:
    """The plain-text 500 returned for any unhandled error."""
    return PlainTextResponse(GENERIC_ERROR_MESSAGE, status_code=500)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (sniffing, framing, referrer policy)."""

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("X-DNS-Prefetch-Control", "off")
        response.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request with its status and duration.

    Unhandled errors from the routes are logged with their traceback and
    turned into the generic 500 here, so the failure still gets an access
    line and passes back through the outer middleware.
    """

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = generic_error_response()
        elapsed_ms = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "-"
        access_logger.info(
            '%s "%s %s" %s %.1fms',
            client,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
