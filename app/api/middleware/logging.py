# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Writes one log line for every request the service handles, tags it with a request number so
# related log lines can be found together, and flags requests that were slow.
# 🧪 Purpose (Technical Summary):
# Request/response logging middleware: request-id correlation via header and context variable,
# timing with a slow-request threshold, and structured fields through PerformanceLogger.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, app.shared.utils.logging, uuid, time
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration), error_handling middleware (request id)

import time
import uuid
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import get_settings
from app.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Probes are polled constantly; log them only at debug level
QUIET_PATHS = ("/health", "/health/live", "/health/ready")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each HTTP request with its status and duration.

    The request id comes from the incoming X-Request-ID header when present,
    otherwise a new UUID. It is stored on request.state, bound to the
    logging context for the duration of the request, and echoed back.
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: Optional[float] = None):
        super().__init__(app)
        if slow_request_threshold is None:
            slow_request_threshold = get_settings().SLOW_REQUEST_THRESHOLD
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = self._get_or_create_request_id(request)

        with log_context(request_id=request_id):
            start_time = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"{request.method} {request.url.path} failed",
                    method=request.method,
                    path=request.url.path,
                    duration_ms=round(duration_ms, 2),
                    error_type=type(e).__name__,
                    exc_info=True,
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            self._log_response(request, response.status_code, duration_ms)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    def _get_or_create_request_id(self, request: Request) -> str:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    def _log_response(self, request: Request, status_code: int, duration_ms: float) -> None:
        path = request.url.path
        slow = duration_ms >= self.slow_request_threshold * 1000

        if path in QUIET_PATHS and status_code < 400 and not slow:
            logger.debug(f"{request.method} {path} - {status_code}", duration_ms=round(duration_ms, 2))
            return

        logger.performance.log_request(
            method=request.method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
            slow=slow,
            extra={"client": request.client.host if request.client else None},
        )


def get_request_id(request: Request) -> Optional[str]:
    """Request id assigned by RequestLoggingMiddleware, if any."""
    return getattr(request.state, "request_id", None)
