# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches errors that happen while answering a request and turns them into consistent JSON
# answers, including a clear "try again later" when the database cannot be reached.
# 🧪 Purpose (Technical Summary):
# Exception handlers for the FreshShareException hierarchy, database connectivity failures
# (503) and rate-limit overflow (429), plus a middleware that converts anything unhandled
# into a 500 JSON body with request correlation.
# 🔗 Dependencies:
# FastAPI, starlette, slowapi, SQLAlchemy exceptions, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.main (handler and middleware registration)

import traceback
from typing import Any, Dict

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import exc as sa_exc
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import DatabaseUnavailableError, FreshShareException
from app.shared.infrastructure.database.session import is_connectivity_error
from app.shared.utils.logging import get_logger, request_id_var

from .logging import get_request_id

logger = get_logger(__name__)

DB_UNAVAILABLE_BODY = {
    "error": "Database connection failed",
    "message": "Service temporarily unavailable",
}


def _request_id(request: Request) -> str:
    return get_request_id(request) or request_id_var.get()


def database_unavailable_response() -> JSONResponse:
    return JSONResponse(status_code=503, content=dict(DB_UNAVAILABLE_BODY))


def error_body(exc: FreshShareException, request: Request) -> Dict[str, Any]:
    return exc.to_dict(request_id=_request_id(request))


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def database_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Database unavailable",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return database_unavailable_response()


async def freshshare_exception_handler(request: Request, exc: FreshShareException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code}: {exc.message}", path=request.url.path, details=exc.details)
    else:
        logger.info(f"{exc.error_code}: {exc.message}", path=request.url.path)

    return JSONResponse(status_code=exc.status_code, content=error_body(exc, request))


async def sqlalchemy_exception_handler(request: Request, exc: sa_exc.SQLAlchemyError) -> JSONResponse:
    if is_connectivity_error(exc):
        return await database_unavailable_handler(request, exc)

    logger.error("Unhandled database error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "DATABASE_ERROR",
                "message": "Database operation failed",
                "details": {},
                "request_id": _request_id(request),
            }
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every application exception handler to the app."""
    app.add_exception_handler(DatabaseUnavailableError, database_unavailable_handler)
    app.add_exception_handler(FreshShareException, freshshare_exception_handler)
    app.add_exception_handler(sa_exc.SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


# =============================================================================
# FALLBACK MIDDLEWARE
# =============================================================================

class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Converts exceptions no handler claimed into JSON responses.

    Connectivity failures (refused connections, timeouts) become 503;
    everything else becomes a 500 with the request id attached.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.settings = get_settings()

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            if is_connectivity_error(exc):
                return await database_unavailable_handler(request, exc)
            return self._internal_error(request, exc)

    def _internal_error(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error_type=type(exc).__name__,
            exc_info=True,
        )

        body: Dict[str, Any] = {
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "Internal server error",
                "details": {},
                "request_id": _request_id(request),
            }
        }
        if self.settings.DEBUG and not self.settings.is_production:
            body["error"]["debug"] = {
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
                "traceback": traceback.format_exc().split("\n"),
            }

        return JSONResponse(status_code=500, content=body)
