# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the request "checkpoints" every API call passes through: logging and error handling.
# 🧪 Purpose (Technical Summary):
# Middleware package exports and a single setup function registering middleware, CORS and
# exception handlers in the right order.
# 🔗 Dependencies:
# FastAPI, starlette CORSMiddleware, local middleware modules
# 🔄 Connected Modules / Calls From:
# app.main

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.shared.config.settings import Settings

from .error_handling import ErrorHandlingMiddleware, register_exception_handlers
from .logging import RequestLoggingMiddleware, get_request_id


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """
    Register middleware and exception handlers.

    Middleware added last runs first, so request logging wraps error
    handling and every error response carries a request id.
    """
    register_exception_handlers(app)

    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware, slow_request_threshold=settings.SLOW_REQUEST_THRESHOLD)


__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "get_request_id",
    "register_exception_handlers",
    "setup_middleware",
]
