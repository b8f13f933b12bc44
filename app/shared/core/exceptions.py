# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# The named kinds of failure the pack service can report, each with the web status code it
# should be answered with.
# 🧪 Purpose (Technical Summary):
# FreshShareException hierarchy carrying status code, error code and a details mapping, used
# by repositories, handlers and the error handling middleware to build JSON error bodies.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# Database infrastructure, repositories, application handlers, error handling middleware

from typing import Any, Dict, Optional

from fastapi import status


def _details(details: Optional[Dict[str, Any]], **fields: Any) -> Dict[str, Any]:
    merged = dict(details or {})
    merged.update({key: value for key, value in fields.items() if value is not None})
    return merged


class FreshShareException(Exception):
    """
    Base exception for the FreshShare pack service.

    Subclasses fix the status and error code; handlers render
    ``to_dict()`` as the response body.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self, request_id: Optional[str] = None) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "request_id": request_id,
            }
        }


# =============================================================================
# CLIENT ERRORS
# =============================================================================

class ValidationError(FreshShareException):
    """Input that passed schema checks but still cannot be used."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Validation failed", field: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=_details(details, field=field))


class NotFoundError(FreshShareException):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(self, message: str = "Resource not found", resource_type: Optional[str] = None,
                 resource_id: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            details=_details(details, resource_type=resource_type, resource_id=resource_id),
        )


# =============================================================================
# INFRASTRUCTURE ERRORS
# =============================================================================

class DatabaseError(FreshShareException):
    """A statement or transaction failed on a reachable database."""
    error_code = "DATABASE_ERROR"

    def __init__(self, message: str = "Database operation failed", operation: Optional[str] = None,
                 table: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=_details(details, operation=operation, table=table))


class DatabaseUnavailableError(FreshShareException):
    """
    The database could not be reached at all.

    Answered with 503 so load balancers and clients retry later.
    """
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_code = "DATABASE_UNAVAILABLE"

    def __init__(self, message: str = "Database connection failed", attempts: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=_details(details, attempts=attempts))


class RepositoryError(FreshShareException):
    """A repository could not complete a read or write."""
    error_code = "REPOSITORY_ERROR"

    def __init__(self, message: str = "Repository operation failed", repository: Optional[str] = None,
                 operation: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            details=_details(details, repository=repository, operation=operation),
        )
