"""
Core utilities package for the FreshShare pack service.
Provides the exception hierarchy shared by every layer.
"""

from .exceptions import (
    FreshShareException,
    ValidationError,
    NotFoundError,
    DatabaseError,
    DatabaseUnavailableError,
    RepositoryError,
)

__all__ = [
    "FreshShareException",
    "ValidationError",
    "NotFoundError",
    "DatabaseError",
    "DatabaseUnavailableError",
    "RepositoryError",
]
