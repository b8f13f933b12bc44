"""
Async Postgres infrastructure: engine lifecycle and per-request sessions.
"""

from .connection import (
    DatabaseConnectionManager,
    close_database,
    database_health_check,
    db_manager,
    get_connection_info,
    init_database,
)
from .session import get_db_session, initialize_sessions, session_manager

__all__ = [
    "DatabaseConnectionManager",
    "close_database",
    "database_health_check",
    "db_manager",
    "get_connection_info",
    "init_database",
    "get_db_session",
    "initialize_sessions",
    "session_manager",
]
