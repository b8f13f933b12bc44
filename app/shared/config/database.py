# 📄 File: app/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for connecting to the FreshShare Postgres database: it cleans up the
# connection address, switches on encryption when the host needs it, and sizes the connection pool.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async database configuration with URL normalisation (postgres:// -> asyncpg),
# SSL detection from settings or URL parameters, pool tuning, and the declarative base
# shared by every ORM model and by Alembic autogenerate.
#
# 🔗 Dependencies:
# - SQLAlchemy async engine
# - app.shared.config.settings
# - PostgreSQL driver (asyncpg)
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.database.connection
# - Module ORM models (DatabaseBase)
# - migrations/env.py

import ssl
from typing import Any, Dict, Optional, Tuple

from sqlalchemy import MetaData
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from .settings import Settings, get_settings


# =============================================================================
# URL HANDLING
# =============================================================================

ASYNC_DRIVER = "postgresql+asyncpg"
SYNC_DRIVER = "postgresql"

# Query parameters that libpq understands but asyncpg rejects
_SSL_QUERY_KEYS = ("sslmode", "ssl")
_SSL_VERIFY_MODES = {"verify-ca", "verify-full"}
_SSL_REQUIRED_MODES = {"require", "no-verify"} | _SSL_VERIFY_MODES


def url_sslmode(url: URL) -> str:
    """The libpq ``sslmode`` of the URL, lower-cased, or an empty string."""
    return str(url.query.get("sslmode", "")).lower()


def url_requests_ssl(url: URL) -> bool:
    """Return True when the URL asks for an encrypted connection."""
    sslmode = url_sslmode(url)
    ssl_flag = str(url.query.get("ssl", "")).lower()
    return sslmode in _SSL_REQUIRED_MODES or ssl_flag == "true"


def normalize_database_url(
    raw_url: str,
    force_ssl: bool = False,
    driver: str = ASYNC_DRIVER,
) -> Tuple[URL, bool]:
    """
    Normalise a Postgres URL for SQLAlchemy.

    Hosting panels hand out ``postgres://`` URLs, sometimes with
    ``sslmode=require`` appended. Both are translated here: the scheme is
    rewritten to the requested driver and the SSL parameters are removed
    from the query string and reported separately.

    Args:
        raw_url: URL as configured
        force_ssl: Enable SSL regardless of URL parameters
        driver: Target SQLAlchemy driver name

    Returns:
        Tuple of (normalised URL, whether SSL should be used)
    """
    url = make_url(raw_url)
    if url.drivername in ("postgres", "postgresql") or url.drivername.startswith("postgresql+"):
        url = url.set(drivername=driver)

    use_ssl = force_ssl or url_requests_ssl(url)
    url = url.difference_update_query(_SSL_QUERY_KEYS)
    return url, use_ssl


def redact_database_url(raw_url: str) -> str:
    """Render a URL safe for logs (password hidden)."""
    try:
        return make_url(raw_url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<unparseable database url>"


def build_ssl_context(sslmode: str = "require") -> ssl.SSLContext:
    """
    SSL context for managed Postgres hosts.

    ``verify-full`` checks the certificate chain and host name and
    ``verify-ca`` checks the chain only. Every other mode encrypts without
    verifying, since shared hosts commonly present self-signed certificates.
    """
    context = ssl.create_default_context()
    if sslmode == "verify-full":
        return context
    if sslmode == "verify-ca":
        context.check_hostname = False
        return context

    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

class DatabaseConfig:
    """Database configuration class with environment-specific settings."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._url, self._use_ssl = normalize_database_url(
            self.settings.DATABASE_URL,
            force_ssl=self.settings.DATABASE_SSL,
        )
        self._sslmode = url_sslmode(make_url(self.settings.DATABASE_URL))

    @property
    def database_url(self) -> URL:
        """Get the database URL for async connections."""
        return self._url

    @property
    def use_ssl(self) -> bool:
        return self._use_ssl

    @property
    def redacted_url(self) -> str:
        return self._url.render_as_string(hide_password=True)

    @property
    def engine_kwargs(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine configuration based on environment."""

        connect_args: Dict[str, Any] = {
            "server_settings": {
                "application_name": f"freshshare_pack_{self.settings.ENVIRONMENT}",
                "jit": "off",
            },
            "command_timeout": 30,
        }
        if self._use_ssl:
            connect_args["ssl"] = build_ssl_context(self._sslmode)

        base_config: Dict[str, Any] = {
            "echo": self.settings.DEBUG and self.settings.is_development,
            "connect_args": connect_args,
        }

        if self.settings.is_testing:
            # Use NullPool for testing to avoid connections outliving the event loop
            base_config["poolclass"] = NullPool
        else:
            base_config.update({
                "pool_size": self.settings.DB_POOL_SIZE,
                "max_overflow": self.settings.DB_MAX_OVERFLOW,
                "pool_timeout": self.settings.DB_POOL_TIMEOUT,
                "pool_recycle": self.settings.DB_POOL_RECYCLE,
                "pool_pre_ping": True,
            })

            if self.settings.is_production:
                connect_args["server_settings"].update({
                    "timezone": "UTC",
                    "statement_timeout": "30000",
                    "idle_in_transaction_session_timeout": "60000",
                })

        return base_config


# =============================================================================
# DATABASE MODELS BASE CLASS
# =============================================================================

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Carries the shared metadata so Alembic sees every table
    registered by the module ORM models.
    """
    metadata = metadata
