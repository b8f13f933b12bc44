# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Tells Alembic how to connect to the FreshShare database and apply schema changes, using the
# same connection address and encryption rules as the service itself.
# 🧪 Purpose (Technical Summary):
# Alembic environment: async online migrations over asyncpg (URL normalised and SSL context built
# by app.shared.config.database) and offline SQL generation against the plain postgresql URL.
# 🔗 Dependencies:
# - alembic (migration tool)
# - SQLAlchemy async engine
# - asyncpg (PostgreSQL async driver)
# - python-dotenv (environment variables)
# 🔄 Connected Modules / Calls From:
# - alembic CLI commands (upgrade, downgrade, revision)

import asyncio
import os
import sys
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine

# Load environment variables
load_dotenv()

# Make the app package importable when alembic runs from the repo root
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from app.shared.config.database import (  # noqa: E402
    SYNC_DRIVER,
    DatabaseBase,
    build_ssl_context,
    normalize_database_url,
    url_sslmode,
)
from app.shared.config.settings import get_settings  # noqa: E402

# Register every table on the shared metadata
from app.modules.case_packs.infrastructure.database import models  # noqa: E402,F401

# This is the Alembic Config object
config = context.config

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Set the target metadata for 'autogenerate' support
target_metadata = DatabaseBase.metadata


def _raw_database_url() -> str:
    return os.getenv("DATABASE_URL") or get_settings().DATABASE_URL


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Emits SQL to the script output without needing a DBAPI.
    """
    url, _ = normalize_database_url(_raw_database_url(), driver=SYNC_DRIVER)
    context.configure(
        url=url.render_as_string(hide_password=False),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """
    Run migrations over asyncpg, the driver the service itself uses.
    """
    settings = get_settings()
    raw_url = _raw_database_url()
    url, use_ssl = normalize_database_url(raw_url, force_ssl=settings.DATABASE_SSL)

    connect_args = {"ssl": build_ssl_context(url_sslmode(make_url(raw_url)))} if use_ssl else {}
    connectable = create_async_engine(url, poolclass=pool.NullPool, connect_args=connect_args)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
