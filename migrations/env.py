"""Alembic environment for the ``kv_entries`` schema.

Offline mode renders SQL against the synchronous driver URL; online mode runs
the migrations through the application's async engine.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from release_sync.core.config import get_settings
from release_sync.infrastructure.database import get_engine, models  # noqa: F401
from release_sync.infrastructure.database.base import Base

SYNC_DRIVERS = {"sqlite+aiosqlite": "sqlite", "postgresql+asyncpg": "postgresql"}

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _offline_url() -> str:
    url = get_settings().database_url
    driver, sep, rest = url.partition("://")
    return SYNC_DRIVERS.get(driver, driver) + sep + rest


def _configure_and_run(**options) -> None:
    context.configure(target_metadata=Base.metadata, **options)
    with context.begin_transaction():
        context.run_migrations()


def _run_on_connection(connection: Connection) -> None:
    _configure_and_run(connection=connection)


async def _run_online() -> None:
    async with get_engine().connect() as connection:
        await connection.run_sync(_run_on_connection)


if context.is_offline_mode():
    _configure_and_run(url=_offline_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
else:
    asyncio.run(_run_online())
