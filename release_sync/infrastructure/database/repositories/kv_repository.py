"""Key-value store persisted in the ``kv_entries`` table."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from release_sync.infrastructure.database.models import KeyValueEntry


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlKeyValueStore:
    """Each operation opens its own session; ``put`` commits before returning."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, key: str) -> bytes | None:
        async with self._session_factory() as session:
            entry = await session.get(KeyValueEntry, key)
            return bytes(entry.value) if entry else None

    async def put(self, key: str, value: bytes) -> None:
        async with self._session_factory() as session, session.begin():
            entry = await session.get(KeyValueEntry, key)
            if entry is None:
                session.add(KeyValueEntry(key=key, value=value))
            else:
                entry.value = value

    async def list_keys(self, prefix: str = "") -> list[str]:
        stmt = select(KeyValueEntry.key).order_by(KeyValueEntry.key)
        if prefix:
            stmt = stmt.where(KeyValueEntry.key.like(f"{_escape_like(prefix)}%", escape="\\"))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            # SQLite LIKE is case-insensitive
            return [key for key in result.scalars().all() if key.startswith(prefix)]
