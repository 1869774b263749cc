"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from release_sync.core.config import Settings
from release_sync.infrastructure.database import init_db
from release_sync.infrastructure.database.session import dispose_engine
from release_sync.infrastructure.github import build_http_client
from release_sync.infrastructure.storage import InMemoryKeyValueStore


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    memory_store: InMemoryKeyValueStore = field(default_factory=InMemoryKeyValueStore)
    http_client: httpx.AsyncClient | None = None

    @property
    def uses_database(self) -> bool:
        return self.settings.store.backend == "database"

    async def startup(self) -> None:
        """Create tables and the shared outbound HTTP client."""
        if self.uses_database:
            await init_db(self.settings)
        if self.http_client is None:
            self.http_client = build_http_client(self.settings)

    async def shutdown(self) -> None:
        if self.http_client is not None:
            await self.http_client.aclose()
            self.http_client = None
        if self.uses_database:
            await dispose_engine()


__all__ = ["ApplicationContainer"]
