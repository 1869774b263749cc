"""Release service dependency providers."""

from fastapi import Depends, Request

from release_sync.core.config import Settings, get_settings
from release_sync.core.container import ApplicationContainer
from release_sync.domain.releases import AssetFetcher, KeyValueStore, ReleaseSyncService
from release_sync.infrastructure.database import get_session_factory
from release_sync.infrastructure.database.repositories import SqlKeyValueStore
from release_sync.infrastructure.github import HttpAssetFetcher, build_http_client


def get_app_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_kv_store(
    container: ApplicationContainer = Depends(get_app_container),
) -> KeyValueStore:
    if not container.uses_database:
        return container.memory_store
    return SqlKeyValueStore(get_session_factory(container.settings))


def get_asset_fetcher(
    container: ApplicationContainer = Depends(get_app_container),
) -> AssetFetcher:
    if container.http_client is None:
        container.http_client = build_http_client(container.settings)
    return HttpAssetFetcher(container.http_client)


def get_release_service(
    store: KeyValueStore = Depends(get_kv_store),
    fetcher: AssetFetcher = Depends(get_asset_fetcher),
    settings: Settings = Depends(get_settings),
) -> ReleaseSyncService:
    return ReleaseSyncService(
        store=store,
        fetcher=fetcher,
        tag_ordering=settings.tag_ordering,
        max_concurrency=settings.sync.max_concurrency,
    )


__all__ = [
    "get_app_container",
    "get_asset_fetcher",
    "get_kv_store",
    "get_release_service",
]
