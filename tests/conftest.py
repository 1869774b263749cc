from __future__ import annotations

import json
from typing import Any

import pytest
from fastapi.testclient import TestClient

from release_sync.core.config import Settings, StoreSettings
from release_sync.domain.releases import AssetDownloadError, AssetSource, ReleaseSyncService
from release_sync.infrastructure.storage import InMemoryKeyValueStore
from release_sync.interfaces.http.deps import get_asset_fetcher
from release_sync.main import create_app


class FakeFetcher:
    """Serves payloads by URL; an int entry is returned as a failing HTTP status."""

    def __init__(self, responses: dict[str, bytes | int] | None = None) -> None:
        self.responses: dict[str, bytes | int] = dict(responses or {})
        self.requested: list[str] = []

    async def fetch(self, asset: AssetSource) -> bytes:
        self.requested.append(asset.name)
        response = self.responses.get(asset.download_url, 404)
        if isinstance(response, int):
            raise AssetDownloadError(asset.name, response)
        return response


def make_release(tag: str, assets: list[tuple[str, str]] | None = None, **extra: Any) -> dict[str, Any]:
    payload = {
        "tag_name": tag,
        "name": f"Release {tag}",
        "body": "Changelog",
        "published_at": "2026-10-01T12:00:00Z",
        "html_url": f"https://github.com/acme/firmware/releases/tag/{tag}",
        "assets": [
            {"name": name, "browser_download_url": url, "content_type": "application/zip"}
            for name, url in (assets or [])
        ],
    }
    payload.update(extra)
    return payload


def make_notification(release: dict[str, Any] | None, action: str = "published") -> bytes:
    body: dict[str, Any] = {"action": action}
    if release is not None:
        body["release"] = release
    return json.dumps(body).encode("utf-8")


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def service(store, fetcher) -> ReleaseSyncService:
    return ReleaseSyncService(store=store, fetcher=fetcher)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", store=StoreSettings(backend="memory"))


@pytest.fixture
def app(settings, fetcher):
    application = create_app(settings)
    application.dependency_overrides[get_asset_fetcher] = lambda: fetcher
    return application


@pytest.fixture
def app_store(app) -> InMemoryKeyValueStore:
    return app.state.container.memory_store


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
