"""Download release assets over HTTP(S) with httpx."""

from __future__ import annotations

import logging

import httpx

from release_sync import __version__
from release_sync.core.config import Settings
from release_sync.domain.releases.exceptions import AssetDownloadError
from release_sync.domain.releases.models import AssetSource

logger = logging.getLogger(__name__)


def build_http_client(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    headers = {
        "User-Agent": f"{settings.github.user_agent}/{__version__}",
        "Accept": "application/octet-stream",
    }
    if settings.github.token:
        headers["Authorization"] = f"Bearer {settings.github.token}"
    return httpx.AsyncClient(
        headers=headers,
        timeout=httpx.Timeout(settings.sync.download_timeout),
        follow_redirects=True,
        transport=transport,
    )


class HttpAssetFetcher:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, asset: AssetSource) -> bytes:
        try:
            response = await self._client.get(asset.download_url)
        except httpx.HTTPError as exc:
            logger.error("Transport error downloading %s: %s", asset.name, exc)
            raise AssetDownloadError(asset.name, exc.__class__.__name__) from exc

        if not response.is_success:
            raise AssetDownloadError(asset.name, response.status_code)
        logger.debug("Downloaded %s (%d bytes)", asset.name, len(response.content))
        return response.content
