"""Domain service mirroring published releases into the key-value store."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from .exceptions import AssetDownloadError, AssetNotFoundError, ReleaseNotFoundError
from .models import (
    DEFAULT_CONTENT_TYPE,
    LATEST_KEY,
    RELEASE_KEY_PREFIX,
    Asset,
    AssetSource,
    Release,
    ReleaseListing,
    ReleaseSource,
    StoredAsset,
    SyncResult,
    asset_key,
    release_key,
)
from .ordering import sort_tags
from .repository import AssetFetcher, KeyValueStore

logger = logging.getLogger(__name__)

PUBLISHED_ACTION = "published"


@dataclass(slots=True)
class ReleaseSyncService:
    store: KeyValueStore
    fetcher: AssetFetcher
    tag_ordering: str = "lexicographic"
    max_concurrency: int = 1

    async def handle_notification(self, action: Optional[str], release: Optional[ReleaseSource]) -> SyncResult:
        if action != PUBLISHED_ACTION or release is None:
            logger.info("Ignoring notification with action %r", action)
            return SyncResult.skipped()
        return await self.sync_release(release)

    async def sync_release(self, source: ReleaseSource) -> SyncResult:
        tag = source.tag_name
        logger.info("Processing release %s with %d assets", tag, len(source.assets))

        if self.max_concurrency > 1 and len(source.assets) > 1:
            outcome = await self._mirror_concurrently(tag, source.assets)
        else:
            outcome = await self._mirror_sequentially(tag, source.assets)
        if isinstance(outcome, SyncResult):
            return outcome

        release = Release(
            tag_name=tag,
            name=source.name,
            body=source.body,
            published_at=source.published_at,
            html_url=source.html_url,
            assets=outcome,
        )
        await self.store.put(release_key(tag), release.serialize())
        await self.store.put(LATEST_KEY, tag.encode("utf-8"))

        logger.info("Synced release %s with %d assets", tag, len(outcome))
        return SyncResult(success=True, version=tag, assets=outcome)

    async def _mirror_asset(self, tag: str, source: AssetSource) -> Asset:
        logger.info("Downloading asset %s for %s", source.name, tag)
        content = await self.fetcher.fetch(source)
        key = asset_key(tag, source.name)
        await self.store.put(key, content)
        return Asset(
            name=source.name,
            size=len(content),
            kv_key=key,
            content_type=source.content_type or DEFAULT_CONTENT_TYPE,
        )

    async def _mirror_sequentially(self, tag: str, sources: list[AssetSource]) -> list[Asset] | SyncResult:
        assets: list[Asset] = []
        for source in sources:
            try:
                assets.append(await self._mirror_asset(tag, source))
            except AssetDownloadError as exc:
                logger.error("Sync of %s aborted: %s", tag, exc)
                return SyncResult.failed(tag, str(exc), assets)
        return assets

    async def _mirror_concurrently(self, tag: str, sources: list[AssetSource]) -> list[Asset] | SyncResult:
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _bounded(source: AssetSource) -> Asset:
            async with semaphore:
                return await self._mirror_asset(tag, source)

        results = await asyncio.gather(*(_bounded(source) for source in sources), return_exceptions=True)

        assets: list[Asset] = []
        failure: AssetDownloadError | None = None
        for result in results:
            if isinstance(result, AssetDownloadError):
                failure = failure or result
            elif isinstance(result, BaseException):
                raise result
            else:
                assets.append(result)
        if failure is not None:
            logger.error("Sync of %s aborted: %s", tag, failure)
            return SyncResult.failed(tag, str(failure), assets)
        return assets

    async def list_releases(self) -> ReleaseListing:
        keys = await self.store.list_keys(RELEASE_KEY_PREFIX)
        tags = [key[len(RELEASE_KEY_PREFIX):] for key in keys if key.startswith(RELEASE_KEY_PREFIX)]
        return ReleaseListing(releases=sort_tags(tags, self.tag_ordering))

    async def get_release(self, tag: str) -> Release:
        raw = await self.store.get(release_key(tag))
        if raw is None:
            raise ReleaseNotFoundError(f"Release {tag} not found")
        return Release.deserialize(raw)

    async def get_latest_release(self) -> Release:
        pointer = await self.store.get(LATEST_KEY)
        if not pointer:
            raise ReleaseNotFoundError("No releases found")
        tag = pointer.decode("utf-8")
        try:
            return await self.get_release(tag)
        except ReleaseNotFoundError:
            logger.warning("Latest pointer refers to missing release %s", tag)
            raise ReleaseNotFoundError("No releases found") from None

    async def get_asset(self, tag: str, name: str) -> StoredAsset:
        release = await self.get_release(tag)
        asset = release.find_asset(name)
        if asset is None:
            raise AssetNotFoundError(f"Asset {name} not found in release {tag}")
        content = await self.store.get(asset.kv_key)
        if content is None:
            raise AssetNotFoundError(f"Asset {name} not found in release {tag}")
        return StoredAsset(asset=asset, content=content)
