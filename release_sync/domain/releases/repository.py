"""Capability protocols the release service depends on."""

from __future__ import annotations

from typing import Protocol

from .models import AssetSource


class KeyValueStore(Protocol):
    async def get(self, key: str) -> bytes | None:
        ...

    async def put(self, key: str, value: bytes) -> None:
        ...

    async def list_keys(self, prefix: str = "") -> list[str]:
        ...


class AssetFetcher(Protocol):
    async def fetch(self, asset: AssetSource) -> bytes:
        """Return the asset payload or raise ``AssetDownloadError``."""
        ...
