"""Domain models for mirrored releases."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Optional

RELEASE_KEY_PREFIX = "release:"
ASSET_KEY_PREFIX = "asset:"
LATEST_KEY = "latest"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def release_key(tag: str) -> str:
    return f"{RELEASE_KEY_PREFIX}{tag}"


def asset_key(tag: str, name: str) -> str:
    return f"{ASSET_KEY_PREFIX}{tag}:{name}"


@dataclass(slots=True)
class AssetSource:
    """An asset as announced by the notification, before download."""

    name: str
    download_url: str
    content_type: Optional[str] = None


@dataclass(slots=True)
class ReleaseSource:
    tag_name: str
    name: Optional[str]
    body: Optional[str]
    published_at: Optional[str]
    html_url: Optional[str]
    assets: list[AssetSource] = field(default_factory=list)


@dataclass(slots=True)
class Asset:
    name: str
    size: int
    kv_key: str
    content_type: str = DEFAULT_CONTENT_TYPE


@dataclass(slots=True)
class Release:
    tag_name: str
    name: Optional[str]
    body: Optional[str]
    published_at: Optional[str]
    html_url: Optional[str]
    assets: list[Asset] = field(default_factory=list)

    def find_asset(self, name: str) -> Asset | None:
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None

    def to_record(self) -> dict[str, Any]:
        return asdict(self)

    def serialize(self) -> bytes:
        return json.dumps(self.to_record()).encode("utf-8")

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Release":
        assets = [
            Asset(
                name=item["name"],
                size=int(item.get("size", 0)),
                kv_key=item.get("kv_key") or item.get("kvKey") or asset_key(record["tag_name"], item["name"]),
                content_type=item.get("content_type") or DEFAULT_CONTENT_TYPE,
            )
            for item in record.get("assets") or []
        ]
        return cls(
            tag_name=record["tag_name"],
            name=record.get("name"),
            body=record.get("body"),
            published_at=record.get("published_at"),
            html_url=record.get("html_url"),
            assets=assets,
        )

    @classmethod
    def deserialize(cls, raw: bytes) -> "Release":
        return cls.from_record(json.loads(raw.decode("utf-8")))


@dataclass(slots=True)
class ReleaseListing:
    releases: list[str]

    @property
    def latest(self) -> Optional[str]:
        return self.releases[0] if self.releases else None

    @property
    def count(self) -> int:
        return len(self.releases)


@dataclass(slots=True)
class SyncResult:
    success: bool
    processed: bool = True
    version: Optional[str] = None
    assets: list[Asset] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.assets)

    @classmethod
    def skipped(cls) -> "SyncResult":
        return cls(success=True, processed=False)

    @classmethod
    def failed(cls, version: Optional[str], error: str, assets: list[Asset] | None = None) -> "SyncResult":
        return cls(success=False, version=version, assets=list(assets or []), error=error)


@dataclass(slots=True)
class StoredAsset:
    asset: Asset
    content: bytes
