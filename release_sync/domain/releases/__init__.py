"""Release domain exports."""

from .exceptions import (
    AssetDownloadError,
    AssetNotFoundError,
    InvalidSignatureError,
    ReleaseError,
    ReleaseNotFoundError,
)
from .models import Asset, AssetSource, Release, ReleaseListing, ReleaseSource, StoredAsset, SyncResult
from .repository import AssetFetcher, KeyValueStore
from .service import ReleaseSyncService

__all__ = [
    "Asset",
    "AssetDownloadError",
    "AssetFetcher",
    "AssetNotFoundError",
    "AssetSource",
    "InvalidSignatureError",
    "KeyValueStore",
    "Release",
    "ReleaseError",
    "ReleaseListing",
    "ReleaseNotFoundError",
    "ReleaseSource",
    "ReleaseSyncService",
    "StoredAsset",
    "SyncResult",
]
