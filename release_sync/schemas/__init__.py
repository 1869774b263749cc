"""Pydantic schemas used across the project."""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from release_sync.domain.releases.models import AssetSource, Release, ReleaseSource
from release_sync.domain.releases.service import PUBLISHED_ACTION


class GitHubAsset(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    browser_download_url: str
    content_type: Optional[str] = None
    size: Optional[int] = None


class GitHubRelease(BaseModel):
    model_config = ConfigDict(extra="ignore")

    tag_name: str = Field(..., min_length=1)
    name: Optional[str] = None
    body: Optional[str] = None
    published_at: Optional[str] = None
    html_url: Optional[str] = None
    assets: list[GitHubAsset] = Field(default_factory=list)

    def to_source(self) -> ReleaseSource:
        return ReleaseSource(
            tag_name=self.tag_name,
            name=self.name,
            body=self.body,
            published_at=self.published_at,
            html_url=self.html_url,
            assets=[
                AssetSource(
                    name=asset.name,
                    download_url=asset.browser_download_url,
                    content_type=asset.content_type,
                )
                for asset in self.assets
            ],
        )


class ReleaseNotification(BaseModel):
    """Envelope of a GitHub webhook delivery; ``release`` is validated only once published."""

    model_config = ConfigDict(extra="ignore")

    action: Optional[str] = None
    release: Optional[dict[str, Any]] = None

    def release_source(self) -> Optional[ReleaseSource]:
        if self.action != PUBLISHED_ACTION or self.release is None:
            return None
        return GitHubRelease.model_validate(self.release).to_source()


class AssetRecord(BaseModel):
    name: str
    size: int
    kv_key: str
    content_type: str


class ReleaseRecord(BaseModel):
    tag_name: str
    name: Optional[str] = None
    body: Optional[str] = None
    published_at: Optional[str] = None
    html_url: Optional[str] = None
    assets: list[AssetRecord] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, release: Release) -> "ReleaseRecord":
        return cls.model_validate(release.to_record())


class ReleaseListResponse(BaseModel):
    releases: list[str]
    latest: Optional[str] = None
    count: int


class WebhookResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    version: Optional[str] = None
    count: Optional[int] = None
    assets: Optional[list[AssetRecord]] = None
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


__all__ = [
    "AssetRecord",
    "ErrorResponse",
    "GitHubAsset",
    "GitHubRelease",
    "HealthResponse",
    "ReleaseListResponse",
    "ReleaseNotification",
    "ReleaseRecord",
    "WebhookResponse",
]
