"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./releases.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class StoreSettings(BaseModel):
    backend: Literal["database", "memory"] = "database"


class GitHubSettings(BaseModel):
    webhook_secret: Optional[str] = None
    token: Optional[str] = None
    user_agent: str = "release-sync-server"


class SyncSettings(BaseModel):
    max_concurrency: int = Field(default=1, ge=1)
    # None keeps downloads unbounded
    download_timeout: Optional[float] = Field(default=None, gt=0)


class ReleaseSettings(BaseModel):
    tag_ordering: Literal["lexicographic", "semver"] = "lexicographic"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Release Sync Service"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    store: StoreSettings = StoreSettings()
    github: GitHubSettings = GitHubSettings()
    sync: SyncSettings = SyncSettings()
    releases: ReleaseSettings = ReleaseSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def webhook_secret(self) -> Optional[str]:
        return self.github.webhook_secret or None

    @property
    def tag_ordering(self) -> str:
        return self.releases.tag_ordering


@lru_cache()
def get_settings() -> Settings:
    return Settings()
