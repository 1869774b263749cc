"""Tests for settings loading."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from release_sync.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GITHUB__WEBHOOK_SECRET", raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_prefix == "/api"
    assert settings.store.backend == "database"
    assert settings.database_url.startswith("sqlite+aiosqlite")
    assert settings.webhook_secret is None
    assert settings.tag_ordering == "lexicographic"
    assert settings.sync.max_concurrency == 1
    assert settings.sync.download_timeout is None


def test_nested_sections_from_environment(monkeypatch):
    monkeypatch.setenv("GITHUB__WEBHOOK_SECRET", "hook-secret")
    monkeypatch.setenv("SYNC__MAX_CONCURRENCY", "4")
    monkeypatch.setenv("RELEASES__TAG_ORDERING", "semver")
    monkeypatch.setenv("STORE__BACKEND", "memory")

    settings = Settings(_env_file=None)

    assert settings.webhook_secret == "hook-secret"
    assert settings.sync.max_concurrency == 4
    assert settings.tag_ordering == "semver"
    assert settings.store.backend == "memory"


def test_empty_secret_disables_verification(monkeypatch):
    monkeypatch.setenv("GITHUB__WEBHOOK_SECRET", "")

    assert Settings(_env_file=None).webhook_secret is None


@pytest.mark.parametrize("name, value", [("SYNC__MAX_CONCURRENCY", "0"), ("RELEASES__TAG_ORDERING", "random")])
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
