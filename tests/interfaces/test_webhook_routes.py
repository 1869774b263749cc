"""Tests for the GitHub webhook endpoint."""
from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from release_sync.core.config import GitHubSettings, Settings, StoreSettings
from release_sync.core.security import compute_signature
from release_sync.interfaces.http.deps import get_asset_fetcher
from release_sync.main import create_app
from tests.conftest import FakeFetcher, make_notification, make_release

FIRMWARE_URL = "https://github.test/acme/firmware/releases/download/v1.3.0/firmware.bin"
FS_URL = "https://github.test/acme/firmware/releases/download/v1.3.0/littlefs.bin"


def test_published_release_is_synced(client, app_store, fetcher):
    fetcher.responses.update({FIRMWARE_URL: b"fw-bytes", FS_URL: b"fs"})
    body = make_notification(make_release("v1.3.0", [("firmware.bin", FIRMWARE_URL), ("littlefs.bin", FS_URL)]))

    resp = client.post("/webhook/github", content=body, headers={"X-GitHub-Event": "release"})

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["success"] is True
    assert payload["message"] == "Release v1.3.0 synced successfully"
    assert payload["version"] == "v1.3.0"
    assert payload["count"] == 2
    assert payload["assets"][0] == {
        "name": "firmware.bin",
        "size": 8,
        "kv_key": "asset:v1.3.0:firmware.bin",
        "content_type": "application/zip",
    }
    assert "error" not in payload

    data = app_store.snapshot()
    assert data["asset:v1.3.0:firmware.bin"] == b"fw-bytes"
    assert data["latest"] == b"v1.3.0"
    assert json.loads(data["release:v1.3.0"])["name"] == "Release v1.3.0"


@pytest.mark.parametrize("action", ["created", "released", "deleted"])
def test_non_published_actions_are_acknowledged(client, app_store, action):
    body = make_notification(make_release("v1.3.0"), action=action)

    resp = client.post("/webhook/github", content=body)

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Event not processed"}
    assert len(app_store) == 0


def test_ping_event_is_acknowledged(client, app_store):
    resp = client.post("/webhook/github", content=json.dumps({"zen": "Keep it logically awesome."}))

    assert resp.status_code == 200
    assert resp.json()["message"] == "Event not processed"
    assert len(app_store) == 0


def test_failed_download_returns_500(client, app_store, fetcher):
    fetcher.responses.update({FIRMWARE_URL: b"fw", FS_URL: 403})
    body = make_notification(make_release("v1.3.0", [("firmware.bin", FIRMWARE_URL), ("littlefs.bin", FS_URL)]))

    resp = client.post("/webhook/github", content=body)

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to download littlefs.bin: 403"}
    assert "release:v1.3.0" not in app_store.snapshot()


@pytest.mark.parametrize("body", [b"{not json", b"[]", b'{"action": "published", "release": {"name": "no tag"}}'])
def test_malformed_body_returns_500(client, app_store, body):
    resp = client.post("/webhook/github", content=body)

    assert resp.status_code == 500
    payload = resp.json()
    assert payload["success"] is False
    assert payload["error"]
    assert len(app_store) == 0


@pytest.fixture
def signed_app(fetcher):
    settings = Settings(
        environment="test",
        store=StoreSettings(backend="memory"),
        github=GitHubSettings(webhook_secret="hook-secret"),
    )
    application = create_app(settings)
    application.dependency_overrides[get_asset_fetcher] = lambda: fetcher
    return application


def test_signature_required_when_secret_configured(signed_app, fetcher):
    client = TestClient(signed_app)
    store = signed_app.state.container.memory_store
    fetcher.responses[FIRMWARE_URL] = b"fw"
    body = make_notification(make_release("v1.3.0", [("firmware.bin", FIRMWARE_URL)]))

    missing = client.post("/webhook/github", content=body)
    wrong = client.post(
        "/webhook/github",
        content=body,
        headers={"X-Hub-Signature-256": compute_signature("other-secret", body)},
    )

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert wrong.json()["success"] is False
    assert len(store) == 0
    assert fetcher.requested == []

    ok = client.post(
        "/webhook/github",
        content=body,
        headers={"X-Hub-Signature-256": compute_signature("hook-secret", body)},
    )

    assert ok.status_code == 200
    assert store.snapshot()["latest"] == b"v1.3.0"


def test_signature_ignored_without_secret(client):
    body = make_notification(make_release("v1.3.0"))

    resp = client.post("/webhook/github", content=body, headers={"X-Hub-Signature-256": "sha256=bogus"})

    assert resp.status_code == 200
    assert resp.json()["count"] == 0


def test_non_ascii_signature_header_is_rejected(signed_app):
    client = TestClient(signed_app)
    body = make_notification(make_release("v1.3.0"))
    signature = compute_signature("hook-secret", body).encode("ascii")

    resp = client.post("/webhook/github", content=body, headers={"X-Hub-Signature-256": signature[:-1] + b"\xe9"})

    assert resp.status_code == 401
    assert resp.json()["success"] is False
    assert len(signed_app.state.container.memory_store) == 0


@pytest.mark.parametrize("action", ["deleted", "edited"])
def test_incomplete_release_ignored_for_other_actions(client, app_store, action):
    body = json.dumps({"action": action, "release": {"id": 1, "assets": [{"name": "a.bin"}]}})

    resp = client.post("/webhook/github", content=body)

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Event not processed"}
    assert len(app_store) == 0
