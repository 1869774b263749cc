#!/usr/bin/env python3
"""
Fetch a release from the GitHub REST API and replay it to the sync server as a
signed ``published`` webhook notification.

Example:
    python scripts/replay_release.py \
        --repo owner/firmware \
        --tag v1.2.0 \
        --server http://127.0.0.1:8000 \
        --secret "$GITHUB__WEBHOOK_SECRET"
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import urllib.error
import urllib.parse
import urllib.request
import uuid
from typing import Any, Optional

from release_sync.core.security import SIGNATURE_HEADER, compute_signature

GITHUB_API = "https://api.github.com"


def http_get_json(url: str, headers: Optional[dict[str, str]] = None, timeout: int = 30) -> tuple[int, Any]:
    req_headers = {"Accept": "application/vnd.github+json"}
    if headers:
        req_headers.update(headers)
    req = urllib.request.Request(url, headers=req_headers, method="GET")
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return resp.status, json.loads(resp.read().decode("utf-8"))
    except urllib.error.HTTPError as exc:
        return exc.code, exc.read().decode(errors="ignore")


def http_post(url: str, body: bytes, headers: Optional[dict[str, str]] = None,
              timeout: int = 600) -> tuple[int, bytes]:
    req_headers = {"Content-Type": "application/json"}
    if headers:
        req_headers.update(headers)
    req = urllib.request.Request(url, data=body, headers=req_headers, method="POST")
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return resp.status, resp.read()
    except urllib.error.HTTPError as exc:
        return exc.code, exc.read()


def fetch_release(repo: str, tag: Optional[str], token: Optional[str]) -> dict[str, Any]:
    if tag:
        url = f"{GITHUB_API}/repos/{repo}/releases/tags/{urllib.parse.quote(tag, safe='')}"
    else:
        url = f"{GITHUB_API}/repos/{repo}/releases/latest"
    headers = {"Authorization": f"Bearer {token}"} if token else None
    print(f"[github] GET {url}")
    status, body = http_get_json(url, headers=headers)
    if status != 200:
        raise SystemExit(f"release lookup failed: {status} {body}")
    return body


def replay(server: str, release: dict[str, Any], secret: Optional[str]) -> dict[str, Any]:
    url = server.rstrip("/") + "/webhook/github"
    body = json.dumps({"action": "published", "release": release}).encode("utf-8")
    headers = {
        "X-GitHub-Event": "release",
        "X-GitHub-Delivery": str(uuid.uuid4()),
    }
    if secret:
        headers[SIGNATURE_HEADER] = compute_signature(secret, body)

    print(f"[api] POST {url} ({len(release.get('assets') or [])} assets)")
    status, response = http_post(url, body, headers=headers)
    if status != 200:
        raise SystemExit(f"replay failed: {status} {response.decode(errors='ignore')}")
    return json.loads(response.decode("utf-8"))


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay a GitHub release to the release sync server")
    parser.add_argument("--repo", required=True, help="GitHub repository as owner/name")
    parser.add_argument("--tag", default=None, help="Release tag; defaults to the latest release")
    parser.add_argument("--server", default="http://127.0.0.1:8000", help="Release sync server base URL")
    parser.add_argument("--secret", default=os.getenv("GITHUB__WEBHOOK_SECRET"), help="Webhook shared secret")
    parser.add_argument("--token", default=os.getenv("GITHUB__TOKEN"), help="GitHub token for private repos")
    args = parser.parse_args()

    release = fetch_release(args.repo, args.tag, args.token)
    result = replay(args.server, release, args.secret)

    print(json.dumps(result, indent=2, ensure_ascii=False))
    print("[done] replay succeeded")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)
