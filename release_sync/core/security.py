"""GitHub webhook signature helpers."""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Optional

from fastapi import Depends, Request

from release_sync.core.config import Settings, get_settings
from release_sync.domain.releases.exceptions import InvalidSignatureError

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Hub-Signature-256"
SIGNATURE_PREFIX = "sha256="


def compute_signature(secret: str, body: bytes) -> str:
    """Return the ``sha256=<hex>`` signature GitHub sends for ``body``."""
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_signature(secret: Optional[str], body: bytes, signature: Optional[str]) -> bool:
    if not secret or not signature:
        return False
    expected = compute_signature(secret, body).encode("ascii")
    return hmac.compare_digest(expected, signature.encode("utf-8", "surrogateescape"))


async def require_github_signature(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> bytes:
    """Read the raw request body, enforcing the signature when a secret is configured."""
    body = await request.body()
    secret = settings.webhook_secret
    if secret is None:
        return body

    signature = request.headers.get(SIGNATURE_HEADER)
    if not verify_signature(secret, body, signature):
        logger.warning(
            "Rejected webhook delivery %s: %s signature",
            request.headers.get("X-GitHub-Delivery", "-"),
            "missing" if not signature else "invalid",
        )
        raise InvalidSignatureError("Invalid webhook signature")
    return body


__all__ = [
    "SIGNATURE_HEADER",
    "compute_signature",
    "verify_signature",
    "require_github_signature",
]
