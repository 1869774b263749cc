from fastapi import APIRouter

from release_sync.interfaces.http.routers import health, releases, webhooks


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(releases.router, prefix="/releases", tags=["releases"])
    return router


__all__ = [
    "create_api_router",
    "health",
    "webhooks",
]
