"""Reusable FastAPI dependencies."""

from .releases import get_app_container, get_asset_fetcher, get_kv_store, get_release_service

__all__ = [
    "get_app_container",
    "get_asset_fetcher",
    "get_kv_store",
    "get_release_service",
]
