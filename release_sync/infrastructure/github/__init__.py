"""GitHub asset download adapter."""

from .client import HttpAssetFetcher, build_http_client

__all__ = ["HttpAssetFetcher", "build_http_client"]
