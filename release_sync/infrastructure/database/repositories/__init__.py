"""SQLAlchemy-backed repository implementations."""

from .kv_repository import SqlKeyValueStore

__all__ = [
    "SqlKeyValueStore",
]
