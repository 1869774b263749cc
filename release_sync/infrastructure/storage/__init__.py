"""Non-database key-value store backends."""

from .memory import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore"]
