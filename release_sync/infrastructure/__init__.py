"""Infrastructure adapters (database, storage, GitHub)."""
