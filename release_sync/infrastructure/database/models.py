"""SQLAlchemy ORM models."""

from sqlalchemy import Column, DateTime, LargeBinary, String
from sqlalchemy.sql import func

from release_sync.infrastructure.database.base import Base


class KeyValueEntry(Base):
    __tablename__ = "kv_entries"

    key = Column(String(512), primary_key=True)
    value = Column(LargeBinary, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
