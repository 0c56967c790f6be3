"""
SQLAlchemy ORM models for persistent storage.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class StoredValueDB(Base):
    """
    A single key-value pair in durable storage.

    Session snapshots are written here as JSON text under one fixed key.
    """

    __tablename__ = "session_storage"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<StoredValueDB(key={self.key}, length={len(self.value)})>"
