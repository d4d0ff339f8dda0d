"""Base model for SQLAlchemy ORM."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    """Timezone-aware current UTC time used for column defaults."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base shared by every marketplace model."""

    def __repr__(self):
        """String representation of the model."""
        values = ', '.join(
            f"{c.name}={getattr(self, c.name)!r}"
            for c in list(self.__table__.columns)[:3]
        )
        return f"<{self.__class__.__name__}({values})>"


class TimestampMixin:
    """
    Common timestamp columns.

    Provides created_at and updated_at, the latter refreshed on every update.
    """

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False
    )
