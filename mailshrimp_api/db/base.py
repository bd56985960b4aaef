from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import DateTime, Integer, MetaData, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# Standardized naming convention for alembic-friendly constraints/indexes.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class ResourceStatus(str, enum.Enum):
    """Lifecycle status shared by contacts and messages."""
    ACTIVE = "ACTIVE"
    REMOVED = "REMOVED"


class Base(DeclarativeBase):
    """Declarative base class with metadata naming conventions."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class IntegerPkMixin:
    """Mixin that provides an auto-incrementing integer primary key."""
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    """Mixin that provides created_at and updated_at timestamp columns."""
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class AccountMixin:
    """Mixin that provides the owning account (tenant) column."""
    account_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)


class StatusMixin:
    """Mixin that provides the ACTIVE/REMOVED lifecycle status."""
    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=ResourceStatus.ACTIVE.value,
        server_default=ResourceStatus.ACTIVE.value,
    )
