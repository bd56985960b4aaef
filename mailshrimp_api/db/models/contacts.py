from __future__ import annotations

from typing import Optional

from sqlalchemy import Index, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from mailshrimp_api.db.base import AccountMixin, Base, IntegerPkMixin, StatusMixin, TimestampMixin

_NOT_REMOVED = text("status <> 'REMOVED'")


class Contact(IntegerPkMixin, AccountMixin, StatusMixin, TimestampMixin, Base):
    """Address book entry owned by an account."""
    __tablename__ = "contacts"
    __table_args__ = (
        # Email is unique per account among contacts that were not removed.
        Index(
            "uq_contacts_account_email_active",
            "account_id",
            "email",
            unique=True,
            postgresql_where=_NOT_REMOVED,
            sqlite_where=_NOT_REMOVED,
        ),
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
