from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from mailshrimp_api.db.base import AccountMixin, Base, IntegerPkMixin, StatusMixin, TimestampMixin


class Message(IntegerPkMixin, AccountMixin, StatusMixin, TimestampMixin, Base):
    """Outbound message drafted by an account."""
    __tablename__ = "messages"

    # References an account email managed by the accounts service (no local FK).
    account_email_id: Mapped[int] = mapped_column(Integer, nullable=False)
    subject: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
