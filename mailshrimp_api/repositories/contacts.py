from __future__ import annotations

from sqlalchemy import delete

from mailshrimp_api.db.models import Contact
from mailshrimp_api.schemas.resources import CONTACTS
from .base import ResourceRepository


class ContactRepository(ResourceRepository[Contact]):
    """Repository for contacts; email is unique per account among non-removed rows."""

    schema = CONTACTS

    async def remove_by_email(self, email: str, account_id: int) -> int:
        """Hard delete every contact of the account with this email (cleanup tooling)."""
        result = await self.session.execute(
            delete(Contact).where(Contact.account_id == account_id, Contact.email == email)
        )
        await self.commit()
        return result.rowcount or 0
