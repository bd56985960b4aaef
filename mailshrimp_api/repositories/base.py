from __future__ import annotations

import logging
from typing import Any, Generic, List, Mapping, Optional, TypeVar

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mailshrimp_api.core.errors import ConstraintViolation
from mailshrimp_api.db.base import Base, ResourceStatus
from mailshrimp_api.schemas.resources import ResourceSchema

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

REMOVED = ResourceStatus.REMOVED.value


class BaseRepository:
    """Holds the request session; commits translate integrity errors."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConstraintViolation(details={"reason": str(exc.orig)}) from exc


class ResourceRepository(BaseRepository, Generic[ModelT]):
    """
    Generic account-scoped repository for resources with an ACTIVE/REMOVED lifecycle.

    Every operation takes the owning account explicitly and filters on it, so a
    row owned by another account is indistinguishable from a missing one.

    Usage:
        class ContactRepository(ResourceRepository[Contact]):
            schema = CONTACTS
    """

    schema: ResourceSchema

    @property
    def model(self) -> type[ModelT]:
        return self.schema.model

    def _scoped(self, account_id: int) -> Select:
        return select(self.model).where(self.model.account_id == account_id)

    def _writable(self, values: Mapping[str, Any], *, allow_status: bool = False) -> dict[str, Any]:
        allowed = set(self.schema.writable_fields)
        if allow_status:
            allowed.add("status")
        return {k: v for k, v in values.items() if k in allowed}

    async def _ensure_unique(
        self, values: Mapping[str, Any], account_id: int, exclude_id: Optional[int] = None
    ) -> None:
        for name in self.schema.unique_fields:
            if name not in values:
                continue
            stmt = select(self.model.id).where(
                self.model.account_id == account_id,
                getattr(self.model, name) == values[name],
                self.model.status != REMOVED,
            )
            if exclude_id is not None:
                stmt = stmt.where(self.model.id != exclude_id)
            taken = await self.session.scalar(stmt.limit(1))
            if taken is not None:
                raise ConstraintViolation(
                    f"{self.schema.kind} {name} already in use", details={"field": name}
                )

    async def find_all(self, account_id: int, include_removed: bool = False) -> List[ModelT]:
        stmt = self._scoped(account_id)
        if not include_removed:
            stmt = stmt.where(self.model.status != REMOVED)
        rows = await self.session.scalars(stmt.order_by(self.model.id))
        return list(rows)

    async def find_by_id(self, id: int, account_id: int) -> Optional[ModelT]:
        return await self.session.scalar(self._scoped(account_id).where(self.model.id == id))

    async def add(self, values: Mapping[str, Any], account_id: int) -> ModelT:
        """Insert an ACTIVE row for the account; raises ConstraintViolation on a uniqueness conflict."""
        fields = self._writable(values)
        await self._ensure_unique(fields, account_id)
        row = self.model(**fields, account_id=account_id, status=ResourceStatus.ACTIVE.value)
        self.session.add(row)
        await self.commit()
        await self.session.refresh(row)
        logger.info("Created %s id=%s", self.schema.kind, row.id)
        return row

    async def set(self, id: int, values: Mapping[str, Any], account_id: int) -> Optional[ModelT]:
        """
        Apply a partial update to a row owned by the account.

        Only writable fields and status are applied; account_id is never
        overwritten. Status may only move to REMOVED.
        """
        row = await self.find_by_id(id, account_id)
        if row is None:
            return None
        fields = self._writable(values, allow_status=True)
        status = fields.get("status")
        if status is not None and status != REMOVED:
            raise ValueError(f"Unsupported status transition to {status!r}")
        if row.status != REMOVED:
            await self._ensure_unique(fields, account_id, exclude_id=row.id)
        for name, value in fields.items():
            setattr(row, name, value)
        await self.commit()
        await self.session.refresh(row)
        return row

    async def remove_by_id(self, id: int, account_id: int) -> bool:
        """Hard delete; returns False when the account owns no such row."""
        result = await self.session.execute(
            delete(self.model).where(self.model.id == id, self.model.account_id == account_id)
        )
        await self.commit()
        removed = bool(result.rowcount)
        if removed:
            logger.info("Destroyed %s id=%s", self.schema.kind, id)
        return removed
