from __future__ import annotations

import logging
import re
from typing import Any, Awaitable, Generic, List, Optional, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from mailshrimp_api.core.errors import BadRequest, NotFound, ResourceError, StoreFailure, Unprocessable
from mailshrimp_api.db.base import ResourceStatus
from mailshrimp_api.db.models import Contact, Message
from mailshrimp_api.repositories import ContactRepository, MessageRepository, ResourceRepository
from mailshrimp_api.schemas.auth import Token
from mailshrimp_api.services.base import BaseService
from mailshrimp_api.services.validation import Invalid, validate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
T = TypeVar("T")

_ID_PATTERN = re.compile(r"^[+-]?\d+$")
# Ids are stored as 32-bit integers.
_ID_MIN, _ID_MAX = -(2**31), 2**31 - 1


# PUBLIC_INTERFACE
def parse_id(raw: Optional[str]) -> int:
    """
    Parse a path id.

    Raises:
        BadRequest: if raw is not an integer literal, is zero, or is out of range.
    """
    if raw is None or not _ID_PATTERN.match(raw.strip()):
        raise BadRequest("id is required")
    value = int(raw)
    if value == 0 or not _ID_MIN <= value <= _ID_MAX:
        raise BadRequest("id is required")
    return value


class ResourceController(BaseService, Generic[ModelT]):
    """
    Translates requests for one resource kind into repository calls.

    The account always comes from the resolved token. Outcomes are reported by
    returning rows or raising a ResourceError subclass; any other failure of a
    repository call (driver, connection or SQL errors) surfaces as StoreFailure.
    """

    repository_class: type[ResourceRepository]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = self.repository_class(session)

    @property
    def kind(self) -> str:
        return self.repo.schema.kind

    async def _run(self, op: str, call: Awaitable[T]) -> T:
        try:
            return await call
        except ResourceError:
            raise
        except Exception as exc:
            logger.exception("%s %s failed", op, self.kind)
            raise StoreFailure() from exc

    # PUBLIC_INTERFACE
    async def list(self, token: Token, include_removed: bool = False) -> List[ModelT]:
        """Return the account's rows, hiding REMOVED ones unless asked."""
        return await self._run("list", self.repo.find_all(token.account_id, include_removed))

    # PUBLIC_INTERFACE
    async def get(self, raw_id: str, token: Token) -> ModelT:
        """Return one row owned by the account or raise NotFound."""
        rid = parse_id(raw_id)
        row = await self._run("get", self.repo.find_by_id(rid, token.account_id))
        if row is None:
            raise NotFound(f"{self.kind} not found")
        return row

    # PUBLIC_INTERFACE
    async def create(self, body: Any, token: Token) -> ModelT:
        """Validate and insert a new ACTIVE row for the account."""
        result = validate(body, self.repo.schema)
        if isinstance(result, Invalid):
            raise Unprocessable(result.reason, details=result.details)
        return await self._run("create", self.repo.add(result.values, token.account_id))

    # PUBLIC_INTERFACE
    async def update(self, raw_id: str, body: Any, token: Token) -> ModelT:
        """Apply the recognized fields of body to a row owned by the account."""
        rid = parse_id(raw_id)
        result = validate(body, self.repo.schema, partial=True)
        if isinstance(result, Invalid):
            raise Unprocessable(result.reason, details=result.details)
        row = await self._run("update", self.repo.set(rid, result.values, token.account_id))
        if row is None:
            raise NotFound(f"{self.kind} not found")
        return row

    # PUBLIC_INTERFACE
    async def delete(self, raw_id: str, token: Token, force: bool = False) -> Optional[ModelT]:
        """
        Soft delete (status REMOVED, returns the row) or, with force, hard delete
        (returns None).
        """
        rid = parse_id(raw_id)
        if force:
            removed = await self._run("remove", self.repo.remove_by_id(rid, token.account_id))
            if not removed:
                raise NotFound(f"{self.kind} not found")
            return None
        row = await self._run(
            "soft-remove",
            self.repo.set(rid, {"status": ResourceStatus.REMOVED.value}, token.account_id),
        )
        if row is None:
            raise NotFound(f"{self.kind} not found")
        return row


class ContactController(ResourceController[Contact]):
    repository_class = ContactRepository


class MessageController(ResourceController[Message]):
    repository_class = MessageRepository
