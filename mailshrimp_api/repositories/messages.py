from __future__ import annotations

from mailshrimp_api.db.models import Message
from mailshrimp_api.schemas.resources import MESSAGES
from .base import ResourceRepository


class MessageRepository(ResourceRepository[Message]):
    """Repository for messages."""

    schema = MESSAGES
