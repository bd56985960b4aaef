"""
Row-schema descriptions for the account-scoped resource kinds.

A ResourceSchema tells the generic repository and the validation gate which
fields a client may write, which of them are required on creation, and which
participate in per-account uniqueness.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple, Type

from pydantic import BaseModel

from mailshrimp_api.db.models import Contact, Message
from .contacts import ContactCreate, ContactRead, ContactUpdate
from .messages import MessageCreate, MessageRead, MessageUpdate


@dataclass(frozen=True)
class ResourceSchema:
    """Description of one resource kind."""
    kind: str
    model: Type[Any]
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]
    read_model: Type[BaseModel]
    required_on_create: Tuple[str, ...]
    unique_fields: Tuple[str, ...] = ()

    @property
    def writable_fields(self) -> Tuple[str, ...]:
        return tuple(self.update_model.model_fields)

    def recognized(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the writable fields present in payload, keyed by attribute name.

        Keys are matched by their JSON alias (``accountEmailId``) or attribute
        name (``account_email_id``).
        """
        found: Dict[str, Any] = {}
        for name, info in self.update_model.model_fields.items():
            if info.alias and info.alias in payload:
                found[name] = payload[info.alias]
            elif name in payload:
                found[name] = payload[name]
        return found

    def alias_of(self, name: str) -> str:
        info = self.update_model.model_fields[name]
        return info.alias or name


CONTACTS = ResourceSchema(
    kind="contact",
    model=Contact,
    create_model=ContactCreate,
    update_model=ContactUpdate,
    read_model=ContactRead,
    required_on_create=("name", "email"),
    unique_fields=("email",),
)

MESSAGES = ResourceSchema(
    kind="message",
    model=Message,
    create_model=MessageCreate,
    update_model=MessageUpdate,
    read_model=MessageRead,
    required_on_create=("account_email_id",),
)
