from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from mailshrimp_api.db.base import ResourceStatus


class MessageRead(BaseModel):
    """Message read model."""
    id: int = Field(..., description="Message ID")
    account_id: int = Field(..., description="Owning account")
    account_email_id: int = Field(..., description="Sender account email")
    subject: Optional[str] = Field(None)
    body: Optional[str] = Field(None)
    status: ResourceStatus = Field(..., description="ACTIVE or REMOVED")
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class MessageCreate(BaseModel):
    """Create message payload."""
    account_email_id: int = Field(..., description="Sender account email id")
    subject: Optional[str] = Field(None)
    body: Optional[str] = Field(None)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MessageUpdate(BaseModel):
    """Partial update payload; only the fields sent are applied."""
    account_email_id: Optional[int] = Field(None)
    subject: Optional[str] = Field(None)
    body: Optional[str] = Field(None)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
