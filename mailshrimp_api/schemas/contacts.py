from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel

from mailshrimp_api.db.base import ResourceStatus


class ContactRead(BaseModel):
    """Contact read model."""
    id: int = Field(..., description="Contact ID")
    account_id: int = Field(..., description="Owning account")
    name: str = Field(..., description="Contact name")
    email: str = Field(..., description="Contact email (unique per account among non-removed contacts)")
    phone: Optional[str] = Field(None)
    status: ResourceStatus = Field(..., description="ACTIVE or REMOVED")
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class ContactCreate(BaseModel):
    """Create contact payload."""
    name: str = Field(..., min_length=1, description="Name")
    email: EmailStr = Field(..., description="Email")
    phone: Optional[str] = Field(None)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ContactUpdate(BaseModel):
    """Partial update payload; only the fields sent are applied."""
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = Field(None)
    phone: Optional[str] = Field(None)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
