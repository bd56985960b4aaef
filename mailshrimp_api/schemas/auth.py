from __future__ import annotations

from pydantic import BaseModel, Field


class Token(BaseModel):
    """Identity resolved from the request's access token."""
    account_id: int = Field(..., gt=0, description="Account (tenant) the caller acts for")
    jwt: str = Field(..., description="Raw access token as received")
