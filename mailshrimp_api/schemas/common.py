from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    message: str


class ErrorInfo(BaseModel):
    type: str = Field(..., description="Error code, e.g. not_found or validation_error")
    message: str
    details: Optional[Any] = Field(default=None, description="Per-field issues, when there are any")


# PUBLIC_INTERFACE
class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    status: int
    error: ErrorInfo
    correlation_id: Optional[str] = None
    account_id: Optional[str] = Field(default=None, description="Set once the token has been resolved")
    path: Optional[str] = None
    method: Optional[str] = None
    timestamp: datetime
