from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from mailshrimp_api.core.deps import get_token
from mailshrimp_api.db.session import get_async_session
from mailshrimp_api.schemas.auth import Token
from mailshrimp_api.schemas.messages import MessageRead
from mailshrimp_api.services.resources import MessageController

router = APIRouter(prefix="/messages", tags=["Messages"])


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=List[MessageRead],
    summary="List messages",
    description="List the messages of the authenticated account. REMOVED messages are hidden unless includeRemoved=true.",
)
async def get_messages(
    include_removed: bool = Query(False, alias="includeRemoved"),
    token: Token = Depends(get_token),
    session: AsyncSession = Depends(get_async_session),
) -> List[MessageRead]:
    rows = await MessageController(session).list(token, include_removed)
    return [MessageRead.model_validate(x) for x in rows]


# PUBLIC_INTERFACE
@router.get(
    "/{message_id}",
    response_model=MessageRead,
    summary="Get message",
    responses={400: {"description": "Malformed id"}, 404: {"description": "Message not found"}},
)
async def get_message(
    message_id: str = Path(..., description="Message id"),
    token: Token = Depends(get_token),
    session: AsyncSession = Depends(get_async_session),
) -> MessageRead:
    row = await MessageController(session).get(message_id, token)
    return MessageRead.model_validate(row)


# PUBLIC_INTERFACE
@router.post(
    "/",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create message",
    description="Create a message for the authenticated account. accountEmailId is required.",
    responses={422: {"description": "Invalid payload"}},
)
async def add_message(
    body: Dict[str, Any] = Body(...),
    token: Token = Depends(get_token),
    session: AsyncSession = Depends(get_async_session),
) -> MessageRead:
    row = await MessageController(session).create(body, token)
    return MessageRead.model_validate(row)


# PUBLIC_INTERFACE
@router.patch(
    "/{message_id}",
    response_model=MessageRead,
    summary="Update message",
    description="Partially update a message; only the fields sent are changed.",
    responses={
        400: {"description": "Malformed id"},
        404: {"description": "Message not found"},
        422: {"description": "Invalid payload"},
    },
)
async def set_message(
    message_id: str = Path(..., description="Message id"),
    body: Dict[str, Any] = Body(...),
    token: Token = Depends(get_token),
    session: AsyncSession = Depends(get_async_session),
) -> MessageRead:
    row = await MessageController(session).update(message_id, body, token)
    return MessageRead.model_validate(row)


# PUBLIC_INTERFACE
@router.delete(
    "/{message_id}",
    response_model=MessageRead,
    summary="Delete message",
    description="Soft delete (status REMOVED) by default; force=true destroys the message and returns 204.",
    responses={204: {"description": "Message destroyed"}, 404: {"description": "Message not found"}},
)
async def delete_message(
    message_id: str = Path(..., description="Message id"),
    force: Optional[str] = Query(None, description="Hard delete when exactly \"true\""),
    token: Token = Depends(get_token),
    session: AsyncSession = Depends(get_async_session),
):
    row = await MessageController(session).delete(message_id, token, force=force == "true")
    if row is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return MessageRead.model_validate(row)
