from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from mailshrimp_api.core.deps import get_token
from mailshrimp_api.db.session import get_async_session
from mailshrimp_api.schemas.auth import Token
from mailshrimp_api.schemas.contacts import ContactRead
from mailshrimp_api.services.resources import ContactController

router = APIRouter(prefix="/contacts", tags=["Contacts"])


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=List[ContactRead],
    summary="List contacts",
    description="List the contacts of the authenticated account. REMOVED contacts are hidden unless includeRemoved=true.",
)
async def get_contacts(
    include_removed: bool = Query(False, alias="includeRemoved"),
    token: Token = Depends(get_token),
    session: AsyncSession = Depends(get_async_session),
) -> List[ContactRead]:
    rows = await ContactController(session).list(token, include_removed)
    return [ContactRead.model_validate(x) for x in rows]


# PUBLIC_INTERFACE
@router.get(
    "/{contact_id}",
    response_model=ContactRead,
    summary="Get contact",
    responses={400: {"description": "Malformed id"}, 404: {"description": "Contact not found"}},
)
async def get_contact(
    contact_id: str = Path(..., description="Contact id"),
    token: Token = Depends(get_token),
    session: AsyncSession = Depends(get_async_session),
) -> ContactRead:
    row = await ContactController(session).get(contact_id, token)
    return ContactRead.model_validate(row)


# PUBLIC_INTERFACE
@router.post(
    "/",
    response_model=ContactRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create contact",
    description="Create a contact for the authenticated account. The email must not be in use by another non-removed contact.",
    responses={400: {"description": "Email already in use"}, 422: {"description": "Invalid payload"}},
)
async def add_contact(
    body: Dict[str, Any] = Body(...),
    token: Token = Depends(get_token),
    session: AsyncSession = Depends(get_async_session),
) -> ContactRead:
    row = await ContactController(session).create(body, token)
    return ContactRead.model_validate(row)


# PUBLIC_INTERFACE
@router.patch(
    "/{contact_id}",
    response_model=ContactRead,
    summary="Update contact",
    description="Partially update a contact; only the fields sent are changed.",
    responses={
        400: {"description": "Malformed id"},
        404: {"description": "Contact not found"},
        422: {"description": "Invalid payload"},
    },
)
async def set_contact(
    contact_id: str = Path(..., description="Contact id"),
    body: Dict[str, Any] = Body(...),
    token: Token = Depends(get_token),
    session: AsyncSession = Depends(get_async_session),
) -> ContactRead:
    row = await ContactController(session).update(contact_id, body, token)
    return ContactRead.model_validate(row)


# PUBLIC_INTERFACE
@router.delete(
    "/{contact_id}",
    response_model=ContactRead,
    summary="Delete contact",
    description="Soft delete (status REMOVED) by default; force=true destroys the contact and returns 204.",
    responses={204: {"description": "Contact destroyed"}, 404: {"description": "Contact not found"}},
)
async def delete_contact(
    contact_id: str = Path(..., description="Contact id"),
    force: Optional[str] = Query(None, description="Hard delete when exactly \"true\""),
    token: Token = Depends(get_token),
    session: AsyncSession = Depends(get_async_session),
):
    row = await ContactController(session).delete(contact_id, token, force=force == "true")
    if row is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return ContactRead.model_validate(row)
