from __future__ import annotations

import logging

from fastapi import HTTPException, Request, Security, status
from fastapi.security import APIKeyHeader
from jose import JWTError

from mailshrimp_api.core.logging import account_id_var
from mailshrimp_api.core.security import decode_token
from mailshrimp_api.core.settings import get_app_settings
from mailshrimp_api.schemas.auth import Token

logger = logging.getLogger(__name__)

token_header = APIKeyHeader(
    name=get_app_settings().TOKEN_HEADER,
    auto_error=False,
    description="Access token issued by the accounts service",
)


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


# PUBLIC_INTERFACE
async def get_token(request: Request, raw_token: str | None = Security(token_header)) -> Token:
    """
    Resolve the caller's account from the access token header.

    Raises:
        HTTPException: 401 if the header is missing, the token is invalid or
        expired, or it carries no usable accountId claim.
    """
    if not raw_token:
        raise _unauthenticated("Token is required")
    try:
        payload = decode_token(raw_token)
    except JWTError:
        logger.info("Rejected invalid access token")
        raise _unauthenticated("Invalid token")

    account_id = payload.get("accountId")
    if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
        raise _unauthenticated("Invalid token")

    account_id_var.set(str(account_id))
    request.state.account_id = str(account_id)
    return Token(account_id=account_id, jwt=raw_token)
