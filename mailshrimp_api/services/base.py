from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession


class BaseService:
    """
    Base class for request-scoped services. Holds the session shared by the
    repositories a service drives; no state survives the request.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
