"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for each resource kind and take
the owning account explicitly on every call.
"""

from .base import BaseRepository, ResourceRepository  # noqa: F401
from .contacts import ContactRepository  # noqa: F401
from .messages import MessageRepository  # noqa: F401
