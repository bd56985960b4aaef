"""
ORM models for the account-scoped resources.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .contacts import Contact  # noqa: F401
from .messages import Message  # noqa: F401
