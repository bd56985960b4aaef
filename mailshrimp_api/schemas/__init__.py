"""
Public Pydantic schemas used by FastAPI routes, controllers, and tests.

Schemas are grouped by resource kind (contacts, messages) and also
include common reusable models such as the standard error envelope.
"""

from .common import ErrorResponse, MessageResponse  # noqa: F401
from .contacts import ContactCreate, ContactRead, ContactUpdate  # noqa: F401
from .messages import MessageCreate, MessageRead, MessageUpdate  # noqa: F401
