"""
API route modules for the account-scoped resources.

This package contains subrouters for:
- Contacts: list, get, create, partial update, soft/hard delete
- Messages: same lifecycle as contacts

Routers are included from mailshrimp_api.api.main.
"""
