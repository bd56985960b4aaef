"""
Core application utilities for settings, logging, errors and FastAPI dependencies.

This package provides:
- Application-level settings (separate from DB settings)
- Token context resolution (account extraction from the access token)
- Domain errors mapped to HTTP status codes
"""
