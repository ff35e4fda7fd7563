"""REST API presentation layer for the IBAN engine.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain exception to HTTP mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from iban_engine.presentation.api.app import create_app

__all__ = ["create_app"]
