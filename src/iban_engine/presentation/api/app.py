"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from iban_config import Settings, get_settings
from iban_engine.presentation.api.dependencies import get_registry
from iban_engine.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from iban_engine.presentation.api.routers import countries_router, ibans_router


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the application with:
    - Console output with timestamps and module names
    - Configurable log level for iban_engine modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("iban_engine").setLevel(log_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "IBANs",
        "description": """IBAN parsing and validation (ISO 13616).

**Checks, in order:**
- Characters: ASCII letters, digits and spaces only
- Length: 5 to 34 characters
- Country code and check digits
- Country known to the registry, BBAN length and format
- ISO 7064 MOD 97-10 checksum

**BBAN fields:**
- Bank identifier, branch identifier and national checksum where the
  country's registry entry declares them
- The national checksum is extracted, not verified
""",
    },
    {
        "name": "Countries",
        "description": "Per-country IBAN structure from the IBAN registry.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting IBAN API v%s...", API_VERSION)
    # Load the registry before the first request
    registry = get_registry()
    logger.info("Registry ready with %d countries", len(registry))
    yield
    logger.info("Shutting down IBAN API...")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(ibans_router, prefix="/ibans", tags=["IBANs"])
    v1_router.include_router(
        countries_router,
        prefix="/countries",
        tags=["Countries"],
    )

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Validation and BBAN decomposition of **IBANs** (ISO 13616).",
        version=API_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Returns service status, version info and registry size.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
            "countries": len(get_registry()),
        }

    return app


# Application instance for uvicorn
app = create_app()
