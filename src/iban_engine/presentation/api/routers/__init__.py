from iban_engine.presentation.api.routers.countries import router as countries_router
from iban_engine.presentation.api.routers.ibans import router as ibans_router

__all__ = [
    "countries_router",
    "ibans_router",
]
