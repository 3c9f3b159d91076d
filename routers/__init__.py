from .properties import router as properties_router
from .lease_agreements import router as lease_agreements_router
from .maintenance_requests import router as maintenance_requests_router

__all__ = [
     "properties_router",
     "lease_agreements_router",
     "maintenance_requests_router",
]
