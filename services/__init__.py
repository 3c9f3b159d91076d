from .clock import Clock, SystemClock
from .stable_storage import StableBTreeMap, IdAllocator
from .state import AppState
from .property_service import PropertyService
from .lease_service import LeaseService
from .maintenance_service import MaintenanceService

__all__ = [
     "Clock",
     "SystemClock",
     "StableBTreeMap",
     "IdAllocator",
     "AppState",
     "PropertyService",
     "LeaseService",
     "MaintenanceService",
]
