from .storable import Storable, U64, U64_MAX
from .property import Property, PropertyPayload
from .lease import LeaseAgreement, LeaseAgreementPayload
from .maintenance import MaintenanceRequest, MaintenanceRequestPayload, MAINTENANCE_STATUSES

__all__ = [
     "Storable",
     "U64",
     "U64_MAX",
     "Property",
     "PropertyPayload",
     "LeaseAgreement",
     "LeaseAgreementPayload",
     "MaintenanceRequest",
     "MaintenanceRequestPayload",
     "MAINTENANCE_STATUSES",
]
