# services/state.py
"""
Application state handed to every record operation.

AppState bundles the id allocator, the three entity tables and the clock
for one database session. Services take it as their first argument instead
of reaching for globals, so each operation can be run against any session.
"""
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from models import MemoryId
from schemas import LeaseAgreement, MaintenanceRequest, Property
from services.clock import Clock, SystemClock
from services.stable_storage import IdAllocator, StableBTreeMap


@dataclass
class AppState:
     id_counter: IdAllocator
     properties: StableBTreeMap[Property]
     lease_agreements: StableBTreeMap[LeaseAgreement]
     maintenance_requests: StableBTreeMap[MaintenanceRequest]
     clock: Clock

     @classmethod
     def from_session(cls, db: Session, clock: Optional[Clock] = None) -> "AppState":
          """Bind every table to db. The clock defaults to the system clock."""
          return cls(
               id_counter=IdAllocator(db, MemoryId.ID_COUNTER),
               properties=StableBTreeMap(db, MemoryId.PROPERTIES, Property),
               lease_agreements=StableBTreeMap(db, MemoryId.LEASE_AGREEMENTS, LeaseAgreement),
               maintenance_requests=StableBTreeMap(
                    db, MemoryId.MAINTENANCE_REQUESTS, MaintenanceRequest
               ),
               clock=clock or SystemClock(),
          )
