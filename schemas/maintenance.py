# schemas/maintenance.py
"""
Pydantic schemas for maintenance requests.
"""
from pydantic import BaseModel, ConfigDict, Field

from .storable import Storable, U64

MAINTENANCE_STATUSES = ("pending", "completed")


class MaintenanceRequestPayload(BaseModel):
     """Body for creating or replacing a maintenance request."""
     property_id: U64 = Field(..., description="Property ID (must exist on create)")
     description: str = Field(..., description="What needs fixing")
     status: str = Field(..., description="'pending' or 'completed' (checked on create)")
     priority: str = Field(..., description="Free-text priority, e.g. 'high'")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": 0,
                    "description": "Leaking kitchen faucet",
                    "status": "pending",
                    "priority": "high"
               }
          }
     )


class MaintenanceRequest(Storable):
     """Stored maintenance request."""
     id: U64
     property_id: U64
     description: str
     status: str
     created_at: U64
     priority: str
