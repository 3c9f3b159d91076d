# schemas/lease.py
"""
Pydantic schemas for lease agreements.
"""
from pydantic import BaseModel, ConfigDict, Field

from .storable import Storable, U64


class LeaseAgreementPayload(BaseModel):
     """Body for creating or replacing a lease agreement."""
     property_id: U64 = Field(..., description="Property ID (must exist on create)")
     tenant: str = Field(..., description="Tenant name (required on create)")
     rent: float = Field(..., description="Rent amount")
     start_date: U64 = Field(..., description="Lease start, seconds since the epoch")
     end_date: U64 = Field(..., description="Lease end, must be after start_date on create")
     digital_signature: str = Field(..., description="Signature of the agreement")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": 0,
                    "tenant": "Carol",
                    "rent": 1800.0,
                    "start_date": 1767225600,
                    "end_date": 1798761600,
                    "digital_signature": "sig-3f9a1c"
               }
          }
     )


class LeaseAgreement(Storable):
     """Stored lease agreement. property_id is checked only when the lease is created."""
     id: U64
     property_id: U64
     tenant: str
     rent: float
     start_date: U64
     end_date: U64
     created_at: U64
     digital_signature: str
