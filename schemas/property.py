# schemas/property.py
"""
Pydantic schemas for properties: the request payload and the stored record.
"""
from pydantic import BaseModel, ConfigDict, Field

from .storable import Storable, U64


class PropertyPayload(BaseModel):
     """Body for creating or replacing a property."""
     address: str = Field(..., description="Street address (required on create)")
     owner: str = Field(..., description="Owner name (required on create)")
     valuation: float = Field(..., description="Current valuation")
     status: str = Field(..., description="Free-text status, e.g. 'available'")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "address": "123 Main St",
                    "owner": "Alice",
                    "valuation": 500000.0,
                    "status": "available"
               }
          }
     )


class Property(Storable):
     """Stored property record."""
     id: U64
     address: str
     owner: str
     valuation: float
     status: str
     created_at: U64 = Field(..., description="Creation time in seconds since the epoch")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "id": 0,
                    "address": "123 Main St",
                    "owner": "Alice",
                    "valuation": 500000.0,
                    "status": "available",
                    "created_at": 1767225600
               }
          }
     )
