# routers/properties.py
"""
Property API routes.

Provides create, read, update and delete for property records.
Errors raised by the service are turned into tagged JSON responses by the
handler registered in main.py.
"""
from typing import List
from fastapi import APIRouter, Depends, Path, status

from dependencies import get_state
from schemas import Property, PropertyPayload, U64_MAX
from services.property_service import PropertyService
from services.state import AppState

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.post(
     "",
     response_model=Property,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new property"
)
def create_property(
     payload: PropertyPayload,
     state: AppState = Depends(get_state)
):
     """
     Create a property.

     - **address**: Street address (must not be empty)
     - **owner**: Owner name (must not be empty)
     - **valuation**: Current valuation
     - **status**: Free-text status
     """
     return PropertyService.create_property(state, payload)


@router.get(
     "",
     response_model=List[Property],
     summary="List all properties"
)
def get_all_properties(state: AppState = Depends(get_state)):
     """
     Retrieve every property in ascending id order.

     Responds 404 when there are no properties at all.
     """
     return PropertyService.get_all_properties(state)


@router.get(
     "/{property_id}",
     response_model=Property,
     summary="Get property by ID"
)
def get_property(
     property_id: int = Path(..., ge=0, le=U64_MAX),
     state: AppState = Depends(get_state)
):
     return PropertyService.get_property(state, property_id)


@router.put(
     "/{property_id}",
     response_model=Property,
     summary="Update property"
)
def update_property(
     payload: PropertyPayload,
     property_id: int = Path(..., ge=0, le=U64_MAX),
     state: AppState = Depends(get_state)
):
     """
     Replace all fields of a property except id and created_at.

     Note: the create-time rules (non-empty address and owner) are not applied.
     """
     return PropertyService.update_property(state, property_id, payload)


@router.delete(
     "/{property_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete property"
)
def delete_property(
     property_id: int = Path(..., ge=0, le=U64_MAX),
     state: AppState = Depends(get_state)
):
     """
     Delete a property by ID.

     Note: leases and maintenance requests that reference it are kept.
     """
     PropertyService.delete_property(state, property_id)
     return None
