# routers/maintenance_requests.py
"""
Maintenance request API routes.
"""
from typing import List
from fastapi import APIRouter, Depends, Path, status

from dependencies import get_state
from schemas import MaintenanceRequest, MaintenanceRequestPayload, U64_MAX
from services.maintenance_service import MaintenanceService
from services.state import AppState

router = APIRouter(prefix="/api/maintenance-requests", tags=["maintenance requests"])


@router.post(
     "",
     response_model=MaintenanceRequest,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new maintenance request"
)
def create_maintenance_request(
     payload: MaintenanceRequestPayload,
     state: AppState = Depends(get_state)
):
     """
     Create a maintenance request for an existing property.

     - **property_id**: Property ID (must exist)
     - **description**: What needs fixing
     - **status**: 'pending' or 'completed'
     - **priority**: Free-text priority
     """
     return MaintenanceService.create_maintenance_request(state, payload)


@router.get(
     "",
     response_model=List[MaintenanceRequest],
     summary="List all maintenance requests"
)
def get_all_maintenance_requests(state: AppState = Depends(get_state)):
     """Responds 404 when there are no maintenance requests."""
     return MaintenanceService.get_all_maintenance_requests(state)


@router.get(
     "/{request_id}",
     response_model=MaintenanceRequest,
     summary="Get maintenance request by ID"
)
def get_maintenance_request(
     request_id: int = Path(..., ge=0, le=U64_MAX),
     state: AppState = Depends(get_state)
):
     return MaintenanceService.get_maintenance_request(state, request_id)


@router.put(
     "/{request_id}",
     response_model=MaintenanceRequest,
     summary="Update maintenance request"
)
def update_maintenance_request(
     payload: MaintenanceRequestPayload,
     request_id: int = Path(..., ge=0, le=U64_MAX),
     state: AppState = Depends(get_state)
):
     """
     Replace all fields of a maintenance request except id and created_at.

     Note: status is not checked against 'pending' / 'completed' here.
     """
     return MaintenanceService.update_maintenance_request(state, request_id, payload)


@router.delete(
     "/{request_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete maintenance request"
)
def delete_maintenance_request(
     request_id: int = Path(..., ge=0, le=U64_MAX),
     state: AppState = Depends(get_state)
):
     MaintenanceService.delete_maintenance_request(state, request_id)
     return None
