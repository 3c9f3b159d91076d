# routers/lease_agreements.py
"""
Lease agreement API routes.
"""
from typing import List
from fastapi import APIRouter, Depends, Path, status

from dependencies import get_state
from schemas import LeaseAgreement, LeaseAgreementPayload, U64_MAX
from services.lease_service import LeaseService
from services.state import AppState

router = APIRouter(prefix="/api/lease-agreements", tags=["lease agreements"])


@router.post(
     "",
     response_model=LeaseAgreement,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new lease agreement"
)
def create_lease_agreement(
     payload: LeaseAgreementPayload,
     state: AppState = Depends(get_state)
):
     """
     Create a lease agreement for an existing property.

     - **property_id**: Property ID (must exist)
     - **tenant**: Tenant name (must not be empty)
     - **rent**: Rent amount
     - **start_date** / **end_date**: start_date must be before end_date
     - **digital_signature**: Signature of the agreement
     """
     return LeaseService.create_lease_agreement(state, payload)


@router.get(
     "",
     response_model=List[LeaseAgreement],
     summary="List all lease agreements"
)
def get_all_lease_agreements(state: AppState = Depends(get_state)):
     """Responds 404 when there are no lease agreements."""
     return LeaseService.get_all_lease_agreements(state)


@router.get(
     "/{lease_id}",
     response_model=LeaseAgreement,
     summary="Get lease agreement by ID"
)
def get_lease_agreement(
     lease_id: int = Path(..., ge=0, le=U64_MAX),
     state: AppState = Depends(get_state)
):
     return LeaseService.get_lease_agreement(state, lease_id)


@router.put(
     "/{lease_id}",
     response_model=LeaseAgreement,
     summary="Update lease agreement"
)
def update_lease_agreement(
     payload: LeaseAgreementPayload,
     lease_id: int = Path(..., ge=0, le=U64_MAX),
     state: AppState = Depends(get_state)
):
     return LeaseService.update_lease_agreement(state, lease_id, payload)


@router.delete(
     "/{lease_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete lease agreement"
)
def delete_lease_agreement(
     lease_id: int = Path(..., ge=0, le=U64_MAX),
     state: AppState = Depends(get_state)
):
     LeaseService.delete_lease_agreement(state, lease_id)
     return None
