# services/lease_service.py
"""
Lease Service - business logic for lease agreements.

A lease must point at an existing property when it is created. That link
is not checked again later, so deleting the property leaves the lease as is.
"""
import logging
from typing import List

from errors import NotFound
from schemas import LeaseAgreement, LeaseAgreementPayload
from services.state import AppState
from services.validation import validate_lease_agreement_payload

logger = logging.getLogger(__name__)


class LeaseService:
     """Service class for lease agreement records."""

     @staticmethod
     def create_lease_agreement(state: AppState, payload: LeaseAgreementPayload) -> LeaseAgreement:
          """
          Create a lease agreement.

          Args:
               state: Application state
               payload: Lease details

          Returns:
               The stored lease agreement

          Raises:
               ValidationError: If tenant is empty or start_date >= end_date
               NotFound: If property_id does not exist
          """
          validate_lease_agreement_payload(payload)
          if not state.properties.contains_key(payload.property_id):
               raise NotFound("Property not found")

          lease = LeaseAgreement(
               id=state.id_counter.next_id(),
               property_id=payload.property_id,
               tenant=payload.tenant,
               rent=payload.rent,
               start_date=payload.start_date,
               end_date=payload.end_date,
               created_at=state.clock.now(),
               digital_signature=payload.digital_signature,
          )
          state.lease_agreements.insert(lease.id, lease)
          logger.info("Created lease agreement id=%s for property id=%s", lease.id, lease.property_id)
          return lease.model_copy()

     @staticmethod
     def get_lease_agreement(state: AppState, lease_id: int) -> LeaseAgreement:
          lease = state.lease_agreements.get(lease_id)
          if lease is None:
               raise NotFound(f"Lease agreement with id={lease_id} not found")
          return lease

     @staticmethod
     def update_lease_agreement(
          state: AppState,
          lease_id: int,
          payload: LeaseAgreementPayload
     ) -> LeaseAgreement:
          """
          Replace every mutable field of a lease, including property_id.

          Neither the date rule nor the property reference is re-checked.

          Raises:
               NotFound: If no lease has this id
          """
          existing = LeaseService.get_lease_agreement(state, lease_id)
          updated = existing.model_copy(
               update={
                    "property_id": payload.property_id,
                    "tenant": payload.tenant,
                    "rent": payload.rent,
                    "start_date": payload.start_date,
                    "end_date": payload.end_date,
                    "digital_signature": payload.digital_signature,
               }
          )
          state.lease_agreements.insert(lease_id, updated)
          logger.info("Updated lease agreement id=%s", lease_id)
          return updated.model_copy()

     @staticmethod
     def delete_lease_agreement(state: AppState, lease_id: int) -> None:
          if state.lease_agreements.remove(lease_id) is None:
               raise NotFound(f"Lease agreement with id={lease_id} not found")
          logger.info("Deleted lease agreement id=%s", lease_id)

     @staticmethod
     def list_lease_agreements(state: AppState) -> List[LeaseAgreement]:
          return state.lease_agreements.values()

     @staticmethod
     def get_all_lease_agreements(state: AppState) -> List[LeaseAgreement]:
          """
          All lease agreements in ascending id order.

          Raises:
               NotFound: If there are none
          """
          leases = LeaseService.list_lease_agreements(state)
          if not leases:
               raise NotFound("No lease agreements found.")
          return leases
