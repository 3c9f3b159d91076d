# services/maintenance_service.py
"""
Maintenance Service - business logic for maintenance requests.
"""
import logging
from typing import List

from errors import NotFound
from schemas import MaintenanceRequest, MaintenanceRequestPayload
from services.state import AppState
from services.validation import validate_maintenance_request_payload

logger = logging.getLogger(__name__)


class MaintenanceService:
     """Service class for maintenance request records."""

     @staticmethod
     def create_maintenance_request(
          state: AppState,
          payload: MaintenanceRequestPayload
     ) -> MaintenanceRequest:
          """
          Create a maintenance request.

          Args:
               state: Application state
               payload: Request details

          Returns:
               The stored maintenance request

          Raises:
               ValidationError: If status is not 'pending' or 'completed'
               NotFound: If property_id does not exist
          """
          validate_maintenance_request_payload(payload)
          if not state.properties.contains_key(payload.property_id):
               raise NotFound("Property not found")

          request = MaintenanceRequest(
               id=state.id_counter.next_id(),
               property_id=payload.property_id,
               description=payload.description,
               status=payload.status,
               created_at=state.clock.now(),
               priority=payload.priority,
          )
          state.maintenance_requests.insert(request.id, request)
          logger.info(
               "Created maintenance request id=%s for property id=%s",
               request.id,
               request.property_id,
          )
          return request.model_copy()

     @staticmethod
     def get_maintenance_request(state: AppState, request_id: int) -> MaintenanceRequest:
          request = state.maintenance_requests.get(request_id)
          if request is None:
               raise NotFound(f"Maintenance request with id={request_id} not found")
          return request

     @staticmethod
     def update_maintenance_request(
          state: AppState,
          request_id: int,
          payload: MaintenanceRequestPayload
     ) -> MaintenanceRequest:
          """
          Replace every mutable field of a maintenance request.

          The status rule is only enforced on create, so any status string is
          accepted here.

          Raises:
               NotFound: If no request has this id
          """
          # TODO: decide whether updates should enforce the create-time status rule
          existing = MaintenanceService.get_maintenance_request(state, request_id)
          updated = existing.model_copy(
               update={
                    "property_id": payload.property_id,
                    "description": payload.description,
                    "status": payload.status,
                    "priority": payload.priority,
               }
          )
          state.maintenance_requests.insert(request_id, updated)
          logger.info("Updated maintenance request id=%s", request_id)
          return updated.model_copy()

     @staticmethod
     def delete_maintenance_request(state: AppState, request_id: int) -> None:
          if state.maintenance_requests.remove(request_id) is None:
               raise NotFound(f"Maintenance request with id={request_id} not found")
          logger.info("Deleted maintenance request id=%s", request_id)

     @staticmethod
     def list_maintenance_requests(state: AppState) -> List[MaintenanceRequest]:
          return state.maintenance_requests.values()

     @staticmethod
     def get_all_maintenance_requests(state: AppState) -> List[MaintenanceRequest]:
          """
          All maintenance requests in ascending id order.

          Raises:
               NotFound: If there are none
          """
          requests = MaintenanceService.list_maintenance_requests(state)
          if not requests:
               raise NotFound("No maintenance requests found.")
          return requests
