# services/property_service.py
"""
Property Service - create, read, update and delete property records.

Operations raise the tagged errors from errors.py; the API layer turns
them into HTTP responses.
"""
import logging
from typing import List

from errors import NotFound
from schemas import Property, PropertyPayload
from services.state import AppState
from services.validation import validate_property_payload

logger = logging.getLogger(__name__)


class PropertyService:
     """Service class for property records."""

     @staticmethod
     def create_property(state: AppState, payload: PropertyPayload) -> Property:
          """
          Create a property.

          Args:
               state: Application state
               payload: Property details

          Returns:
               The stored property

          Raises:
               ValidationError: If address or owner is empty
          """
          validate_property_payload(payload)

          property_ = Property(
               id=state.id_counter.next_id(),
               address=payload.address,
               owner=payload.owner,
               valuation=payload.valuation,
               status=payload.status,
               created_at=state.clock.now(),
          )
          state.properties.insert(property_.id, property_)
          logger.info("Created property id=%s", property_.id)
          return property_.model_copy()

     @staticmethod
     def get_property(state: AppState, property_id: int) -> Property:
          """
          Fetch one property.

          Raises:
               NotFound: If no property has this id
          """
          property_ = state.properties.get(property_id)
          if property_ is None:
               raise NotFound(f"Property with id={property_id} not found")
          return property_

     @staticmethod
     def update_property(state: AppState, property_id: int, payload: PropertyPayload) -> Property:
          """
          Replace every mutable field of a property. id and created_at are kept.

          The create-time rules are not re-checked here: an update may set an
          empty address or owner.

          Raises:
               NotFound: If no property has this id
          """
          existing = PropertyService.get_property(state, property_id)
          updated = existing.model_copy(
               update={
                    "address": payload.address,
                    "owner": payload.owner,
                    "valuation": payload.valuation,
                    "status": payload.status,
               }
          )
          state.properties.insert(property_id, updated)
          logger.info("Updated property id=%s", property_id)
          return updated.model_copy()

     @staticmethod
     def delete_property(state: AppState, property_id: int) -> None:
          """
          Remove a property. Leases and maintenance requests pointing at it
          are left untouched.

          Raises:
               NotFound: If no property has this id
          """
          if state.properties.remove(property_id) is None:
               raise NotFound(f"Property with id={property_id} not found")
          logger.info("Deleted property id=%s", property_id)

     @staticmethod
     def list_properties(state: AppState) -> List[Property]:
          """All properties in ascending id order. Empty list if there are none."""
          return state.properties.values()

     @staticmethod
     def get_all_properties(state: AppState) -> List[Property]:
          """
          All properties in ascending id order.

          Raises:
               NotFound: If there are no properties. An empty table is reported
                    as an error rather than an empty list.
          """
          properties = PropertyService.list_properties(state)
          if not properties:
               raise NotFound("No properties found.")
          return properties
