# services/validation.py
"""
Payload rules checked before a record is created.

These are pure functions over the payload. Existence of the referenced
property is a storage lookup and is checked by the services themselves.
Update operations do not call these rules.
"""
from errors import ValidationError
from schemas import (
     MAINTENANCE_STATUSES,
     LeaseAgreementPayload,
     MaintenanceRequestPayload,
     PropertyPayload,
)


def validate_property_payload(payload: PropertyPayload) -> None:
     if not payload.address or not payload.owner:
          raise ValidationError("Address and owner are required")


def validate_lease_agreement_payload(payload: LeaseAgreementPayload) -> None:
     if not payload.tenant:
          raise ValidationError("Tenant name is required")
     if payload.start_date >= payload.end_date:
          raise ValidationError("Invalid dates. Start date must be before end date")


def validate_maintenance_request_payload(payload: MaintenanceRequestPayload) -> None:
     if payload.status not in MAINTENANCE_STATUSES:
          raise ValidationError(
               "Invalid status. Status must be either 'pending' or 'completed'"
          )
