# ================================
# VALIDATION RULE TESTS (test_validation.py)
# ================================

import pytest

from errors import ValidationError
from schemas import LeaseAgreementPayload, MaintenanceRequestPayload, PropertyPayload
from services.validation import (
    validate_lease_agreement_payload,
    validate_maintenance_request_payload,
    validate_property_payload,
)


def lease_payload(**overrides) -> LeaseAgreementPayload:
    fields = dict(
        property_id=0,
        tenant="Carol",
        rent=1800.0,
        start_date=100,
        end_date=200,
        digital_signature="sig",
    )
    fields.update(overrides)
    return LeaseAgreementPayload(**fields)


class TestPropertyRules:

    def test_valid_payload_passes(self):
        validate_property_payload(
            PropertyPayload(address="1 Elm St", owner="Dana", valuation=0.0, status="")
        )

    @pytest.mark.parametrize("address, owner", [("", "Dana"), ("1 Elm St", ""), ("", "")])
    def test_empty_address_or_owner_fails(self, address, owner):
        payload = PropertyPayload(address=address, owner=owner, valuation=1.0, status="x")
        with pytest.raises(ValidationError) as exc_info:
            validate_property_payload(payload)
        assert exc_info.value.msg == "Address and owner are required"


class TestLeaseRules:

    def test_valid_payload_passes(self):
        validate_lease_agreement_payload(lease_payload())

    def test_empty_tenant_fails(self):
        with pytest.raises(ValidationError, match="Tenant name is required"):
            validate_lease_agreement_payload(lease_payload(tenant=""))

    @pytest.mark.parametrize("start, end", [(100, 50), (100, 100)])
    def test_start_not_before_end_fails(self, start, end):
        with pytest.raises(ValidationError, match="Start date must be before end date"):
            validate_lease_agreement_payload(lease_payload(start_date=start, end_date=end))


class TestMaintenanceRules:

    @pytest.mark.parametrize("status", ["pending", "completed"])
    def test_allowed_statuses_pass(self, status):
        validate_maintenance_request_payload(
            MaintenanceRequestPayload(property_id=0, description="", status=status, priority="")
        )

    @pytest.mark.parametrize("status", ["", "Pending", "in_progress", "done"])
    def test_other_statuses_fail(self, status):
        payload = MaintenanceRequestPayload(
            property_id=0, description="x", status=status, priority="low"
        )
        with pytest.raises(ValidationError):
            validate_maintenance_request_payload(payload)
