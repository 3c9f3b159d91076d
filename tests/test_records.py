# ================================
# RECORD ENCODING TESTS (test_records.py)
# ================================

import math

import pytest
from pydantic import ValidationError as PydanticValidationError

from errors import RecordDecodingError, RecordEncodingError
from schemas import LeaseAgreement, MaintenanceRequest, Property, U64_MAX


class TestStorableEncoding:
    """Bounded byte encoding of stored records."""

    def test_property_round_trip(self):
        record = Property(
            id=0,
            address="123 Main St",
            owner="Alice",
            valuation=500000.0,
            status="available",
            created_at=1767225600,
        )
        assert Property.from_bytes(record.to_bytes()) == record

    def test_lease_round_trip_with_extreme_values(self):
        record = LeaseAgreement(
            id=U64_MAX,
            property_id=0,
            tenant="Zoë Ünal",
            rent=0.1 + 0.2,
            start_date=0,
            end_date=U64_MAX,
            created_at=1,
            digital_signature="",
        )
        decoded = LeaseAgreement.from_bytes(record.to_bytes())
        assert decoded == record
        assert decoded.rent == 0.1 + 0.2

    def test_non_finite_float_round_trip(self):
        record = Property(
            id=1,
            address="a",
            owner="b",
            valuation=float("inf"),
            status="",
            created_at=0,
        )
        decoded = Property.from_bytes(record.to_bytes())
        assert math.isinf(decoded.valuation)

    def test_encoding_over_ceiling_fails(self):
        record = MaintenanceRequest(
            id=1,
            property_id=0,
            description="d" * MaintenanceRequest.MAX_SIZE,
            status="pending",
            created_at=0,
            priority="low",
        )
        with pytest.raises(RecordEncodingError):
            record.to_bytes()

    def test_encoding_at_ceiling_succeeds(self):
        record = MaintenanceRequest(
            id=1,
            property_id=0,
            description="",
            status="pending",
            created_at=0,
            priority="low",
        )
        padding = MaintenanceRequest.MAX_SIZE - len(record.to_bytes())
        record = record.model_copy(update={"description": "d" * padding})
        assert len(record.to_bytes()) == MaintenanceRequest.MAX_SIZE

    def test_corrupt_bytes_fail_to_decode(self):
        with pytest.raises(RecordDecodingError):
            Property.from_bytes(b"\x00not json")
        with pytest.raises(RecordDecodingError):
            Property.from_bytes(b'{"id": 1}')

    def test_u64_fields_are_bounded(self):
        with pytest.raises(PydanticValidationError):
            Property(id=-1, address="a", owner="b", valuation=1.0, status="", created_at=0)
        with pytest.raises(PydanticValidationError):
            Property(id=U64_MAX + 1, address="a", owner="b", valuation=1.0, status="", created_at=0)
