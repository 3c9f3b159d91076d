# ================================
# TEST HELPERS (tests/helpers.py)
# ================================

from schemas import LeaseAgreementPayload, MaintenanceRequestPayload, PropertyPayload

START_TIME = 1_767_225_600


class FixedClock:
    """Clock that only moves when a test advances it."""

    def __init__(self, start: int = START_TIME):
        self.current = start

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int) -> None:
        self.current += seconds


def property_payload(**overrides) -> PropertyPayload:
    fields = dict(address="123 Main St", owner="Alice", valuation=500000.0, status="available")
    fields.update(overrides)
    return PropertyPayload(**fields)


def lease_payload(property_id: int, **overrides) -> LeaseAgreementPayload:
    fields = dict(
        property_id=property_id,
        tenant="Carol",
        rent=1800.0,
        start_date=1767225600,
        end_date=1798761600,
        digital_signature="sig-3f9a1c",
    )
    fields.update(overrides)
    return LeaseAgreementPayload(**fields)


def maintenance_payload(property_id: int, **overrides) -> MaintenanceRequestPayload:
    fields = dict(
        property_id=property_id,
        description="Leaking kitchen faucet",
        status="pending",
        priority="high",
    )
    fields.update(overrides)
    return MaintenanceRequestPayload(**fields)
