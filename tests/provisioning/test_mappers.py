"""Tests for contract/record mapping helpers."""

from contracts.v1.schemas import SessionContract
from provisioning.mappers import contract_to_record
from provisioning.session import SessionRecord


def test_contract_to_record_maps_fields():
    contract = SessionContract.model_validate(
        {"status": "failed", "expiry": "2030-10-12T07:20:50.52Z", "failure-reason": "taking too long"}
    )

    record = contract_to_record(contract)

    assert record == SessionRecord(
        status="failed",
        expiry="2030-10-12T07:20:50.52Z",
        failure_reason="taking too long",
    )


def test_contract_to_record_tolerates_missing_optional_fields():
    record = contract_to_record(SessionContract.model_validate({"status": "processing"}))

    assert record == SessionRecord(status="processing")
