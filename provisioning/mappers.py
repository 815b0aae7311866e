"""Mapping helpers from v1 contracts to provisioning domain records."""

from __future__ import annotations

from contracts.v1.schemas import SessionContract
from provisioning.session import SessionRecord


def contract_to_record(contract: SessionContract) -> SessionRecord:
    """Convert a v1 ``SessionContract`` to a ``SessionRecord``."""
    return SessionRecord(
        status=contract.status,
        expiry=contract.expiry,
        failure_reason=contract.failure_reason,
    )
