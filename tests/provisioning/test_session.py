"""Tests for the session record model and status parsing."""

import dataclasses

import pytest

from provisioning.session import SessionRecord, SessionStatus


def test_parse_known_statuses():
    assert SessionStatus.parse("success") is SessionStatus.SUCCESS
    assert SessionStatus.parse("failed") is SessionStatus.FAILED
    assert SessionStatus.parse("processing") is SessionStatus.PROCESSING


@pytest.mark.parametrize("raw", ["whatever", "SUCCESS", "", "unrecognized"])
def test_parse_falls_back_to_unrecognized(raw):
    assert SessionStatus.parse(raw) is SessionStatus.UNRECOGNIZED


def test_record_keeps_unrecognized_status_verbatim():
    record = SessionRecord(status="not processing")

    assert record.state is SessionStatus.UNRECOGNIZED
    assert record.status == "not processing"


def test_record_is_immutable():
    record = SessionRecord(status="processing", expiry="2030-10-12T07:20:50.52Z")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.status = "success"
