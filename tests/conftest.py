"""
Shared fixtures for provisioning client tests.
"""

import json
from dataclasses import dataclass, field

import pytest

from contracts.v1.schemas import SESSION_MEDIA_TYPE
from provisioning.settings import PollBudget
from provisioning.transport import HTTPResponse, Transport

EXPIRY = "2030-10-12T07:20:50.52Z"


@dataclass
class SentRequest:
    method: str
    uri: str
    body: bytes | None = None
    headers: dict[str, str] = field(default_factory=dict)


class FakeTransport(Transport):
    """Transport that replays canned responses and records what was sent.

    Each scripted item is either an ``HTTPResponse`` or an exception to raise.
    """

    def __init__(self, responses=(), *, auth=None):
        super().__init__(auth=auth)
        self.responses = list(responses)
        self.requests: list[SentRequest] = []

    def send(self, method, uri, *, body=None, headers=None):
        sent_headers = dict(headers or {})
        authorization = self._authorization()
        if authorization:
            sent_headers["Authorization"] = authorization
        self.requests.append(SentRequest(method, uri, body, sent_headers))

        if not self.responses:
            raise AssertionError(f"unexpected {method} {uri}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def methods(self) -> list[str]:
        return [r.method for r in self.requests]


@pytest.fixture
def session_response():
    """Build an ``HTTPResponse`` carrying a session resource.

    Usage:
        session_response(201, {"status": "processing"}, location="/session/1")
        session_response(200, "", content_type="text/plain")
    """
    def _make_response(
        status_code: int = 200,
        body=None,
        *,
        content_type: str | None = SESSION_MEDIA_TYPE,
        location: str | None = None,
        reason: str = "",
    ) -> HTTPResponse:
        if body is None:
            body = {"status": "success", "expiry": EXPIRY}
        if isinstance(body, dict):
            raw = json.dumps(body).encode("utf-8")
        elif isinstance(body, str):
            raw = body.encode("utf-8")
        else:
            raw = body

        headers = {}
        if content_type is not None:
            headers["Content-Type"] = content_type
        if location is not None:
            headers["Location"] = location
        return HTTPResponse(status_code=status_code, reason=reason, headers=headers, body=raw)

    return _make_response


@pytest.fixture
def fake_transport():
    """Create a ``FakeTransport`` scripted with the given responses."""
    def _make_transport(*responses, auth=None) -> FakeTransport:
        return FakeTransport(responses, auth=auth)

    return _make_transport


@pytest.fixture
def fast_budget():
    """A poll budget of three attempts (two GETs) with no delay."""
    return PollBudget(max_attempts=3, period_seconds=0)
