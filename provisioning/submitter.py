"""
Endorsement submission and session polling.

A ``Submitter`` is the resolved, immutable half of a ``SubmitConfig``: the
validated submit URI plus the transport that every request of one run goes
through (the POST, each poll GET, and the optional cleanup DELETE).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from urllib.parse import urljoin, urlsplit

from contracts.v1.schemas import SESSION_MEDIA_TYPE

from . import settings
from .decoder import session_from_response
from .errors import (
    PollTimeoutError,
    ProtocolError,
    ProvisioningError,
    SubmissionError,
    TransportError,
)
from .session import SessionRecord, SessionStatus
from .transport import HTTPResponse, Transport

logger = logging.getLogger(__name__)

_DELETE_OK_STATUSES = {200, 202, 204}


def extract_location(response: HTTPResponse, base_uri: str) -> str:
    """Return the ``Location`` header of ``response`` resolved against ``base_uri``."""
    location = response.header("Location")
    if not location:
        raise ProtocolError(
            "cannot determine URI for the session resource: "
            "no Location header found in response",
            status_code=response.status_code,
        )
    try:
        resolved = urljoin(base_uri, location)
        urlsplit(resolved).port  # raises on a malformed port
    except ValueError as e:
        raise ProtocolError(
            f"cannot determine URI for the session resource: {e}",
            status_code=response.status_code,
        ) from e
    return resolved


@dataclass(frozen=True)
class Submitter:
    """Runs one endorsement submission against a provisioning endpoint."""

    submit_uri: str
    transport: Transport
    delete_session: bool = False
    poll_budget: settings.PollBudget = field(default_factory=lambda: settings.DEFAULT_POLL_BUDGET)

    def run(self, payload: bytes, media_type: str) -> SessionRecord:
        """Submit ``payload`` and return the terminal session record.

        Blocks until the server reports a terminal state: immediately for a
        synchronous (200) answer, or after polling the session resource for
        an asynchronous (201) one.
        """
        try:
            res = self.transport.post_resource(payload, media_type, SESSION_MEDIA_TYPE, self.submit_uri)
        except TransportError as e:
            raise TransportError(f"submit request failed: {e}") from e

        if res.status_code not in (200, 201):
            raise ProtocolError(
                f"unexpected HTTP response code {res.status_code}",
                status_code=res.status_code,
            )

        record = session_from_response(res)

        if res.status_code == 200:
            return self._synchronous_outcome(record)

        if record.state is not SessionStatus.PROCESSING:
            raise ProtocolError(
                f'unexpected session state "{record.status}" in 201 response',
                status_code=res.status_code,
            )

        session_uri = extract_location(res, self.submit_uri)
        logger.info("Submission accepted, polling session resource %s", session_uri)

        try:
            return self.poll_until_terminal(session_uri)
        finally:
            if self.delete_session:
                self.cleanup(session_uri)

    def poll_until_terminal(self, uri: str) -> SessionRecord:
        """GET ``uri`` until its session leaves the ``processing`` state."""
        max_attempts = self.poll_budget.max_attempts

        for attempt in range(1, max_attempts):
            try:
                res = self.transport.get_resource(SESSION_MEDIA_TYPE, uri)
            except TransportError as e:
                raise TransportError(f"session resource fetch failed: {e}") from e

            if res.status_code != 200:
                raise ProtocolError(
                    f"session resource fetch returned an unexpected status: {res.status}",
                    status_code=res.status_code,
                )

            record = session_from_response(res)
            logger.debug("Poll attempt %d of %s: status=%s", attempt, uri, record.status)

            state = record.state
            if state is SessionStatus.SUCCESS:
                logger.info("Session %s completed successfully", uri)
                return record
            if state is SessionStatus.FAILED:
                raise SubmissionError(record.failure_reason)
            if state is SessionStatus.UNRECOGNIZED:
                raise ProtocolError(
                    f'unexpected session state "{record.status}" in 200 response',
                    status_code=res.status_code,
                )
            time.sleep(self.poll_budget.period_seconds)

        raise PollTimeoutError(attempts=max(0, max_attempts - 1))

    def cleanup(self, session_uri: str) -> ProvisioningError | None:
        """DELETE the session resource, best effort.

        The outcome is returned for inspection and logged on failure; it
        never raises.
        """
        try:
            res = self.transport.delete_resource(session_uri)
        except TransportError as e:
            failure: ProvisioningError = e
        else:
            if res.status_code in _DELETE_OK_STATUSES:
                logger.debug("DELETE %s: %s", session_uri, res.status)
                return None
            failure = ProtocolError(
                f"unexpected HTTP response code {res.status_code}",
                status_code=res.status_code,
            )
        logger.warning("DELETE %s failed: %s", session_uri, failure)
        return failure

    @staticmethod
    def _synchronous_outcome(record: SessionRecord) -> SessionRecord:
        state = record.state
        if state is SessionStatus.SUCCESS:
            logger.info("Submission completed synchronously")
            return record
        if state is SessionStatus.FAILED:
            raise SubmissionError(record.failure_reason)
        raise ProtocolError(
            f'unexpected session state "{record.status}" in 200 response',
            status_code=200,
        )
