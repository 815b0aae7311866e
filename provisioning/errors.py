"""
Exception hierarchy for the provisioning client.

Every failure surfaced by ``SubmitConfig.run`` inherits from
``ProvisioningError`` so callers can catch broadly or narrowly as needed.
"""

from __future__ import annotations


class ProvisioningError(Exception):
    """Base exception for provisioning client failures."""


class ConfigurationError(ProvisioningError):
    """Missing or invalid client setup, detected before any I/O."""


class TransportError(ProvisioningError):
    """A request could not be sent (network, DNS, TLS, authentication)."""


class ProtocolError(ProvisioningError):
    """The server answered but violated the expected contract."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ProtocolError):
    """The session resource body could not be decoded."""


class SubmissionError(ProvisioningError):
    """The server explicitly reported that the submission failed."""

    def __init__(self, reason: str | None = None):
        message = "submission failed"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
        self.reason = reason


class PollTimeoutError(ProvisioningError):
    """The poll budget ran out while the session was still processing."""

    def __init__(self, attempts: int):
        super().__init__("polling attempts exhausted, session resource state still not complete")
        self.attempts = attempts
