"""Session record domain model and status parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionStatus(str, Enum):
    """Closed set of session states, with a fallback for anything else."""

    SUCCESS = "success"
    FAILED = "failed"
    PROCESSING = "processing"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, raw: str) -> "SessionStatus":
        """Map a wire status onto a known state, or ``UNRECOGNIZED``."""
        for member in (cls.SUCCESS, cls.FAILED, cls.PROCESSING):
            if raw == member.value:
                return member
        return cls.UNRECOGNIZED


@dataclass(frozen=True, slots=True)
class SessionRecord:
    """Server-side state of one submission, as last observed.

    ``status`` keeps the wire value verbatim so that unexpected states can
    be reported as received. ``failure_reason`` is only meaningful when the
    status is ``failed``.
    """

    status: str
    expiry: str | None = None
    failure_reason: str | None = None

    @property
    def state(self) -> SessionStatus:
        return SessionStatus.parse(self.status)
