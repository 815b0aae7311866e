"""
Process-wide defaults for the provisioning client.

Values are read from the environment once, at import time. Anything
missing or unparsable falls back to the built-in default.
"""

import os
from dataclasses import dataclass

_MAX_ATTEMPTS_ENV = "PROVISIONING_MAX_ATTEMPTS"
_POLL_PERIOD_SECONDS_ENV = "PROVISIONING_POLL_PERIOD_SECONDS"
_HTTP_TIMEOUT_SECONDS_ENV = "PROVISIONING_HTTP_TIMEOUT_SECONDS"

_DEFAULT_MAX_ATTEMPTS = 3
_DEFAULT_POLL_PERIOD_SECONDS = 1.0
_DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


def _to_int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _to_float_env(name: str, default: float, *, allow_zero: bool = False) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if value > 0 or (allow_zero and value == 0):
        return value
    return default


@dataclass(frozen=True)
class PollBudget:
    """How many times, and how often, a session resource is polled.

    Attempts run from 1 while strictly below ``max_attempts``, so at most
    ``max_attempts - 1`` GET requests are issued.
    """

    max_attempts: int = _DEFAULT_MAX_ATTEMPTS
    period_seconds: float = _DEFAULT_POLL_PERIOD_SECONDS

    @classmethod
    def from_env(cls) -> "PollBudget":
        return cls(
            max_attempts=_to_int_env(_MAX_ATTEMPTS_ENV, _DEFAULT_MAX_ATTEMPTS),
            period_seconds=_to_float_env(
                _POLL_PERIOD_SECONDS_ENV, _DEFAULT_POLL_PERIOD_SECONDS, allow_zero=True
            ),
        )


DEFAULT_POLL_BUDGET = PollBudget.from_env()

HTTP_TIMEOUT_SECONDS = _to_float_env(_HTTP_TIMEOUT_SECONDS_ENV, _DEFAULT_HTTP_TIMEOUT_SECONDS)
