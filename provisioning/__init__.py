"""Endorsement provisioning client: submit, poll and clean up session resources."""

__version__ = "0.1.0"

from .auth import Authenticator, BasicAuthenticator, BearerAuthenticator, NullAuthenticator
from .config import SubmitConfig
from .decoder import session_from_response
from .errors import (
    ConfigurationError,
    DecodeError,
    PollTimeoutError,
    ProtocolError,
    ProvisioningError,
    SubmissionError,
    TransportError,
)
from .session import SessionRecord, SessionStatus
from .settings import DEFAULT_POLL_BUDGET, PollBudget
from .submitter import Submitter, extract_location
from .transport import (
    HTTPResponse,
    Transport,
    new_client,
    new_insecure_tls_client,
    new_tls_client,
)

__all__ = [
    "__version__",
    "Authenticator",
    "BasicAuthenticator",
    "BearerAuthenticator",
    "NullAuthenticator",
    "SubmitConfig",
    "Submitter",
    "session_from_response",
    "extract_location",
    "ConfigurationError",
    "DecodeError",
    "PollTimeoutError",
    "ProtocolError",
    "ProvisioningError",
    "SubmissionError",
    "TransportError",
    "SessionRecord",
    "SessionStatus",
    "DEFAULT_POLL_BUDGET",
    "PollBudget",
    "HTTPResponse",
    "Transport",
    "new_client",
    "new_insecure_tls_client",
    "new_tls_client",
]
