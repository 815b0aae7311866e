"""Client-side configuration for an endorsement submission session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import SplitResult, urlsplit

from . import settings
from .auth import Authenticator
from .errors import ConfigurationError
from .session import SessionRecord
from .submitter import Submitter
from .transport import Transport, new_client, new_insecure_tls_client, new_tls_client

logger = logging.getLogger(__name__)


def _parse_absolute_uri(uri: str) -> SplitResult:
    try:
        parts = urlsplit(uri)
        parts.port  # raises on a malformed port
    except ValueError as e:
        raise ConfigurationError(f"malformed URI: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError("uri is not absolute")
    return parts


@dataclass
class SubmitConfig:
    """Everything needed to reach the provisioning ``/submit`` endpoint.

    Attributes:
        submit_uri:     Absolute URI of the submit endpoint.
        transport:      HTTP(S) transport; built on first use when unset.
        auth:           Supplies the ``Authorization`` header, when set.
        ca_certs:       Extra CA certificate paths trusted for TLS, on top of
                        the system store.
        use_tls:        Connect over TLS. Derived from the URI scheme by
                        ``set_submit_uri``.
        is_insecure:    Skip server certificate verification (TLS only).
        delete_session: DELETE the session resource once polling is over.
        poll_budget:    Overrides ``settings.DEFAULT_POLL_BUDGET``.
    """

    submit_uri: str = ""
    transport: Transport | None = None
    auth: Authenticator | None = None
    ca_certs: list[str] = field(default_factory=list)
    use_tls: bool = False
    is_insecure: bool = False
    delete_session: bool = False
    poll_budget: settings.PollBudget | None = None

    def set_submit_uri(self, uri: str) -> None:
        parts = _parse_absolute_uri(uri)
        self.use_tls = parts.scheme == "https"
        self.submit_uri = uri

    def set_transport(self, transport: Transport | None) -> None:
        if transport is None:
            raise ConfigurationError("no client supplied")
        if self.auth is not None:
            transport.auth = self.auth
        self.transport = transport

    def set_auth(self, auth: Authenticator | None) -> None:
        self.auth = auth
        if self.transport is not None:
            self.transport.auth = auth

    def set_is_insecure(self, value: bool) -> None:
        self.is_insecure = value

    def set_ca_certs(self, paths: list[str]) -> None:
        self.ca_certs = list(paths)

    def set_delete_session(self, value: bool) -> None:
        self.delete_session = value

    def set_poll_budget(self, budget: settings.PollBudget | None) -> None:
        self.poll_budget = budget

    def validate(self) -> None:
        if not self.submit_uri:
            raise ConfigurationError("bad configuration: no API endpoint")
        _parse_absolute_uri(self.submit_uri)

    def resolve_transport(self) -> Transport:
        """Return the configured transport, building and keeping one if unset."""
        if self.transport is not None:
            return self.transport

        if not self.use_tls:
            transport = new_client(self.auth)
        elif self.is_insecure:
            logger.warning("TLS certificate verification disabled for %s", self.submit_uri)
            transport = new_insecure_tls_client(self.auth)
        else:
            transport = new_tls_client(self.auth, self.ca_certs)

        self.transport = transport
        return transport

    def resolve(self) -> Submitter:
        """Validate the configuration and bind it to a transport."""
        self.validate()
        return Submitter(
            submit_uri=self.submit_uri,
            transport=self.resolve_transport(),
            delete_session=self.delete_session,
            poll_budget=self.poll_budget or settings.DEFAULT_POLL_BUDGET,
        )

    def run(self, payload: bytes, media_type: str) -> SessionRecord:
        """Submit an endorsement and return the final session record.

        See ``Submitter.run``. Raises a ``ProvisioningError`` subclass on any
        failure; a failed cleanup DELETE is only logged.
        """
        return self.resolve().run(payload, media_type)
