"""HTTP transport adapter with TLS trust configuration and header auth."""

from __future__ import annotations

import http.client
import logging
import ssl
from dataclasses import dataclass, field
from typing import Iterable, Mapping
from urllib import error, request

from .auth import Authenticator
from .errors import TransportError
from .settings import HTTP_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    """Status line, headers and fully-read body of one HTTP exchange.

    Header names are stored lower-cased; use ``header()`` for lookups.
    """

    status_code: int
    reason: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self):
        object.__setattr__(
            self,
            "headers",
            {name.lower(): value for name, value in dict(self.headers).items()},
        )

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    @property
    def status(self) -> str:
        return f"{self.status_code} {self.reason}".strip()


class Transport:
    """Blocking HTTP(S) client used for submit, poll and cleanup requests.

    Non-2xx answers are returned as ``HTTPResponse`` objects; only a request
    that cannot be sent at all raises ``TransportError``. Instances are not
    synchronised and should not be shared across threads without locking.
    """

    def __init__(
        self,
        *,
        auth: Authenticator | None = None,
        ssl_context: ssl.SSLContext | None = None,
        timeout_seconds: float = HTTP_TIMEOUT_SECONDS,
    ):
        self.auth = auth
        self.ssl_context = ssl_context
        self.timeout_seconds = timeout_seconds
        handlers = []
        if ssl_context is not None:
            handlers.append(request.HTTPSHandler(context=ssl_context))
        self._opener = request.build_opener(*handlers)

    def send(
        self,
        method: str,
        uri: str,
        *,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """Issue one request and return the response, whatever its status."""
        req_headers = dict(headers or {})
        authorization = self._authorization()
        if authorization:
            req_headers["Authorization"] = authorization

        logger.debug("HTTP %s %s (body=%d bytes)", method, uri, len(body or b""))
        try:
            req = request.Request(uri, data=body, headers=req_headers, method=method)
            with self._opener.open(req, timeout=self.timeout_seconds) as resp:
                return HTTPResponse(
                    status_code=resp.status,
                    reason=resp.reason or "",
                    headers=dict(resp.headers.items()),
                    body=resp.read(),
                )
        except error.HTTPError as e:
            return HTTPResponse(
                status_code=e.code,
                reason=str(e.reason or ""),
                headers=dict(e.headers.items()) if e.headers is not None else {},
                body=self._read_http_error_body(e),
            )
        except (error.URLError, OSError, http.client.HTTPException, ValueError) as e:
            raise TransportError(f"{method} {uri}: {self._describe(e)}") from e

    def post_resource(self, body: bytes, content_type: str, accept: str, uri: str) -> HTTPResponse:
        return self.send(
            "POST",
            uri,
            body=body,
            headers={"Content-Type": content_type, "Accept": accept},
        )

    def get_resource(self, accept: str, uri: str) -> HTTPResponse:
        return self.send("GET", uri, headers={"Accept": accept})

    def delete_resource(self, uri: str) -> HTTPResponse:
        return self.send("DELETE", uri)

    def _authorization(self) -> str:
        if self.auth is None:
            return ""
        try:
            return self.auth.encode_header()
        except ValueError as e:
            raise TransportError(f"could not produce Authorization header: {e}") from e

    @staticmethod
    def _read_http_error_body(exc: error.HTTPError) -> bytes:
        if exc.fp is None:
            return b""
        try:
            return exc.read() or b""
        except (OSError, http.client.HTTPException):
            return b""

    @staticmethod
    def _describe(exc: Exception) -> str:
        if isinstance(exc, error.URLError) and not isinstance(exc.reason, str):
            return str(exc.reason)
        return str(exc)


def new_client(
    auth: Authenticator | None = None,
    *,
    timeout_seconds: float = HTTP_TIMEOUT_SECONDS,
) -> Transport:
    """Return a transport with default TLS behaviour, for plain HTTP endpoints."""
    return Transport(auth=auth, timeout_seconds=timeout_seconds)


def new_tls_client(
    auth: Authenticator | None = None,
    ca_certs: Iterable[str] = (),
    *,
    timeout_seconds: float = HTTP_TIMEOUT_SECONDS,
) -> Transport:
    """Return a verifying TLS transport trusting system CAs plus ``ca_certs``."""
    context = ssl.create_default_context()
    for path in ca_certs:
        try:
            context.load_verify_locations(cafile=path)
        except (OSError, ssl.SSLError) as e:
            raise TransportError(f"failed to load CA certificate {path}: {e}") from e
    return Transport(auth=auth, ssl_context=context, timeout_seconds=timeout_seconds)


def new_insecure_tls_client(
    auth: Authenticator | None = None,
    *,
    timeout_seconds: float = HTTP_TIMEOUT_SECONDS,
) -> Transport:
    """Return a TLS transport that skips server certificate verification."""
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return Transport(auth=auth, ssl_context=context, timeout_seconds=timeout_seconds)
