"""Authenticator port and the stock implementations shipped with the client."""

from __future__ import annotations

import base64
from typing import Protocol, runtime_checkable


@runtime_checkable
class Authenticator(Protocol):
    """Port for supplying the ``Authorization`` header of outgoing requests.

    Implementations return the full header value, or an empty string when
    no header should be sent. Raising ``ValueError`` aborts the request.
    """

    def encode_header(self) -> str:
        ...


class NullAuthenticator:
    """Sends no ``Authorization`` header."""

    def encode_header(self) -> str:
        return ""


class BasicAuthenticator:
    """HTTP Basic credentials."""

    def __init__(self, username: str = "", password: str = ""):
        self.username = username
        self.password = password

    def encode_header(self) -> str:
        if not self.username:
            raise ValueError("basic auth: username not set")
        token = base64.b64encode(f"{self.username}:{self.password}".encode("utf-8"))
        return f"Basic {token.decode('ascii')}"


class BearerAuthenticator:
    """Static bearer token, e.g. one obtained out of band from an OAuth2 server."""

    def __init__(self, token: str = ""):
        self.token = token

    def encode_header(self) -> str:
        if not self.token:
            raise ValueError("bearer auth: token not set")
        return f"Bearer {self.token}"
