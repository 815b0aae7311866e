"""Decode provisioning session resources out of HTTP responses."""

from __future__ import annotations

from pydantic import ValidationError

from contracts.v1.schemas import SESSION_MEDIA_TYPE, SessionContract

from .errors import DecodeError
from .mappers import contract_to_record
from .session import SessionRecord
from .transport import HTTPResponse


def session_from_response(response: HTTPResponse) -> SessionRecord:
    """Parse a session resource body, whatever the response status code.

    The ``Content-Type`` must match the session media type exactly; unknown
    JSON fields are ignored and only ``status`` is required.
    """
    if not response.body:
        raise DecodeError("empty body")

    content_type = response.header("Content-Type") or ""
    if content_type != SESSION_MEDIA_TYPE:
        raise DecodeError(f'session resource with unexpected content type: "{content_type}"')

    try:
        contract = SessionContract.model_validate_json(response.body)
    except ValidationError as e:
        raise DecodeError(f"failure decoding session resource: {e}") from e

    return contract_to_record(contract)
