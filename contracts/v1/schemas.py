"""Pydantic contracts for the v1 endorsement provisioning API."""

from pydantic import BaseModel, ConfigDict, Field

SESSION_MEDIA_TYPE = "application/vnd.veraison.provisioning-session+json"


class _LenientModel(BaseModel):
    """Base model that ignores unknown fields sent by the server."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class SessionContract(_LenientModel):
    """Wire shape of the provisioning session resource."""

    status: str
    expiry: str | None = None
    failure_reason: str | None = Field(default=None, alias="failure-reason")
