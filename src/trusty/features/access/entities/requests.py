"""Decision request and result models.

Pydantic models shared by the decision engine and the HTTP transport.
Field emptiness is checked by the engine, not here, so a malformed request
surfaces as InvalidRequestError rather than a body parsing error.
"""

from pydantic import BaseModel, ConfigDict, Field


class IsAllowedRequest(BaseModel):
    """The question being asked: may this actor do this action on this resource?"""

    model_config = ConfigDict(frozen=True)

    external_user_id: str = Field("", description="Actor id issued by the upstream identity provider")
    namespace: str = Field("", description="Namespace the request is scoped to")
    action: str = Field("", description="Requested action, e.g. 'read'")
    resource: str = Field("", description="'/'-delimited resource path, e.g. 'invoices/123'")


class IsAllowedResult(BaseModel):
    """The decision."""

    result: bool = Field(..., description="True when at least one role grants the request")
