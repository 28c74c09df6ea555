"""Endpoint Metadata Schemas — the shape served by GET /api."""

from pydantic import BaseModel, ConfigDict, Field


class EndpointDescription(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str
    queries: list[str] = Field(default_factory=list)
    request_body: list[str] = Field(default_factory=list, alias="requestBody")


class EndpointsResponse(BaseModel):
    endpoints: dict[str, EndpointDescription]
