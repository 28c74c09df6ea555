"""Topic Schemas."""

from pydantic import BaseModel, ConfigDict


class TopicResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    slug: str
    description: str


class TopicListResponse(BaseModel):
    topics: list[TopicResponse]
