"""User Schemas."""

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    username: str
    name: str
    avatar_url: str | None = None


class UserListResponse(BaseModel):
    users: list[UserResponse]
