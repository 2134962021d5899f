from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Public user representation. The password hash is never part of it."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    email: str
    role: str
    display_name: str = Field(alias="displayName")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
