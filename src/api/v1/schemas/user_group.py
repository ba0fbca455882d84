"""Pydantic schemas for User Group API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.user_group import UserGroup


class UserGroupCreate(BaseModel):
    """Schema for creating a user group."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    default_workspace_id: UUID | None = None


class UserGroupUpdate(BaseModel):
    """Schema for updating a user group."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)


class BulkAddUsersRequest(BaseModel):
    """Schema for adding users to a group. Repeated IDs are added repeatedly."""

    user_ids: list[UUID] = Field(default_factory=list)


class UserInGroupResponse(BaseModel):
    """Schema for a group membership."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None


class UserGroupResponse(BaseModel):
    """Schema for User Group response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None
    default_workspace_id: UUID | None
    users: list[UserInGroupResponse]
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, group: UserGroup) -> "UserGroupResponse":
        return cls.model_validate(group)


class UserGroupListResponse(BaseModel):
    """Schema for list of User Groups response."""

    data: list[UserGroupResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class UserGroupDetailResponse(BaseModel):
    """Schema for single User Group response."""

    data: UserGroupResponse
